"""Shared fixtures. Offline and deterministic: no browser, no network, no real sleeps."""

import pytest

from foxyapply.data.profile import ApplicantProfile
from foxyapply.debug import unresolved_collector


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    """
    - Runs every test inside tmp_path so JSONL logs and CSVs land there.
    - Turns every pause into a no-op.
    - Resets the unresolved-field collector.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("foxyapply.utils.timing.time.sleep", lambda seconds: None)
    unresolved_collector.enable(False)
    unresolved_collector._unresolved_buffer.clear()
    yield
    unresolved_collector.enable(False)
    unresolved_collector._unresolved_buffer.clear()


@pytest.fixture
def profile():
    return ApplicantProfile(
        phone_number="555-0100",
        positions=["Backend Engineer"],
        locations=["Austin, TX"],
        remote_only=False,
        profile_url="https://www.linkedin.com/in/applicant",
        years_experience=7,
        city="Austin",
        state="TX",
        zip_code="78701",
        desired_salary=150000,
        email="applicant@example.com",
    )
