"""Application campaign: discovery pages -> one wizard run per job"""

import random
from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

import foxyapply.config as config
from foxyapply.apply.wizard import fill_out_easy_apply_form
from foxyapply.browser.scope import xpath
from foxyapply.debug import unresolved_collector
from foxyapply.discovery.search import discover_job_ids
from foxyapply.errors import NO_RESULTS, DiscoveryError, is_session_lost
from foxyapply.utils.logging import log_result
from foxyapply.utils.timing import pause

# Job outcome statuses
SUCCESS = "SUCCESS"
INCOMPLETE = "INCOMPLETE"
SKIPPED = "SKIPPED"
FAILED = "FAILED"

EASY_APPLY_ENTRY = xpath(config.EASY_APPLY_ENTRY_XPATH)


def _now():
    return datetime.now(ZoneInfo(config.TIMEZONE)).isoformat()


@dataclass
class JobOutcome:
    job_id: int
    status: str
    reason: str = ""
    timestamp: str = field(default_factory=_now)


def open_easy_apply(page):
    """Click the first "Easy Apply to ..." control on a job page. False when there is none."""
    page.wait_until_loaded()
    buttons = page.find_all(EASY_APPLY_ENTRY)
    if not buttons:
        return False
    buttons[0].click()
    return True


class Campaign:
    """
    Applies to every job one search produces, page by page.

    Runs until the feed runs dry, ``max_pages`` result pages have been read,
    ``max_applications`` jobs have been attempted, or the session's applying
    flag is cleared from outside. Losing the browser ends the run by raising.
    """

    def __init__(
        self,
        session,
        page,
        profile,
        fallback=None,
        max_pages=config.MAX_PAGES,
        max_applications=config.MAX_APPLICATIONS,
        rng=None,
    ):
        self.session = session
        self.page = page
        self.profile = profile
        self.fallback = fallback
        self.max_pages = max_pages
        self.max_applications = max_applications
        self.rng = rng or random.Random()
        self.job_ids = []
        self.outcomes = []

    def _should_stop(self):
        if not self.session.is_applying():
            print("🛑 Applying flag cleared - stopping campaign")
            return True
        if len(self.outcomes) >= self.max_applications:
            print(f"🛑 Reached {self.max_applications} applications - stopping campaign")
            return True
        return False

    def _record(self, job_id, status, reason=""):
        outcome = JobOutcome(job_id=job_id, status=status, reason=reason)
        self.outcomes.append(outcome)
        log_result(job_id, status, reason)
        return outcome

    def apply_to_job(self, job_id):
        print(f"⚪ Applying to job ID: {job_id}")
        try:
            self.page.navigate(config.JOB_VIEW_URL.format(job_id=job_id))
            pause(config.TIMING["job_settle"])

            if not open_easy_apply(self.page):
                print(f"❌ No Easy Apply button for job ID {job_id}")
                return self._record(job_id, SKIPPED, "Easy Apply button not found")

            print(f"⚪ Found Easy Apply button for job ID {job_id}, attempting to apply...")
            submitted = fill_out_easy_apply_form(self.page, self.profile, self.fallback)
        except Exception as e:
            if is_session_lost(e):
                raise
            print(f"❌ Failed to apply for job ID {job_id}: {e}")
            return self._record(job_id, FAILED, str(e))
        finally:
            if unresolved_collector.is_enabled():
                unresolved_collector.flush_unresolved_fields(job_id)

        if submitted:
            print(f"✅ Successfully applied for job ID {job_id}")
            return self._record(job_id, SUCCESS, "Application submitted")
        return self._record(job_id, INCOMPLETE, "Wizard did not reach submission")

    def run(self):
        if not self.profile.positions or not self.profile.locations:
            raise ValueError("profile needs at least one position and one location")

        position = self.rng.choice(self.profile.positions)
        location = self.rng.choice(self.profile.locations)
        print(f"⚪ Starting application bot with position: {position} in location: {location}")

        self.session.set_applying(True)
        try:
            for page_index in range(self.max_pages):
                if self._should_stop():
                    break

                start = page_index * config.JOBS_PER_PAGE
                try:
                    ids = discover_job_ids(
                        self.page, position, location, start, remote_only=self.profile.remote_only
                    )
                except DiscoveryError as e:
                    if e.reason == NO_RESULTS:
                        print("⚪ No more job results - stopping application process")
                    else:
                        print(f"❌ Discovery failed: {e}")
                    break
                except Exception as e:
                    if is_session_lost(e):
                        raise
                    print(f"❌ Discovery failed at offset {start}: {e}")
                    break

                self.job_ids.extend(ids)
                for job_id in ids:
                    if self._should_stop():
                        break
                    self.apply_to_job(job_id)
            else:
                print(f"⚪ Read {self.max_pages} result pages - stopping application process")
        finally:
            self.session.set_applying(False)

        return self.outcomes
