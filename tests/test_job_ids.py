import pytest

from foxyapply.discovery.job_ids import extract_job_id


@pytest.mark.parametrize(
    "href, expected",
    [
        ("/jobs/view/3847562910/", (3847562910, True)),
        ("/jobs/view/3847562910", (3847562910, True)),
        ("https://www.linkedin.com/jobs/view/4012/?refId=abc&trackingId=x", (4012, True)),
        ("/jobs/view/77/extra/segments", (77, True)),
    ],
)
def test_third_segment_is_the_job_id(href, expected):
    assert extract_job_id(href) == expected


@pytest.mark.parametrize(
    "href",
    [
        "/jobs/search/",
        "/jobs/",
        "",
        "/",
        "/jobs/view/not-a-number/",
        "/jobs/view/12abc/",
        "/jobs/view/1_000/",
        "/jobs/view//",
    ],
)
def test_short_or_non_numeric_paths_fail(href):
    assert extract_job_id(href) == (0, False)
