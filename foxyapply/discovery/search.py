"""Search results discovery"""

from urllib.parse import urlencode

from bs4 import BeautifulSoup

import foxyapply.config as config
from foxyapply.browser.scope import css
from foxyapply.discovery.job_ids import extract_job_id
from foxyapply.errors import CONTAINER_NOT_FOUND, NO_RESULTS, DiscoveryError
from foxyapply.utils.timing import pause

# Remote work-type filter value on the search page
_REMOTE_WORK_TYPE = "2"


def build_search_url(position, location, start, remote_only=False):
    """Easy Apply-only search, most recent first, starting at result offset ``start``"""
    params = {
        "f_LF": "f_AL",
        "keywords": position,
        "location": location,
        "sortBy": "DD",
        "start": start,
    }
    if remote_only:
        params["f_WT"] = _REMOTE_WORK_TYPE
    return f"{config.SEARCH_URL}?{urlencode(params)}"


def materialize_results(page):
    """
    Scroll the results feed so its lazy cards render.

    The feed only renders cards near the viewport; SCROLL_STEPS small wheel
    steps over the list container is enough for one page of results.
    """
    job_list = page.find_one(css(config.RESULTS_CONTAINER_SELECTOR), timeout_ms=config.PRESENCE_TIMEOUT)
    if job_list is None:
        raise DiscoveryError(CONTAINER_NOT_FOUND, f"no {config.RESULTS_CONTAINER_SELECTOR} on {page.url}")

    # The wheel scrolls whatever is under the pointer
    job_list.hover()

    for _ in range(config.SCROLL_STEPS):
        page.wheel(0, config.SCROLL_DELTA_PX)
        pause(config.TIMING["scroll_pause"])

    return page.html()


def parse_job_ids(html):
    """
    Extract job ids from serialized results markup.

    Returns (job_card_count, ids). A card counts when it carries data-job-id
    and holds at least one posting link.
    """
    soup = BeautifulSoup(html, "html.parser")

    card_count = 0
    ids = []
    for card in soup.select(config.JOB_CARD_SELECTOR):
        links = card.select(config.JOB_LINK_SELECTOR)
        if not links:
            continue
        card_count += 1
        for link in links:
            href = link.get("href", "")
            job_id, ok = extract_job_id(href)
            if not ok:
                print(f"  ⚠️ Failed to extract job ID from link: {href}")
                continue
            ids.append(job_id)

    return card_count, ids


def discover_job_ids(page, position, location, start, remote_only=False):
    """
    Navigate to one results page and return the job ids on it, in feed order.

    Raises DiscoveryError(CONTAINER_NOT_FOUND) when the feed is missing and
    DiscoveryError(NO_RESULTS) when it holds no job cards.
    """
    url = build_search_url(position, location, start, remote_only)
    print(f"⚪ Loading results at offset {start}: {url}")
    page.navigate(url)
    page.wait_for_network_idle()
    pause(config.TIMING["search_settle"])

    html = materialize_results(page)
    card_count, ids = parse_job_ids(html)
    if card_count == 0:
        raise DiscoveryError(NO_RESULTS, f"no job cards at offset {start}")

    print(f"  ✓ Found {len(ids)} job IDs in {card_count} cards")
    return ids
