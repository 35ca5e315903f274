"""Job id extraction from posting links"""

import re
from urllib.parse import urlsplit

_INTEGER = re.compile(r"[+-]?[0-9]+")


def extract_job_id(href):
    """
    Pure function: posting link -> (job_id, ok).

    Posting links look like /jobs/view/<id>/...; the id is the third path
    segment. Returns (0, False) for anything shorter or non-numeric.
    """
    try:
        path = urlsplit(href).path
    except ValueError:
        return (0, False)

    segments = path.strip("/").split("/")
    if len(segments) < 3:
        return (0, False)

    candidate = segments[2]
    if not _INTEGER.fullmatch(candidate):
        return (0, False)

    return (int(candidate), True)
