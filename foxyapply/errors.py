"""Error types raised by the campaign"""

CONTAINER_NOT_FOUND = "ContainerNotFound"
NO_RESULTS = "NoResults"


class DiscoveryError(Exception):
    """A discovery call could not produce job ids.

    ``reason`` is one of CONTAINER_NOT_FOUND or NO_RESULTS. NO_RESULTS means
    the feed ran out, not that something broke.
    """

    def __init__(self, reason, message=""):
        self.reason = reason
        super().__init__(f"{reason}: {message}" if message else reason)


_SESSION_LOST_MARKERS = (
    "Target page, context or browser has been closed",
    "Browser has been closed",
    "Target closed",
    "Connection closed",
)


def is_session_lost(exc):
    """True when ``exc`` means the browser session is gone and the run must end"""
    if type(exc).__name__ == "TargetClosedError":
        return True
    message = str(exc)
    return any(marker in message for marker in _SESSION_LOST_MARKERS)
