"""Exception types raised by the Today API."""
from typing import Sequence


class TodayApiError(Exception):
    """Base error."""


class TimezoneResolutionError(TodayApiError):
    """Raised when the configured timezone cannot be found under any naming scheme."""

    def __init__(self, timezone_id: str, schemes_tried: Sequence[str]):
        self.timezone_id = timezone_id
        self.schemes_tried = tuple(schemes_tried)
        super().__init__(
            f"Unable to resolve timezone '{timezone_id}' "
            f"(tried: {', '.join(self.schemes_tried)})"
        )
