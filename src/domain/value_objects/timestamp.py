import re
from datetime import datetime, timedelta, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# datetime keeps microseconds; transcripts may carry nanoseconds
_EXTRA_FRACTION_DIGITS = re.compile(r"(\.\d{6})\d+")


def to_epoch_millis(value: Any) -> int:
    """Convert an ISO-8601 instant to epoch milliseconds.

    Returns 0 for anything that is not an instant with an explicit UTC
    designator or offset, so callers never see a parse error.
    """
    if not isinstance(value, str) or value.strip() == "":
        return 0

    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _EXTRA_FRACTION_DIGITS.sub(r"\1", text)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return 0

    if parsed.tzinfo is None:
        return 0

    return (parsed - EPOCH) // timedelta(milliseconds=1)
