import re
from datetime import datetime, timezone

_RUN_START_RE = re.compile(r"(\d{2})Z(\d{2})([A-Za-z]{3})(\d{4})")


def bytes_to_gb(bytes: int) -> float:
    return bytes / 1024 / 1024 / 1024


def run_start_to_datetime(description: str) -> datetime | None:
    """Parse the run start out of a DODS description.

    DODS describes runs as "GFS 0.5 deg starting from 12Z17nov2024, ...".
    """
    match = _RUN_START_RE.search(description)
    if match is None:
        return None
    hour, day, month, year = match.groups()
    parsed = datetime.strptime(f"{day}{month.title()}{year}", "%d%b%Y")
    return parsed.replace(hour=int(hour), tzinfo=timezone.utc)
