import re
from datetime import datetime, timezone
from typing import Optional

import dateutil.parser as dp

# dateutil's parserinfo holds its own English month names, so LC_TIME is never consulted
DAY_MONTH_YEAR_RE = re.compile(r"^\d{1,2}-[A-Za-z]{3}-\d{4}$")


def to_utc(parsed: datetime) -> datetime:
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_iso_datetime(date_string: str) -> Optional[datetime]:
    """Parse `2018-01-13`, `1995-08-14T04:00:00Z` and the rest of the ISO-8601 family."""
    if not date_string:
        return None

    try:
        return to_utc(dp.isoparse(date_string.strip()))
    except (ValueError, OverflowError):
        return None


def parse_day_month_year(date_string: str) -> Optional[datetime]:
    """Parse `14-Feb-1999` style dates."""
    if not date_string:
        return None

    date_string = date_string.strip()
    if not DAY_MONTH_YEAR_RE.match(date_string):
        return None

    try:
        return to_utc(dp.parse(date_string, dayfirst=True))
    except (dp.ParserError, ValueError, OverflowError):
        return None
