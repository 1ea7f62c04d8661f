from datetime import datetime, timezone

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

EDITABLE_FORMAT = "%Y-%m-%d %H:%M"


def ordinal(day: int) -> str:
    """Returns the day of month with its English suffix, e.g. 1st, 12th, 22nd."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_display(dt: datetime) -> str:
    """Formats a datetime for people, e.g. 'April 5th 2024, 6:30 pm'."""
    hour = dt.hour % 12 or 12
    meridiem = "am" if dt.hour < 12 else "pm"
    return f"{_MONTHS[dt.month - 1]} {ordinal(dt.day)} {dt.year}, {hour}:{dt.minute:02d} {meridiem}"


def format_editable(dt: datetime) -> str:
    """Formats a datetime for an edit form, e.g. '2024-04-05 18:30 PM'."""
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.strftime(EDITABLE_FORMAT)} {meridiem}"


def parse_editable(s: str) -> datetime:
    """Parses the edit-form format back into a naive datetime.

    The hour may be given on a 24-hour clock ('18:30 PM') or a 12-hour clock
    ('6:30 PM'); the meridiem only shifts 12-hour values.
    """
    value, _, meridiem = s.strip().rpartition(" ")
    meridiem = meridiem.upper()
    if meridiem not in ("AM", "PM"):
        raise ValueError(f"Missing AM/PM in {s!r}")

    dt = datetime.strptime(value.strip(), EDITABLE_FORMAT)
    if meridiem == "PM" and dt.hour < 12:
        dt = dt.replace(hour=dt.hour + 12)
    elif meridiem == "AM" and dt.hour == 12:
        dt = dt.replace(hour=0)
    return dt


def parse_iso(s: str) -> datetime:
    """Parses an ISO 8601 string, handling 'Z' for UTC."""
    s = s.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


def parse_start_at(s: str) -> datetime:
    """Accepts either the edit-form format or ISO 8601."""
    try:
        return parse_editable(s)
    except ValueError:
        return parse_iso(s)


def db_naive(dt: datetime) -> datetime:
    """Converts an aware datetime to naive UTC for storage; naive values pass through."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
