"""
Time formatting for axis ticks and tooltips, and parsing of user-entered times.

All durations are milliseconds.
"""
import re


class TimeParseError(ValueError):
    """Raised when a user-entered time string cannot be understood."""


_MIN_SEC_RE = re.compile(r"^(\d+)m\s*(\d+)s$")
_COLON_RE = re.compile(r"^(\d+):(\d+)$")
_SEC_RE = re.compile(r"^(\d+)s$")
_COLON_MSEC_RE = re.compile(r"^(\d+):(\d{2})\.(\d{1,3})$")


def format_ms_compact(ms: float) -> str:
    """Axis label, e.g. 150000 -> '2:30'."""
    total_sec = int(ms // 1000)
    m, s = divmod(total_sec, 60)
    return f"{m}:{s:02d}"


def format_ms_min_sec(ms: float) -> str:
    """Tooltip title, e.g. 150000 -> '2m 30s'."""
    total_sec = int(ms // 1000)
    m, s = divmod(total_sec, 60)
    return f"{m}m {s}s"


def format_tooltip_label(label: str, value: float) -> str:
    return f"{label}: {value:.1f}%"


def parse_time_to_ms(text: str) -> int:
    """
    Parse a time string to milliseconds.

    Accepted forms:
        "150000"    plain milliseconds
        "2:30.500"  minutes:seconds.fraction
        "2m 30s"    minutes and seconds ("2m30s" too)
        "2:30"      minutes:seconds
        "150s"      seconds

    Raises:
        TimeParseError: empty input, unknown format or seconds above 59
    """
    trimmed = text.strip()
    if not trimmed:
        raise TimeParseError("Time cannot be empty")

    # isdigit() also accepts superscripts, which int() rejects
    if trimmed.isdecimal():
        return int(trimmed)

    match = _COLON_MSEC_RE.match(trimmed)
    if match:
        minutes, seconds, frac = match.groups()
        _check_seconds(int(seconds))
        # 1 digit = tenths, 2 digits = hundredths
        millis = int(frac) * (100, 10, 1)[len(frac) - 1]
        return int(minutes) * 60_000 + int(seconds) * 1_000 + millis

    for pattern in (_MIN_SEC_RE, _COLON_RE):
        match = pattern.match(trimmed)
        if match:
            minutes, seconds = (int(g) for g in match.groups())
            _check_seconds(seconds)
            return minutes * 60_000 + seconds * 1_000

    match = _SEC_RE.match(trimmed)
    if match:
        return int(match.group(1)) * 1_000

    raise TimeParseError("Invalid time format. Use: 2:30, 2m30s, 150s, or 150000")


def _check_seconds(seconds: int) -> None:
    if seconds > 59:
        raise TimeParseError(f"Invalid seconds: {seconds} (must be 0-59)")
