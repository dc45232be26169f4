"""Display formatting helpers for money and timestamps."""
from datetime import datetime, timezone
import pytz

from rental_agency.utils.constants import DEFAULT_TIMEZONE


def fmt_money(value) -> str:
    """Format a cost for display: 180 -> '$180.00'. Non-numbers are shown as-is."""
    try:
        return f"${float(value):,.2f}"
    except (TypeError, ValueError):
        return str(value)


def fmt_iso_local(value, tz_name: str = DEFAULT_TIMEZONE, use_12h: bool = False) -> str:
    """
    Format an ISO-8601 timestamp into local time of `tz_name`.
    Supports:
      - 'YYYY-MM-DDTHH:MM:SS' and 'YYYY-MM-DD HH:MM:SS'
      - Above with 'Z' or timezone offsets like '+00:00'
    Naive values are taken as UTC. On parse error, returns the original value
    (so the output never goes blank).
    """
    if value is None:
        return ""

    s = str(value).strip()
    if not s:
        return ""

    # Normalize: handle trailing 'Z'
    s_norm = s.replace("T", " ")
    if s_norm.endswith("Z"):
        s_norm = s_norm[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(s_norm)
    except ValueError:
        return s

    # If naive datetime, assume UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    local = dt.astimezone(tz)

    if use_12h:
        # Avoid %-I (not portable on Windows). Strip any leading zero manually.
        hh = local.strftime("%I").lstrip("0") or "0"
        return f"{local.strftime('%d %b %Y')}, {hh}:{local.strftime('%M %p')}"
    return local.strftime("%d/%m/%Y %H:%M")
