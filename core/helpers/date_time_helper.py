"""
date_time_helper.py

Conversion and formatting of date and time values. Storage is always UTC
(ISO strings for logs, epoch milliseconds for attendance records); display
uses the local timezone below.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

# Local timezone for display
LOCAL_TZ = ZoneInfo("America/Argentina/Buenos_Aires")


def utc_now_iso() -> str:
    """Current UTC time as ISO8601 string without microseconds."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def now_epoch_ms() -> int:
    """Current UTC time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def utc_to_local_str(utc_iso: str) -> str:
    """
    Formats a UTC ISO8601 timestamp for display.

    :param utc_iso: UTC time as ISO string (from DB/logs)
    :return: "DD/MM/YYYY HH:mm:ss" in local time
    """
    dt_utc = datetime.fromisoformat(utc_iso)
    return dt_utc.astimezone(LOCAL_TZ).strftime("%d/%m/%Y %H:%M:%S")


def epoch_ms_to_local_date_str(epoch_ms: int) -> str:
    """Epoch milliseconds as local "DD/MM/YYYY" date."""
    dt_utc = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return dt_utc.astimezone(LOCAL_TZ).strftime("%d/%m/%Y")
