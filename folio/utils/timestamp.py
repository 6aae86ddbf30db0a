"""Timestamp and date formatting utilities."""

from datetime import datetime

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Languages whose short month-year form is "<year>年<month>月"
CJK_YEAR_MONTH_LANGUAGES = {"zh", "ja"}


def now() -> str:
    """Current local time as a compact, sortable string (e.g. "20261019_101500")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _parse_iso_date(value: str) -> datetime:
    """
    Parse an ISO 8601 date, also accepting the reduced "YYYY-MM" form.

    Raises:
        ValueError: If the value is not a recognizable ISO date
    """
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return datetime.strptime(value, "%Y-%m")


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-")[0].lower()


def format_month_year(iso_date: str, locale: str = "en") -> str:
    """
    Format an ISO date as a short month-year display string.

    Args:
        iso_date: ISO 8601 date string (e.g. "1990-05-01" or "1990-05")
        locale: BCP 47 locale tag (e.g. "en", "en-US", "zh-CN")

    Returns:
        Locale-formatted month and year, or "" for an empty value

    Raises:
        TypeError: If iso_date is not a string
        ValueError: If iso_date cannot be parsed

    Examples:
        format_month_year("1990-05-01", "en")     # "May 1990"
        format_month_year("1990-05-01", "zh-CN")  # "1990年5月"
    """
    if iso_date is None or iso_date == "":
        return ""
    if not isinstance(iso_date, str):
        raise TypeError(f"Expected ISO date string, got {type(iso_date).__name__}")

    dt = _parse_iso_date(iso_date.strip())

    language = _language(locale or "en")
    if language in CJK_YEAR_MONTH_LANGUAGES:
        return f"{dt.year}年{dt.month}月"
    if language == "ko":
        return f"{dt.year}년 {dt.month}월"
    return f"{MONTH_ABBREVIATIONS[dt.month - 1]} {dt.year}"
