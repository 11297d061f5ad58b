"""Supported timezones, civil "now" in a zone, and locale-aware date formatting."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimezoneInfo:
    id: str
    name: str
    timezone: str
    hemisphere: str  # "north" | "south"


TIMEZONES = [
    TimezoneInfo("system",       "System Default", "",                    "north"),
    TimezoneInfo("japan",        "Japan",          "Asia/Tokyo",          "north"),
    TimezoneInfo("us",           "United States",  "America/New_York",    "north"),
    TimezoneInfo("uk",           "United Kingdom", "Europe/London",       "north"),
    TimezoneInfo("germany",      "Germany",        "Europe/Berlin",       "north"),
    TimezoneInfo("france",       "France",         "Europe/Paris",        "north"),
    TimezoneInfo("australia",    "Australia",      "Australia/Sydney",    "south"),
    TimezoneInfo("china",        "China",          "Asia/Shanghai",       "north"),
    TimezoneInfo("india",        "India",          "Asia/Kolkata",        "north"),
    TimezoneInfo("brazil",       "Brazil",         "America/Sao_Paulo",   "south"),
    TimezoneInfo("canada",       "Canada",         "America/Toronto",     "north"),
    TimezoneInfo("mexico",       "Mexico",         "America/Mexico_City", "north"),
    TimezoneInfo("korea",        "Korea",          "Asia/Seoul",          "north"),
    TimezoneInfo("singapore",    "Singapore",      "Asia/Singapore",      "north"),
    TimezoneInfo("new-zealand",  "New Zealand",    "Pacific/Auckland",    "south"),
    TimezoneInfo("south-africa", "South Africa",   "Africa/Johannesburg", "south"),
    TimezoneInfo("russia",       "Russia",         "Europe/Moscow",       "north"),
]

JAPANESE_TIMEZONES = {"Asia/Tokyo"}


def get_timezone_info(timezone_id: str) -> TimezoneInfo | None:
    for tz in TIMEZONES:
        if tz.id == timezone_id:
            return tz
    return None


def get_hemisphere(timezone_id: str) -> str:
    tz = get_timezone_info(timezone_id)
    return tz.hemisphere if tz else "north"


def get_date_in_timezone(timezone_id: str, now: datetime | None = None) -> datetime:
    """Naive civil date-time in the given timezone.

    ``now`` is an aware instant (defaults to the current UTC time). The
    "system" id and unknown ids use the server's local zone.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    tz = get_timezone_info(timezone_id)
    if tz is None or not tz.timezone:
        return now.astimezone().replace(tzinfo=None)

    try:
        zone = ZoneInfo(tz.timezone)
    except ZoneInfoNotFoundError:
        logger.warning(f"Timezone data missing for {tz.timezone}, using system time")
        return now.astimezone().replace(tzinfo=None)
    return now.astimezone(zone).replace(tzinfo=None)


# ─── Locale & formatting ──────────────────────────────────────────────────────

def get_locale(timezone_id: str, lang: str = "auto", user_language: str | None = None) -> str:
    """'ja-JP' or 'en-US'.

    An explicit language wins. With 'auto', the system timezone follows the
    user's Telegram language; other timezones pick Japanese only for Japan.
    """
    if lang and lang != "auto":
        return "ja-JP" if lang == "ja" else "en-US"

    if timezone_id == "system":
        if user_language and user_language.startswith("ja"):
            return "ja-JP"
        return "en-US"

    tz = get_timezone_info(timezone_id)
    if tz is None or not tz.timezone:
        return "en-US"
    if tz.timezone in JAPANESE_TIMEZONES:
        return "ja-JP"
    return "en-US"


def resolve_language(timezone_id: str, lang: str = "auto", user_language: str | None = None) -> str:
    return get_locale(timezone_id, lang, user_language).split("-")[0]


def format_date(dt: datetime, locale: str) -> str:
    if locale == "ja-JP":
        return f"{dt.year}年{dt.month}月{dt.day}日 {dt:%H:%M:%S}"
    return f"{dt:%b} {dt.day}, {dt.year}, {dt:%I:%M:%S %p}"
