"""Per-user context: settings, resolved language, civil time in the user's zone."""
from datetime import datetime

from database import create_user, get_settings, update_username
from services.moon import MoonAgeInfo, calculate_moon_age
from services.timezones import get_date_in_timezone, resolve_language


async def ensure_user(user_id: int, username: str | None):
    """Create user if not exists, keep the username fresh."""
    await create_user(user_id, username)
    await update_username(user_id, username)


async def load_user_context(user_id: int, user_language: str | None = None) -> tuple[dict, str]:
    """Returns (settings, lang) where lang is 'ja' or 'en'."""
    settings = await get_settings(user_id)
    lang = resolve_language(settings["timezone"], settings["language"], user_language)
    return settings, lang


def moon_info_for(settings: dict, now: datetime | None = None) -> MoonAgeInfo:
    return calculate_moon_age(get_date_in_timezone(settings["timezone"], now))
