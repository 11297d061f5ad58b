"""Rendering of MoonAgeInfo: the compact status line and the full report."""
from services.moon import MoonAgeInfo
from services.phases import get_phase_emoji, get_phase_name
from services.timezones import format_date, get_hemisphere, get_locale
from texts.messages import t


def build_status_line(info: MoonAgeInfo, show_percentage: bool = True, lang: str = "en") -> str:
    line = f"{get_phase_emoji(info.phase)} {info.age:.2f}{t('status.day-unit', lang)}"
    if show_percentage:
        line += f" {info.illumination:.2f}%"
    return line


def build_moon_report(info: MoonAgeInfo, lang: str = "en", timezone_id: str = "system") -> str:
    locale = get_locale(timezone_id, lang)
    hemisphere_key = (
        "modal.hemisphere-south"
        if get_hemisphere(timezone_id) == "south"
        else "modal.hemisphere-north"
    )

    return (
        f"*{t('modal.title', lang)}*\n\n"
        f"{get_phase_emoji(info.phase)} *{get_phase_name(info.phase, lang)}*\n\n"
        f"{t('modal.age', lang)}: {info.age} {t('modal.days', lang)}\n"
        f"{t('modal.illumination', lang)}: {info.illumination}%\n"
        f"{t('modal.next-new-moon', lang)}: {format_date(info.next_new_moon, locale)}\n"
        f"{t('modal.next-full-moon', lang)}: {format_date(info.next_full_moon, locale)}\n"
        f"{t('modal.hemisphere', lang)}: {t(hemisphere_key, lang)}"
    )
