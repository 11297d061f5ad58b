from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder

from services.timezones import TIMEZONES
from texts.messages import LANGUAGES, t

LANGUAGE_LABELS = {
    "ja": "🇯🇵 日本語",
    "en": "🇬🇧 English",
}


def main_menu(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.row(
        InlineKeyboardButton(text=t("menu.moon", lang),   callback_data="moon:show"),
        InlineKeyboardButton(text=t("menu.status", lang), callback_data="moon:status"),
    )
    builder.row(
        InlineKeyboardButton(text=t("menu.settings", lang), callback_data="menu:settings"),
    )
    return builder.as_markup()


def _on_off(value: bool, lang: str) -> str:
    return t("settings.on", lang) if value else t("settings.off", lang)


def settings_menu(settings: dict, lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.row(
        InlineKeyboardButton(
            text=f"{t('settings.show-status-bar', lang)}: {_on_off(settings['show_status_bar'], lang)}",
            callback_data="set:toggle:show_status_bar",
        )
    )
    builder.row(
        InlineKeyboardButton(
            text=f"{t('settings.show-percentage', lang)}: {_on_off(settings['show_percentage'], lang)}",
            callback_data="set:toggle:show_percentage",
        )
    )
    builder.row(
        InlineKeyboardButton(text=f"🕒 {t('settings.timezone', lang)}", callback_data="menu:timezone"),
        InlineKeyboardButton(text=f"🌐 {t('settings.language', lang)}", callback_data="menu:language"),
    )
    builder.row(
        InlineKeyboardButton(text=t("menu.back", lang), callback_data="menu:main"),
    )
    return builder.as_markup()


def timezone_keyboard(current: str = "system", lang: str = "en") -> InlineKeyboardMarkup:
    """All supported timezones in a 2-column grid; the current one is marked."""
    builder = InlineKeyboardBuilder()
    for i in range(0, len(TIMEZONES), 2):
        row_items = TIMEZONES[i:i + 2]
        builder.row(*[
            InlineKeyboardButton(
                text=("✅ " if tz.id == current else "")
                + (t("timezone.system-default", lang) if tz.id == "system" else tz.name),
                callback_data=f"set:timezone:{tz.id}",
            )
            for tz in row_items
        ])
    builder.row(InlineKeyboardButton(text=t("menu.back", lang), callback_data="menu:settings"))
    return builder.as_markup()


def language_keyboard(current: str = "auto", lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    options = [("auto", t("settings.language-auto", lang))]
    options += [(code, LANGUAGE_LABELS[code]) for code in LANGUAGES]
    builder.row(*[
        InlineKeyboardButton(
            text=("✅ " if code == current else "") + label,
            callback_data=f"set:language:{code}",
        )
        for code, label in options
    ])
    builder.row(InlineKeyboardButton(text=t("menu.back", lang), callback_data="menu:settings"))
    return builder.as_markup()


def back_to_main(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.row(InlineKeyboardButton(text=t("menu.back", lang), callback_data="menu:main"))
    return builder.as_markup()
