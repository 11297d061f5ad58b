import logging

from aiogram import Router, F
from aiogram.filters import Command
from aiogram.types import Message, CallbackQuery

from database import get_settings, update_setting
from keyboards.menus import language_keyboard, settings_menu, timezone_keyboard
from services.profile import ensure_user, load_user_context
from services.timezones import get_timezone_info
from texts.messages import LANGUAGES, t

logger = logging.getLogger(__name__)
router = Router()

TOGGLES = ("show_status_bar", "show_percentage")


def _settings_text(lang: str) -> str:
    return (
        f"{t('settings.title', lang)}\n\n"
        f"• {t('settings.show-status-bar-desc', lang)}\n"
        f"• {t('settings.show-percentage-desc', lang)}\n"
        f"• {t('settings.timezone-desc', lang)}"
    )


async def _show_settings(callback: CallbackQuery):
    settings, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.message.edit_text(
        _settings_text(lang),
        reply_markup=settings_menu(settings, lang),
        parse_mode="Markdown",
    )


# ─── /settings ────────────────────────────────────────────────────────────────

@router.message(Command("settings"))
async def cmd_settings(message: Message):
    user = message.from_user
    await ensure_user(user.id, user.username)
    settings, lang = await load_user_context(user.id, user.language_code)
    await message.answer(
        _settings_text(lang),
        reply_markup=settings_menu(settings, lang),
        parse_mode="Markdown",
    )


@router.callback_query(F.data == "menu:settings")
async def cb_settings(callback: CallbackQuery):
    await _show_settings(callback)
    await callback.answer()


@router.callback_query(F.data == "menu:timezone")
async def cb_timezone_menu(callback: CallbackQuery):
    settings, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.message.edit_text(
        t("settings.timezone-desc", lang),
        reply_markup=timezone_keyboard(settings["timezone"], lang),
    )
    await callback.answer()


@router.callback_query(F.data == "menu:language")
async def cb_language_menu(callback: CallbackQuery):
    settings, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.message.edit_text(
        t("settings.language", lang),
        reply_markup=language_keyboard(settings["language"], lang),
    )
    await callback.answer()


# ─── Setting changes ──────────────────────────────────────────────────────────

@router.callback_query(F.data.startswith("set:toggle:"))
async def cb_toggle(callback: CallbackQuery):
    key = callback.data.split(":", 2)[2]
    if key not in TOGGLES:
        await callback.answer()
        return
    settings = await get_settings(callback.from_user.id)
    await update_setting(callback.from_user.id, key, not settings[key])
    logger.info(f"User {callback.from_user.id} set {key}={not settings[key]}")
    await _show_settings(callback)
    await callback.answer()


@router.callback_query(F.data.startswith("set:timezone:"))
async def cb_set_timezone(callback: CallbackQuery):
    timezone_id = callback.data.split(":", 2)[2]
    if get_timezone_info(timezone_id) is None:
        await callback.answer()
        return
    await update_setting(callback.from_user.id, "timezone", timezone_id)
    logger.info(f"User {callback.from_user.id} set timezone={timezone_id}")
    await _show_settings(callback)
    _, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.answer(t("settings.saved", lang))


@router.callback_query(F.data.startswith("set:language:"))
async def cb_set_language(callback: CallbackQuery):
    language = callback.data.split(":", 2)[2]
    if language != "auto" and language not in LANGUAGES:
        await callback.answer()
        return
    await update_setting(callback.from_user.id, "language", language)
    logger.info(f"User {callback.from_user.id} set language={language}")
    await _show_settings(callback)
    _, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.answer(t("settings.saved", lang))
