import logging

from aiogram import Router, F
from aiogram.filters import Command
from aiogram.types import Message, CallbackQuery

from keyboards.menus import back_to_main
from services.profile import ensure_user, load_user_context, moon_info_for
from services.report import build_moon_report, build_status_line

logger = logging.getLogger(__name__)
router = Router()


async def _render(user, detailed: bool) -> tuple[str, str]:
    settings, lang = await load_user_context(user.id, user.language_code)
    info = moon_info_for(settings)
    logger.debug(f"Moon info for {user.id}: age={info.age} phase={info.phase.value}")
    if detailed:
        return build_moon_report(info, lang, settings["timezone"]), lang
    return build_status_line(info, settings["show_percentage"], lang), lang


# ─── /moon — full report ──────────────────────────────────────────────────────

@router.message(Command("moon"))
async def cmd_moon(message: Message):
    await ensure_user(message.from_user.id, message.from_user.username)
    text, lang = await _render(message.from_user, detailed=True)
    await message.answer(text, reply_markup=back_to_main(lang), parse_mode="Markdown")


@router.callback_query(F.data == "moon:show")
async def cb_moon(callback: CallbackQuery):
    text, lang = await _render(callback.from_user, detailed=True)
    await callback.message.edit_text(text, reply_markup=back_to_main(lang), parse_mode="Markdown")
    await callback.answer()


# ─── /status — one-line summary ───────────────────────────────────────────────

@router.message(Command("status"))
async def cmd_status(message: Message):
    await ensure_user(message.from_user.id, message.from_user.username)
    text, _ = await _render(message.from_user, detailed=False)
    await message.answer(text)


@router.callback_query(F.data == "moon:status")
async def cb_status(callback: CallbackQuery):
    text, _ = await _render(callback.from_user, detailed=False)
    await callback.answer(text, show_alert=True)
