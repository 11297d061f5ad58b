from aiogram import Router, F
from aiogram.filters import CommandStart
from aiogram.types import Message, CallbackQuery

from keyboards.menus import main_menu
from services.profile import ensure_user, load_user_context
from texts.messages import t

router = Router()


# ─── /start ───────────────────────────────────────────────────────────────────

@router.message(CommandStart())
async def cmd_start(message: Message):
    user = message.from_user
    await ensure_user(user.id, user.username)
    _, lang = await load_user_context(user.id, user.language_code)
    await message.answer(t("welcome", lang), reply_markup=main_menu(lang), parse_mode="Markdown")


# ─── Main menu callback ───────────────────────────────────────────────────────

@router.callback_query(F.data == "menu:main")
async def cb_main_menu(callback: CallbackQuery):
    _, lang = await load_user_context(callback.from_user.id, callback.from_user.language_code)
    await callback.message.edit_text(
        t("welcome", lang), reply_markup=main_menu(lang), parse_mode="Markdown"
    )
    await callback.answer()
