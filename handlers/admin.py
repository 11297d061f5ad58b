from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from config import config
from database import get_stats
from texts.messages import ADMIN_STATS_TEMPLATE, t

router = Router()


@router.message(Command("stats"))
async def cmd_stats(message: Message):
    if message.from_user.id != config.admin_id:
        await message.answer(t("admin.not-admin", message.from_user.language_code or "en"))
        return

    stats = await get_stats()
    text = ADMIN_STATS_TEMPLATE.format(**stats)
    await message.answer(text, parse_mode="Markdown")
