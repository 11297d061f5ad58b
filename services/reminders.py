"""APScheduler jobs: daily status digest and new/full moon notices."""
import logging
from datetime import datetime, timedelta, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import config
from database import get_status_subscribers, mark_digest_sent
from services.moon import MoonAgeInfo, MoonPhase, calculate_moon_age
from services.report import build_status_line
from services.timezones import get_date_in_timezone, resolve_language
from texts.messages import t

logger = logging.getLogger(__name__)

_scheduler: AsyncIOScheduler | None = None
_bot = None


def setup_scheduler(bot) -> AsyncIOScheduler:
    """Create and configure the scheduler. Call start() separately."""
    global _scheduler, _bot
    _bot = bot
    _scheduler = AsyncIOScheduler(timezone=timezone.utc)

    # Every update interval — per-user digest and event notices
    _scheduler.add_job(
        _status_tick,
        IntervalTrigger(minutes=config.update_interval_minutes),
        id="status_tick",
        replace_existing=True,
    )

    return _scheduler


# ─── Due-time decisions ───────────────────────────────────────────────────────

def is_digest_due(last_digest_date: str | None, local_now: datetime, digest_hour: int) -> bool:
    """True once per local day, from ``digest_hour`` onward."""
    if local_now.hour < digest_hour:
        return False
    return last_digest_date != local_now.date().isoformat()


def upcoming_event(info: MoonAgeInfo, local_now: datetime, window: timedelta) -> MoonPhase | None:
    """NEW_MOON / FULL_MOON if that event falls within ``window`` of ``local_now``."""
    candidates = [
        (info.next_new_moon, MoonPhase.NEW_MOON),
        (info.next_full_moon, MoonPhase.FULL_MOON),
    ]
    for when, phase in sorted(candidates, key=lambda c: c[0]):
        if when - local_now <= window:
            return phase
    return None


# ─── Job implementation ───────────────────────────────────────────────────────

async def _status_tick():
    if not _bot:
        return

    now = datetime.now(timezone.utc)
    window = timedelta(minutes=config.update_interval_minutes)
    users = await get_status_subscribers()
    logger.info(f"[reminders] Status tick → {len(users)} users")

    for user in users:
        tz_id = user.get("timezone") or "system"
        lang = resolve_language(tz_id, user.get("language") or "auto")
        local_now = get_date_in_timezone(tz_id, now)
        info = calculate_moon_age(local_now)

        if is_digest_due(user.get("last_digest_date"), local_now, config.digest_hour):
            line = build_status_line(info, bool(user.get("show_percentage")), lang)
            if await _send(user["user_id"], line):
                await mark_digest_sent(user["user_id"], local_now.date().isoformat())

        event = upcoming_event(info, local_now, window)
        if event is MoonPhase.NEW_MOON:
            await _send(user["user_id"], t("reminder.new-moon", lang))
        elif event is MoonPhase.FULL_MOON:
            await _send(user["user_id"], t("reminder.full-moon", lang))


async def _send(user_id: int, text: str) -> bool:
    try:
        await _bot.send_message(user_id, text, parse_mode="Markdown")
    except Exception as e:
        logger.debug(f"Cannot notify {user_id}: {e}")
        return False
    return True
