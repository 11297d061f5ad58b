import aiosqlite
from typing import Optional
from config import config, DEFAULT_SETTINGS


DB_PATH = config.database_url

SETTING_KEYS = tuple(DEFAULT_SETTINGS)


def default_settings() -> dict:
    return {
        **DEFAULT_SETTINGS,
        "timezone": config.default_timezone,
        "language": config.default_language,
    }


async def init_db():
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                user_id          INTEGER PRIMARY KEY,
                username         TEXT,
                created_at       TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                show_status_bar  BOOLEAN DEFAULT TRUE,
                show_percentage  BOOLEAN DEFAULT TRUE,
                timezone         TEXT DEFAULT 'system',
                language         TEXT DEFAULT 'auto',
                last_digest_date DATE
            )
        """)
        await db.commit()


# ─── User helpers ────────────────────────────────────────────────────────────

async def get_user(user_id: int) -> Optional[dict]:
    async with aiosqlite.connect(DB_PATH) as db:
        db.row_factory = aiosqlite.Row
        async with db.execute(
            "SELECT * FROM users WHERE user_id = ?", (user_id,)
        ) as cursor:
            row = await cursor.fetchone()
            return dict(row) if row else None


async def create_user(user_id: int, username: Optional[str]):
    defaults = default_settings()
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute(
            """
            INSERT OR IGNORE INTO users
                (user_id, username, show_status_bar, show_percentage, timezone, language)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                username,
                defaults["show_status_bar"],
                defaults["show_percentage"],
                defaults["timezone"],
                defaults["language"],
            ),
        )
        await db.commit()


async def update_username(user_id: int, username: Optional[str]):
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute(
            "UPDATE users SET username = ? WHERE user_id = ?",
            (username, user_id),
        )
        await db.commit()


# ─── Settings helpers ────────────────────────────────────────────────────────

async def get_settings(user_id: int) -> dict:
    """User settings with defaults filled in for unknown users."""
    settings = default_settings()
    user = await get_user(user_id)
    if user:
        for key in SETTING_KEYS:
            if user.get(key) is not None:
                settings[key] = user[key]
    settings["show_status_bar"] = bool(settings["show_status_bar"])
    settings["show_percentage"] = bool(settings["show_percentage"])
    return settings


async def update_setting(user_id: int, key: str, value):
    if key not in SETTING_KEYS:
        raise ValueError(f"Unknown setting: {key}")
    async with aiosqlite.connect(DB_PATH) as db:
        # key is whitelisted above
        await db.execute(
            f"UPDATE users SET {key} = ? WHERE user_id = ?",
            (value, user_id),
        )
        await db.commit()


async def get_status_subscribers() -> list[dict]:
    async with aiosqlite.connect(DB_PATH) as db:
        db.row_factory = aiosqlite.Row
        async with db.execute(
            "SELECT * FROM users WHERE show_status_bar = TRUE"
        ) as cursor:
            rows = await cursor.fetchall()
            return [dict(r) for r in rows]


async def mark_digest_sent(user_id: int, day: str):
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute(
            "UPDATE users SET last_digest_date = ? WHERE user_id = ?",
            (day, user_id),
        )
        await db.commit()


# ─── Stats helpers ────────────────────────────────────────────────────────────

async def get_stats() -> dict:
    async with aiosqlite.connect(DB_PATH) as db:
        db.row_factory = aiosqlite.Row

        async with db.execute("SELECT COUNT(*) as cnt FROM users") as cur:
            total_users = (await cur.fetchone())["cnt"]

        async with db.execute(
            "SELECT COUNT(*) as cnt FROM users WHERE show_status_bar = TRUE"
        ) as cur:
            status_enabled = (await cur.fetchone())["cnt"]

        langs = {}
        async with db.execute(
            "SELECT language, COUNT(*) as cnt FROM users GROUP BY language"
        ) as cur:
            for row in await cur.fetchall():
                langs[row["language"]] = row["cnt"]

    return {
        "total_users": total_users,
        "status_enabled": status_enabled,
        "lang_ja": langs.get("ja", 0),
        "lang_en": langs.get("en", 0),
        "lang_auto": langs.get("auto", 0),
    }
