from dataclasses import dataclass
from dotenv import load_dotenv
import os

load_dotenv()


@dataclass
class Config:
    bot_token: str
    admin_id: int
    webhook_url: str
    database_url: str

    # Defaults for new users
    default_timezone: str = "system"
    default_language: str = "auto"

    # Scheduler
    update_interval_minutes: int = 60
    digest_hour: int = 9

    log_level: str = "INFO"


# Per-user settings and their defaults (stored in the users table)
DEFAULT_SETTINGS = {
    "show_status_bar": True,
    "show_percentage": True,
    "timezone":        "system",
    "language":        "auto",
}


def load_config() -> Config:
    return Config(
        bot_token=os.getenv("BOT_TOKEN", ""),
        admin_id=int(os.getenv("ADMIN_ID", "0")),
        webhook_url=os.getenv("WEBHOOK_URL", ""),
        database_url=os.getenv("DATABASE_URL", "moonage.db"),
        default_timezone=os.getenv("DEFAULT_TIMEZONE", "system"),
        default_language=os.getenv("DEFAULT_LANGUAGE", "auto"),
        update_interval_minutes=int(os.getenv("UPDATE_INTERVAL_MINUTES", "60")),
        digest_hour=int(os.getenv("DIGEST_HOUR", "9")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


config = load_config()
