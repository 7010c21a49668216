from __future__ import annotations

from .config import settings
from .bot.startup import build_bot
from patchnotes_core.logging import setup_logging


def main() -> None:
    setup_logging()
    if not settings.discord_token:
        raise SystemExit("APP_DISCORD_TOKEN is not set")
    bot = build_bot()
    bot.run(settings.discord_token, log_handler=None)
