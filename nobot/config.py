"""
Configuration and environment variable validation.
"""
import os
import sys
from dataclasses import dataclass

from nobot.constants import DEFAULT_BOT_ALIASES, DEFAULT_BOT_NAME, DEFAULT_MONGO_DB_NAME
from nobot.logger import logger


@dataclass(frozen=True)
class BotNames:
    """The names the bot answers to. `primary` is its own name, used to avoid self-triggering."""

    primary: str
    aliases: tuple[str, ...] = ()

    @property
    def all(self) -> tuple[str, ...]:
        names = [self.primary]
        for alias in self.aliases:
            if alias and alias not in names:
                names.append(alias)
        return tuple(names)


def validate_environment_variables() -> None:
    """
    Validate all required environment variables at startup.
    Exits the application with a clear error message if any are missing.
    """
    required_vars = {
        "SLACK_BOT_TOKEN": "Slack bot token for authentication",
        "SLACK_SIGNING_SECRET": "Slack signing secret for request verification",
        "MONGO_URL": "MongoDB connection URL",
    }

    optional_vars = {
        "MONGO_DB_NAME": f"MongoDB database name (defaults to {DEFAULT_MONGO_DB_NAME})",
        "BOT_NAME": f"Name the bot answers to (defaults to {DEFAULT_BOT_NAME})",
        "BOT_ALIASES": "Comma-separated extra names the bot answers to",
        "PORT": "Server port (defaults to 3000 if not set)",
        "ENV": "Environment (prod/dev, defaults to dev if not set)",
    }

    missing_vars = []

    for var_name, description in required_vars.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            missing_vars.append(f"  - {var_name}: {description}")
            logger.error(f"Missing required environment variable: {var_name}")

    if missing_vars:
        error_message = (
            "Missing required environment variables:\n"
            + "\n".join(missing_vars)
            + "\n\nPlease set these variables before starting the application."
        )
        logger.critical(error_message)
        print(error_message, file=sys.stderr)
        sys.exit(1)

    # Log optional variables status
    for var_name, description in optional_vars.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            logger.info(f"Optional environment variable not set: {var_name} - {description}")
        else:
            logger.debug(f"Environment variable set: {var_name}")

    logger.info("Environment variable validation completed successfully")


def get_bot_names() -> BotNames:
    """Read BOT_NAME / BOT_ALIASES, lowercased since rules match against lowercased text."""
    primary = (os.getenv("BOT_NAME") or DEFAULT_BOT_NAME).strip().lower() or DEFAULT_BOT_NAME

    raw_aliases = os.getenv("BOT_ALIASES")
    if raw_aliases is None:
        aliases = DEFAULT_BOT_ALIASES
    else:
        aliases = tuple(a.strip().lower() for a in raw_aliases.split(",") if a.strip())

    return BotNames(primary=primary, aliases=aliases)


def get_mongo_db_name() -> str:
    return (os.getenv("MONGO_DB_NAME") or DEFAULT_MONGO_DB_NAME).strip()
