"""
Startup logging: who we are, where we are, and who is in each channel.
"""

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from nobot.directory import SlackDirectory
from nobot.logger import logger


async def identify_bot(client: AsyncWebClient) -> str | None:
    """Log the team and bot name, return the bot's own user id."""
    try:
        response = await client.auth_test()
    except SlackApiError as e:
        logger.error("auth.test failed: %s", e.response.get("error"))
        return None
    logger.info(f"Connected to {response.get('team')} as {response.get('user')}")
    return response.get("user_id")


async def log_workspace_summary(directory: SlackDirectory) -> None:
    try:
        channels = await directory.member_channels()
    except SlackApiError as e:
        logger.error("Could not list channels: %s", e.response.get("error"))
        return

    logger.info("Currently in: %s", ", ".join(channel.name for channel in channels))

    for channel in channels:
        humans = []
        for member_id in channel.members:
            user = await directory.get_user(member_id)
            if user is not None and not user.is_bot:
                humans.append(user.name)
        logger.info("Members of %s: %s", channel.name, ", ".join(humans))
