from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from nobot.logger import logger


class SlackTransport:
    """Posts replies. Failures are logged, never retried or reported back to the user."""

    def __init__(self, client: AsyncWebClient):
        self.client = client

    async def send_message(self, text: str, channel_id: str) -> str | None:
        try:
            response = await self.client.chat_postMessage(channel=channel_id, text=text)
        except SlackApiError as e:
            logger.error("Failed to send message to %s: %s", channel_id, e.response.get("error"))
            return None
        logger.debug("Sent message to %s (ts=%s)", channel_id, response.get("ts"))
        return response.get("ts")
