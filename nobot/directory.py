"""
Slack user/channel directory with an in-memory cache.
"""

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from nobot.logger import logger
from nobot.models import Channel, User


class SlackDirectory:
    def __init__(self, client: AsyncWebClient):
        self.client = client
        self._users: dict[str, User] = {}
        self._channels: dict[str, Channel] = {}
        self._dms: dict[str, str] = {}

    async def get_user(self, user_id: str) -> User | None:
        if user_id in self._users:
            return self._users[user_id]
        try:
            response = await self.client.users_info(user=user_id)
        except SlackApiError as e:
            logger.warning("Could not look up user %s: %s", user_id, e.response.get("error"))
            return None
        user = User.from_api(response["user"])
        self._users[user_id] = user
        return user

    async def get_channel(self, channel_id: str) -> Channel | None:
        """Channel, private group or DM by id."""
        if channel_id in self._channels:
            return self._channels[channel_id]
        try:
            response = await self.client.conversations_info(channel=channel_id)
        except SlackApiError as e:
            logger.warning("Could not look up channel %s: %s", channel_id, e.response.get("error"))
            return None
        channel = Channel.from_api(response["channel"])
        self._channels[channel_id] = channel
        return channel

    async def open_dm(self, user: User) -> str | None:
        """Id of the direct-message conversation with `user`."""
        if user.id in self._dms:
            return self._dms[user.id]
        try:
            response = await self.client.conversations_open(users=user.id)
        except SlackApiError as e:
            logger.warning("Could not open DM with %s: %s", user.name, e.response.get("error"))
            return None
        dm_id = response["channel"]["id"]
        self._dms[user.id] = dm_id
        return dm_id

    async def member_channels(self) -> list[Channel]:
        """Channels the bot is a member of, with their member ids filled in."""
        channels = []
        cursor = None
        while True:
            response = await self.client.conversations_list(
                types="public_channel,private_channel",
                exclude_archived=True,
                cursor=cursor,
            )
            for data in response["channels"]:
                if not data.get("is_member"):
                    continue
                members = await self.client.conversations_members(channel=data["id"])
                channel = Channel.from_api({**data, "members": members["members"]})
                self._channels[channel.id] = channel
                channels.append(channel)
            cursor = (response.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                return channels
