from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    id: str
    name: str
    is_bot: bool = False
    is_admin: bool = False

    @classmethod
    def from_api(cls, data: dict) -> "User":
        return cls(
            id=data["id"],
            name=data.get("name") or data["id"],
            is_bot=bool(data.get("is_bot")),
            is_admin=bool(data.get("is_admin")),
        )


@dataclass(frozen=True)
class Channel:
    id: str
    name: str = ""
    members: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict) -> "Channel":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            members=tuple(data.get("members") or ()),
        )


@dataclass(frozen=True)
class Message:
    user_id: str | None
    channel_id: str | None
    text: str = ""
    bot_id: str | None = None
    subtype: str | None = None

    @property
    def lowered(self) -> str:
        return self.text.lower()

    @property
    def is_blank(self) -> bool:
        return not self.text or not self.text.strip()

    @classmethod
    def from_event(cls, event: dict) -> "Message":
        return cls(
            user_id=event.get("user"),
            channel_id=event.get("channel"),
            text=event.get("text", "") or "",
            bot_id=event.get("bot_id"),
            subtype=event.get("subtype"),
        )
