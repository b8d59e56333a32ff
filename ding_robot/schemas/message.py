"""
DingTalk robot message payloads.

The wire envelope always carries every element key regardless of ``msgtype``;
only the element matching the tag is meaningful, the rest go out zero-valued.
Field aliases are the exact DingTalk keys (note ``messageUrl`` on links vs
``messageURL`` on feed-card links).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class MessageType(str, Enum):
    TEXT = "text"
    LINK = "link"
    MARKDOWN = "markdown"
    ACTION_CARD = "actionCard"
    FEED_CARD = "feedCard"


class Orientation(str, Enum):
    VERTICAL = "0"
    HORIZONTAL = "1"


class AvatarState(str, Enum):
    SHOW = "0"
    HIDE = "1"


class TextElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    content: str = ""


class LinkElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    title: str = ""
    text: str = ""  # shown truncated when long
    message_url: str = Field(default="", alias="messageUrl")  # click-through target
    pic_url: str = Field(default="", alias="picUrl")


class MarkdownElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    title: str = ""  # preview text in the conversation list
    text: str = ""


class Button(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    title: str = ""
    action_url: str = Field(default="", alias="actionURL")


class ActionCardElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    title: str = ""
    text: str = ""
    single_title: str = Field(default="", alias="singleTitle")
    single_url: str = Field(default="", alias="singleURL")
    button_orientation: Orientation = Field(default=Orientation.VERTICAL, alias="btnOrientation")
    hide_avatar: AvatarState = Field(default=AvatarState.SHOW, alias="hideAvatar")
    buttons: tuple[Button, ...] = Field(default=(), alias="btns")


class FeedLinkElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    title: str = ""
    message_url: str = Field(default="", alias="messageURL")
    pic_url: str = Field(default="", alias="picURL")


class FeedCardElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    links: tuple[FeedLinkElement, ...] = ()


class AtElement(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    at_mobiles: tuple[str, ...] = Field(default=(), alias="atMobiles")
    is_at_all: bool = Field(default=False, alias="isAtAll")


class Message(BaseModel):
    """Envelope sent to the robot endpoint."""

    model_config = {"frozen": True, "populate_by_name": True}

    type: MessageType = Field(alias="msgtype")
    text: TextElement = TextElement()
    link: LinkElement = LinkElement()
    markdown: MarkdownElement = MarkdownElement()
    action_card: ActionCardElement = Field(default=ActionCardElement(), alias="actionCard")
    feed_card: FeedCardElement = Field(default=FeedCardElement(), alias="feedCard")
    at: AtElement = AtElement()

    def to_wire(self) -> str:
        """JSON body with DingTalk keys."""
        return self.model_dump_json(by_alias=True)


class SendResponse(BaseModel):
    """Robot endpoint reply. Missing or null fields read as zero values."""

    model_config = {"extra": "ignore"}

    errcode: int = 0
    errmsg: str = ""

    @field_validator("errcode", "errmsg", mode="before")
    @classmethod
    def _null_as_zero(cls, value, info):
        if value is None:
            return 0 if info.field_name == "errcode" else ""
        return value

    @property
    def ok(self) -> bool:
        return self.errcode == 0
