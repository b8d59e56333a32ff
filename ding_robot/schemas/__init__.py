from ding_robot.schemas.message import (
    ActionCardElement,
    AtElement,
    AvatarState,
    Button,
    FeedCardElement,
    FeedLinkElement,
    LinkElement,
    MarkdownElement,
    Message,
    MessageType,
    Orientation,
    SendResponse,
    TextElement,
)

__all__ = [
    "ActionCardElement",
    "AtElement",
    "AvatarState",
    "Button",
    "FeedCardElement",
    "FeedLinkElement",
    "LinkElement",
    "MarkdownElement",
    "Message",
    "MessageType",
    "Orientation",
    "SendResponse",
    "TextElement",
]
