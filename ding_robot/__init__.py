from ding_robot.builders import ActionCardBuilder, FeedCardBuilder, MessageBuilder
from ding_robot.client import BASE_SEND_URL, DingRobot
from ding_robot.errors import DingRobotError, RemoteError, SerializationError, TransportError
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
    TextElement,
)

__all__ = [
    "BASE_SEND_URL",
    "ActionCardBuilder",
    "ActionCardElement",
    "AtElement",
    "AvatarState",
    "Button",
    "DingRobot",
    "DingRobotError",
    "FeedCardBuilder",
    "FeedCardElement",
    "FeedLinkElement",
    "LinkElement",
    "MarkdownElement",
    "Message",
    "MessageBuilder",
    "MessageType",
    "Orientation",
    "RemoteError",
    "SerializationError",
    "TextElement",
    "TransportError",
]
