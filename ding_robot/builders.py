"""
Fluent builders for robot messages.

Builders hold mutable state; ``build()`` hands out an immutable value, so a
builder may keep being used afterwards without touching what it already built.
Nothing is validated here: a ``text`` message without content is passed
through and the robot endpoint decides.
"""

from collections.abc import Iterable

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


class ActionCardBuilder:
    def __init__(
        self,
        title: str,
        text: str,
        button_orientation: Orientation = Orientation.VERTICAL,
        avatar_state: AvatarState = AvatarState.SHOW,
    ):
        self._title = title
        self._text = text
        self._button_orientation = button_orientation
        self._avatar_state = avatar_state
        self._single_title = ""
        self._single_url = ""
        self._buttons: list[Button] = []

    def single_button(self, title: str, url: str) -> "ActionCardBuilder":
        self._single_title = title
        self._single_url = url
        return self

    def button(self, title: str, url: str) -> "ActionCardBuilder":
        self._buttons.append(Button(title=title, action_url=url))
        return self

    def build(self) -> ActionCardElement:
        return ActionCardElement(
            title=self._title,
            text=self._text,
            single_title=self._single_title,
            single_url=self._single_url,
            button_orientation=self._button_orientation,
            hide_avatar=self._avatar_state,
            buttons=tuple(self._buttons),
        )


class FeedCardBuilder:
    def __init__(self):
        self._links: list[FeedLinkElement] = []

    def link(self, title: str, message_url: str, pic_url: str) -> "FeedCardBuilder":
        self._links.append(FeedLinkElement(title=title, message_url=message_url, pic_url=pic_url))
        return self

    def build(self) -> FeedCardElement:
        return FeedCardElement(links=tuple(self._links))


class MessageBuilder:
    def __init__(self, msg_type: MessageType | str):
        self._fields: dict = {"type": MessageType(msg_type)}

    def text(self, content: str) -> "MessageBuilder":
        self._fields["text"] = TextElement(content=content)
        return self

    def link(self, title: str, text: str, message_url: str, pic_url: str) -> "MessageBuilder":
        self._fields["link"] = LinkElement(
            title=title, text=text, message_url=message_url, pic_url=pic_url
        )
        return self

    def markdown(self, title: str, text: str) -> "MessageBuilder":
        self._fields["markdown"] = MarkdownElement(title=title, text=text)
        return self

    def action_card(self, element: ActionCardElement) -> "MessageBuilder":
        self._fields["action_card"] = element
        return self

    def feed_card(self, element: FeedCardElement) -> "MessageBuilder":
        self._fields["feed_card"] = element
        return self

    def at(self, mobiles: Iterable[str] | str = (), is_at_all: bool = False) -> "MessageBuilder":
        """Mention recipients by phone number, or everyone. Valid for any message type."""
        if isinstance(mobiles, str):
            mobiles = (mobiles,)
        self._fields["at"] = AtElement(at_mobiles=tuple(mobiles), is_at_all=is_at_all)
        return self

    def build(self) -> Message:
        return Message(**self._fields)
