"""
DingTalk output: fire-and-report helpers on top of DingRobot.

Unlike ``DingRobot.send`` these never raise for delivery problems; the outcome
is reported in a SendResult so callers notifying from background jobs can log
and move on.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from ding_robot.builders import MessageBuilder
from ding_robot.client import DingRobot
from ding_robot.errors import DingRobotError, RemoteError
from ding_robot.schemas.message import Message, MessageType

logger = structlog.get_logger()


@dataclass(frozen=True)
class SendResult:
    msgtype: str
    success: bool
    target: str  # send URL with the token masked
    error: str | None = None
    errcode: int | None = None  # only for RemoteError


def text_message(
    content: str, at_mobiles: Iterable[str] = (), is_at_all: bool = False
) -> Message:
    return MessageBuilder(MessageType.TEXT).text(content).at(at_mobiles, is_at_all).build()


def markdown_message(
    title: str, text: str, at_mobiles: Iterable[str] = (), is_at_all: bool = False
) -> Message:
    return (
        MessageBuilder(MessageType.MARKDOWN)
        .markdown(title, text)
        .at(at_mobiles, is_at_all)
        .build()
    )


async def send_dingtalk(robot: DingRobot, message: Message | str) -> SendResult:
    """Send a message (or plain text) and report the outcome.

    Args:
        robot: Configured robot.
        message: A built Message, or a string sent as a text message.
    """
    if isinstance(message, str):
        message = text_message(message)

    target = robot.masked_url
    msgtype = message.type.value
    try:
        await robot.asend(message)
    except DingRobotError as e:
        errcode = e.errcode if isinstance(e, RemoteError) else None
        logger.warning("output.dingtalk.failed", target=target, msgtype=msgtype, error=str(e))
        return SendResult(msgtype, success=False, target=target, error=str(e), errcode=errcode)

    logger.info("output.dingtalk.sent", target=target, msgtype=msgtype)
    return SendResult(msgtype, success=True, target=target)
