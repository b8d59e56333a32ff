import json

import httpx
import pytest
import respx
from httpx import Response

from ding_robot.client import DingRobot
from ding_robot.output.dingtalk import markdown_message, send_dingtalk, text_message
from ding_robot.schemas.message import MessageType

SEND_URL = "https://oapi.dingtalk.com/robot/send?access_token=TOKEN-0001"


@pytest.fixture
def robot() -> DingRobot:
    return DingRobot("TOKEN-0001")


def test_text_message():
    message = text_message("deploy done", at_mobiles=["13800000000"])
    assert message.type is MessageType.TEXT
    assert message.text.content == "deploy done"
    assert message.at.at_mobiles == ("13800000000",)
    assert message.at.is_at_all is False


def test_markdown_message_at_all():
    message = markdown_message("Report", "## ok", is_at_all=True)
    assert message.type is MessageType.MARKDOWN
    assert message.markdown.title == "Report"
    assert message.at.is_at_all is True


@pytest.mark.asyncio
@respx.mock
async def test_send_dingtalk_plain_string(robot):
    route = respx.post(SEND_URL).mock(
        return_value=Response(200, json={"errcode": 0, "errmsg": "ok"})
    )

    result = await send_dingtalk(robot, "hello")

    assert result.success
    assert result.msgtype == "text"
    assert result.error is None
    assert "TOKEN" not in result.target
    assert json.loads(route.calls.last.request.content)["text"] == {"content": "hello"}


@pytest.mark.asyncio
@respx.mock
async def test_send_dingtalk_reports_remote_failure(robot):
    respx.post(SEND_URL).mock(
        return_value=Response(200, json={"errcode": 300001, "errmsg": "token invalid"})
    )

    result = await send_dingtalk(robot, markdown_message("T", "x"))

    assert not result.success
    assert result.msgtype == "markdown"
    assert result.error == "token invalid"
    assert result.errcode == 300001


@pytest.mark.asyncio
@respx.mock
async def test_send_dingtalk_reports_transport_failure(robot):
    respx.post(SEND_URL).mock(side_effect=httpx.ConnectError("refused"))

    result = await send_dingtalk(robot, "hello")

    assert not result.success
    assert result.error
    assert result.errcode is None
