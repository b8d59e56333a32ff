"""
DingTalk custom-robot client.

One robot per access token. ``send`` performs a single POST and classifies the
reply by its ``errcode``; there is no retry and no client-side validation of the
message contents.
"""

import httpx
import structlog

from ding_robot.config import Settings, settings as default_settings
from ding_robot.errors import RemoteError, SerializationError, TransportError
from ding_robot.schemas.message import Message, SendResponse

logger = structlog.get_logger()

BASE_SEND_URL = "https://oapi.dingtalk.com/robot/send?access_token={ACCESS_TOKEN}"
JSON_TYPE = "application/json"


def mask_token(token: str) -> str:
    """Keep only the last four characters of a token for logging."""
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


class DingRobot:
    def __init__(self, access_token: str, timeout: float | None = None):
        self._access_token = access_token
        self._send_url = BASE_SEND_URL.replace("{ACCESS_TOKEN}", access_token, 1)
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "DingRobot":
        settings = settings or default_settings
        return cls(settings.DINGTALK_ACCESS_TOKEN, timeout=settings.DINGTALK_TIMEOUT)

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def send_url(self) -> str:
        return self._send_url

    @property
    def masked_url(self) -> str:
        return BASE_SEND_URL.replace("{ACCESS_TOKEN}", mask_token(self._access_token), 1)

    def __repr__(self) -> str:
        return f"DingRobot(access_token={mask_token(self._access_token)!r})"

    def _client_kwargs(self) -> dict:
        return {} if self._timeout is None else {"timeout": self._timeout}

    # ------------------------------------------------------------------
    # Encoding / classification
    # ------------------------------------------------------------------

    @staticmethod
    def _encode(message: Message) -> tuple[str, bytes]:
        """Return the msgtype and the JSON body."""
        try:
            if not isinstance(message, Message):
                message = Message.model_validate(message)
            return message.type.value, message.to_wire().encode("utf-8")
        except (ValueError, TypeError) as e:
            raise SerializationError(f"Cannot encode message: {e}") from e

    def _classify(self, body: bytes, msg_type: str) -> None:
        try:
            ret = SendResponse.model_validate_json(body)
        except ValueError as e:
            logger.error("robot.bad_response", url=self.masked_url, body=body[:200])
            raise SerializationError(f"Cannot decode robot response: {e}") from e

        if not ret.ok:
            logger.error(
                "robot.remote_error",
                url=self.masked_url,
                msgtype=msg_type,
                errcode=ret.errcode,
                errmsg=ret.errmsg,
            )
            raise RemoteError(ret.errmsg, errcode=ret.errcode)

        logger.info("robot.sent", msgtype=msg_type)

    # ------------------------------------------------------------------
    # Send
    # ------------------------------------------------------------------

    def send(self, message: Message) -> None:
        """POST a message and raise on any failure.

        Raises:
            SerializationError: message or send URL could not be encoded, or reply decoded.
            TransportError: connect, timeout or read failure.
            RemoteError: the endpoint returned a non-zero errcode.
        """
        msg_type, body = self._encode(message)
        logger.debug("robot.send", url=self.masked_url, msgtype=msg_type)

        try:
            with httpx.Client(**self._client_kwargs()) as http:
                resp = http.post(
                    self._send_url, content=body, headers={"Content-Type": JSON_TYPE}
                )
                content = resp.read()
        except httpx.InvalidURL as e:
            logger.error("robot.bad_url", url=self.masked_url, error=str(e))
            raise SerializationError(f"Cannot build send URL: {e}") from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.error("robot.transport_failed", url=self.masked_url, error=str(e))
            raise TransportError(str(e)) from e

        self._classify(content, msg_type)

    async def asend(self, message: Message) -> None:
        """Async counterpart of ``send`` with the same contract."""
        msg_type, body = self._encode(message)
        logger.debug("robot.send", url=self.masked_url, msgtype=msg_type)

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as http:
                resp = await http.post(
                    self._send_url, content=body, headers={"Content-Type": JSON_TYPE}
                )
                content = await resp.aread()
        except httpx.InvalidURL as e:
            logger.error("robot.bad_url", url=self.masked_url, error=str(e))
            raise SerializationError(f"Cannot build send URL: {e}") from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.error("robot.transport_failed", url=self.masked_url, error=str(e))
            raise TransportError(str(e)) from e

        self._classify(content, msg_type)
