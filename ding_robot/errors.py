class DingRobotError(Exception):
    """Base class for everything ``DingRobot.send`` raises."""


class SerializationError(DingRobotError):
    """Outbound message could not be encoded, or the reply could not be decoded."""


class TransportError(DingRobotError):
    """The HTTP round trip itself failed (connect, timeout, read)."""


class RemoteError(DingRobotError):
    """The robot endpoint answered with a non-zero errcode."""

    def __init__(self, errmsg: str, errcode: int | None = None):
        super().__init__(errmsg)
        self.errmsg = errmsg
        self.errcode = errcode
