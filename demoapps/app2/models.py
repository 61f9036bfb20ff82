"""Data models exchanged by the HTTP API."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

VERSION = "0.1.0"
MAX_MESSAGE_BYTES = 1000


class ValidationError(ValueError):
    """Raised when a request cannot be accepted."""


def _now() -> str:
    return datetime.now().astimezone().isoformat()


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


@dataclass
class ApiResponse:
    """Uniform envelope around every API answer."""

    success: bool = True
    message: str = "操作成功"
    data: Any = None

    @classmethod
    def success(cls, message: str, data: Any) -> "ApiResponse":
        """Build a successful response carrying data."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse":
        """Build a failed response without data."""
        return cls(success=False, message=message, data=None)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the data key is left out when empty."""
        result: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            result["data"] = _jsonable(self.data)
        return result


@dataclass
class HealthCheck:
    """Server health status."""

    status: str
    version: str
    uptime: int

    @classmethod
    def create(cls, uptime: int) -> "HealthCheck":
        """Build a healthy status for the given uptime in seconds."""
        return cls(status="healthy", version=VERSION, uptime=uptime)

    def is_healthy(self) -> bool:
        return self.status == "healthy"

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "version": self.version, "uptime": self.uptime}


@dataclass
class EchoRequest:
    """A message to be echoed back."""

    message: str

    @classmethod
    def from_json(cls, body: bytes | str) -> "EchoRequest":
        """Parse a JSON body; raise ValidationError when it is malformed."""
        try:
            payload = json.loads(body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise ValidationError("无效的 JSON 格式") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("message"), str):
            raise ValidationError("无效的 JSON 格式")
        return cls(message=payload["message"])

    def validate(self) -> None:
        """Raise ValidationError when the message is empty or too long."""
        if not self.message:
            raise ValidationError("消息不能为空")
        if len(self.message.encode("utf-8")) > MAX_MESSAGE_BYTES:
            raise ValidationError("消息长度不能超过 1000 字符")


@dataclass
class EchoResponse:
    """The echoed message with its length in UTF-8 bytes."""

    echo: str
    length: int
    timestamp: str

    @classmethod
    def from_request(cls, request: EchoRequest) -> "EchoResponse":
        return cls(
            echo=request.message,
            length=len(request.message.encode("utf-8")),
            timestamp=_now(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"echo": self.echo, "length": self.length, "timestamp": self.timestamp}


@dataclass
class HelloResponse:
    """Greeting returned by the hello endpoint."""

    message: str = "Hello from App2 Server!"
    timestamp: str = field(default_factory=_now)
    server: str = "App2/Tokio"

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "timestamp": self.timestamp, "server": self.server}