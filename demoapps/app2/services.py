"""Business logic behind the HTTP API."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from demoapps.app2.models import EchoRequest, EchoResponse, HealthCheck, HelloResponse


@dataclass
class HealthService:
    """Reports server health and how long the service has been running."""

    clock: Callable[[], float] = time.monotonic
    start_time: float = field(init=False)

    def __post_init__(self) -> None:
        self.start_time = self.clock()

    def uptime(self) -> int:
        """Whole seconds elapsed since the service was created."""
        return max(0, int(self.clock() - self.start_time))

    def get_health(self) -> HealthCheck:
        """Return the current health status."""
        return HealthCheck.create(self.uptime())


class MessageService:
    """Builds greeting and echo replies."""

    def handle_hello(self) -> HelloResponse:
        """Return a fresh greeting."""
        return HelloResponse()

    def handle_echo(self, request: EchoRequest) -> EchoResponse:
        """Validate the request and echo its message; raise ValidationError if invalid."""
        request.validate()
        return EchoResponse.from_request(request)

    def transform_message(self, message: str) -> str:
        """Return the message in upper case."""
        return message.upper()