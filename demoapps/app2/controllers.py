"""Controllers that turn service results into HTTP responses."""

from dataclasses import dataclass, field
from http import HTTPStatus

from demoapps.app2.models import ApiResponse, EchoRequest, ValidationError
from demoapps.app2.services import HealthService, MessageService
from demoapps.app2.views import Response, render_home, render_json


@dataclass
class HealthController:
    """Answers health check requests."""

    service: HealthService = field(default_factory=HealthService)

    def check_health(self) -> Response:
        health = self.service.get_health()
        return render_json(HTTPStatus.OK, ApiResponse.success("服务器运行正常", health))


@dataclass
class MessageController:
    """Answers the hello and echo endpoints."""

    service: MessageService = field(default_factory=MessageService)

    def handle_hello(self) -> Response:
        data = self.service.handle_hello()
        return render_json(HTTPStatus.OK, ApiResponse.success("请求成功", data))

    def handle_echo(self, body: bytes | str | None) -> Response:
        """Echo the message in a JSON body; None means the body could not be read."""
        if body is None:
            return render_json(HTTPStatus.BAD_REQUEST, ApiResponse.error("无法读取请求体"))
        try:
            data = self.service.handle_echo(EchoRequest.from_json(body))
        except ValidationError as exc:
            return render_json(HTTPStatus.BAD_REQUEST, ApiResponse.error(str(exc)))
        return render_json(HTTPStatus.OK, ApiResponse.success("Echo 成功", data))


class PageController:
    """Serves HTML pages."""

    def render_home(self) -> Response:
        return render_home()