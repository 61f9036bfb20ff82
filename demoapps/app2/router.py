"""Request routing and the HTTP server entry point."""

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from demoapps.app2.controllers import HealthController, MessageController, PageController
from demoapps.app2.services import HealthService, MessageService
from demoapps.app2.views import Response, render_not_found
from demoapps.shared import greet

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


@dataclass
class ServerConfig:
    """Address the server listens on."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


class Router:
    """Dispatches requests to controllers and serves them over HTTP."""

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config = config or ServerConfig()
        self.health_controller = HealthController(HealthService())
        self.message_controller = MessageController(MessageService())
        self.page_controller = PageController()
        self._routes: dict[tuple[str, str], Callable[[bytes | None], Response]] = {
            ("GET", "/"): lambda _body: self.page_controller.render_home(),
            ("GET", "/health"): lambda _body: self.health_controller.check_health(),
            ("GET", "/api/hello"): lambda _body: self.message_controller.handle_hello(),
            ("POST", "/api/echo"): self.message_controller.handle_echo,
        }

    def handle(self, method: str, path: str, body: bytes | None = b"") -> Response:
        """Return the response for a request; unknown routes get the 404 page."""
        route = self._routes.get((method, path))
        if route is None:
            return render_not_found()
        return route(body)

    def start(self) -> None:
        """Bind the configured address and serve until interrupted."""
        with ThreadingHTTPServer((self.config.host, self.config.port), _make_handler(self)) as server:
            host, port = server.server_address[:2]
            print("🚀 服务器启动成功！")
            print(f"📍 监听地址: http://{host}:{port}")
            print("🏗️  架构模式: MVC")
            print("📝 可用端点:")
            print("   GET  /          - 欢迎页面")
            print("   GET  /health    - 健康检查")
            print("   GET  /api/hello - Hello API")
            print("   POST /api/echo  - Echo API")
            print("\n按 Ctrl+C 停止服务器\n", flush=True)
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                pass


def _make_handler(router: Router) -> type[BaseHTTPRequestHandler]:
    class _Handler(BaseHTTPRequestHandler):
        protocol_version = "HTTP/1.1"

        def _read_body(self) -> bytes | None:
            try:
                length = int(self.headers.get("Content-Length") or 0)
                return self.rfile.read(length) if length > 0 else b""
            except (ValueError, OSError):
                return None

        def _dispatch(self) -> None:
            body = self._read_body()
            path = urlsplit(self.path).path
            client_host, client_port = self.client_address[:2]
            print(f"📨 {self.command} {path} - 来自 {client_host}:{client_port}", flush=True)
            response = router.handle(self.command, path, body)
            self.send_response(response.status)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(response.body)))
            if body is None:
                self.send_header("Connection", "close")
                self.close_connection = True
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(response.body)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: object) -> None:
            print(f"❌ 处理连接时出错: {format % args}", file=sys.stderr)

        def log_request(self, code: int | str = "-", size: int | str = "-") -> None:
            pass

    return _Handler


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port: {value}") from exc
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return port


def main(argv: Sequence[str] | None = None) -> int:
    """Start the HTTP server; return 1 when it cannot run."""
    parser = argparse.ArgumentParser(prog="app2", description="MVC HTTP 服务器")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=_port, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    print("=== App2 启动 (MVC 架构) ===")
    greet("App2")
    try:
        Router(ServerConfig(args.host, args.port)).start()
    except OSError as exc:
        print(f"❌ 服务器错误: {exc}", file=sys.stderr)
        return 1
    return 0