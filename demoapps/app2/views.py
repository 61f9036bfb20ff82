"""Rendering of HTTP responses as JSON or HTML."""

import json
from dataclasses import dataclass, field
from html import escape
from http import HTTPStatus
from typing import Any

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"
_SERIALIZATION_FAILED = '{"error": "序列化失败"}'

_ACCENT = "#667eea"
_GRADIENT = f"linear-gradient(135deg, {_ACCENT} 0%, #764ba2 100%)"


@dataclass
class Response:
    """A status code, headers and a body ready to send."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def _headers(content_type: str) -> dict[str, str]:
    return {"Content-Type": content_type, "X-Content-Type-Options": "nosniff"}


def render_json(status: int, data: Any) -> Response:
    """Render data as pretty-printed JSON."""
    try:
        payload = json.dumps(_jsonable(data), indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError):
        payload = _SERIALIZATION_FAILED
    return Response(
        status=int(HTTPStatus(status)),
        headers=_headers(JSON_CONTENT_TYPE),
        body=payload.encode("utf-8"),
    )


def render_html(status: int, html: str) -> Response:
    """Render an HTML document."""
    return Response(
        status=int(HTTPStatus(status)),
        headers=_headers(HTML_CONTENT_TYPE),
        body=html.encode("utf-8"),
    )


_Rules = list[tuple[str, dict[str, str]]]

_BASE_RULES: _Rules = [
    ("*", {"margin": "0", "padding": "0", "box-sizing": "border-box"}),
    (
        "body",
        {
            "font-family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
            "background": _GRADIENT,
            "min-height": "100vh",
            "display": "flex",
            "align-items": "center",
            "justify-content": "center",
            "color": "#333",
        },
    ),
]

_CONTAINER = {
    "background": "white",
    "border-radius": "20px",
    "padding": "3rem",
    "box-shadow": "0 20px 60px rgba(0,0,0,0.3)",
}


def _stylesheet(rules: _Rules) -> str:
    blocks = []
    for selector, declarations in rules:
        body = " ".join(f"{name}: {value};" for name, value in declarations.items())
        blocks.append(f"{selector} {{ {body} }}")
    return "\n".join(blocks)


def _document(title: str, rules: _Rules, content: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="zh-CN">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>\n{_stylesheet(_BASE_RULES + rules)}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f'<div class="container">\n{content}\n</div>\n'
        "</body>\n"
        "</html>\n"
    )


_ENDPOINTS = [("GET", "/health"), ("GET", "/api/hello"), ("POST", "/api/echo")]


def _home_page() -> str:
    rules: _Rules = [
        (".container", {**_CONTAINER, "max-width": "600px", "width": "90%"}),
        ("h1", {"color": _ACCENT, "margin-bottom": "1rem", "font-size": "2.5rem"}),
        ("p", {"margin-bottom": "1rem", "line-height": "1.6"}),
        (
            ".endpoints",
            {"background": "#f8f9fa", "border-radius": "10px", "padding": "1.5rem", "margin-top": "2rem"},
        ),
        (
            ".endpoint",
            {
                "margin": "0.5rem 0",
                "font-family": "'Courier New', monospace",
                "padding": "0.5rem",
                "background": "white",
                "border-radius": "5px",
                "border-left": f"4px solid {_ACCENT}",
            },
        ),
        (".method", {"color": _ACCENT, "font-weight": "bold", "margin-right": "0.5rem"}),
        (
            ".badge",
            {
                "display": "inline-block",
                "background": _ACCENT,
                "color": "white",
                "padding": "0.25rem 0.75rem",
                "border-radius": "20px",
                "font-size": "0.875rem",
                "margin-bottom": "1rem",
            },
        ),
    ]
    endpoints = "\n".join(
        f'<div class="endpoint"><span class="method">{method}</span><span>{path}</span></div>'
        for method, path in _ENDPOINTS
    )
    content = (
        '<div class="badge">App2 · MVC</div>\n'
        "<h1>欢迎使用 App2 Server</h1>\n"
        "<p>这是一个异步 HTTP 服务器。</p>\n"
        '<div class="endpoints">\n'
        f'<h3 style="margin-bottom: 1rem; color: {_ACCENT};">📡 可用端点</h3>\n'
        f"{endpoints}\n"
        "</div>"
    )
    return _document("App2 Server", rules, content)


def _not_found_page() -> str:
    rules: _Rules = [
        (".container", {**_CONTAINER, "text-align": "center", "max-width": "500px"}),
        ("h1", {"font-size": "6rem", "color": _ACCENT, "margin-bottom": "1rem"}),
        ("h2", {"color": "#333", "margin-bottom": "1rem"}),
        ("p", {"color": "#666", "margin-bottom": "2rem"}),
        (
            "a",
            {
                "display": "inline-block",
                "background": _GRADIENT,
                "color": "white",
                "padding": "1rem 2rem",
                "border-radius": "10px",
                "text-decoration": "none",
                "font-weight": "600",
                "transition": "transform 0.3s",
            },
        ),
        ("a:hover", {"transform": "translateY(-2px)"}),
    ]
    content = (
        "<h1>404</h1>\n"
        "<h2>页面未找到</h2>\n"
        "<p>抱歉，您访问的端点不存在。</p>\n"
        '<a href="/">返回首页</a>'
    )
    return _document("404 - 页面未找到", rules, content)


_HOME_PAGE = _home_page()
_NOT_FOUND_PAGE = _not_found_page()


def render_home() -> Response:
    """Render the welcome page."""
    return render_html(HTTPStatus.OK, _HOME_PAGE)


def render_not_found() -> Response:
    """Render the 404 page."""
    return render_html(HTTPStatus.NOT_FOUND, _NOT_FOUND_PAGE)