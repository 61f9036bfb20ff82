import json

import pytest

from demoapps.app2.models import ApiResponse
from demoapps.app2.views import (
    HTML_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    Response,
    render_home,
    render_html,
    render_json,
    render_not_found,
)


def test_render_json_round_trip():
    data = {"name": "张三", "values": [1, 2, 3]}
    response = render_json(200, data)
    assert response.status == 200
    assert json.loads(response.text()) == data
    assert response.headers["Content-Type"] == JSON_CONTENT_TYPE
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_render_json_keeps_unicode_unescaped():
    response = render_json(200, {"message": "请求成功"})
    assert "请求成功" in response.text()


def test_render_json_api_response():
    response = render_json(404, ApiResponse.error("端点未找到"))
    assert response.status == 404
    assert json.loads(response.text()) == {"success": False, "message": "端点未找到"}


def test_render_json_serialization_failure():
    response = render_json(200, {"bad": object()})
    assert json.loads(response.text()) == {"error": "序列化失败"}


def test_render_json_rejects_unknown_status():
    with pytest.raises(ValueError):
        render_json(999, {})


def test_render_html():
    response = render_html(201, "<p>hi</p>")
    assert response.status == 201
    assert response.text() == "<p>hi</p>"
    assert response.headers["Content-Type"] == HTML_CONTENT_TYPE


def test_render_home():
    response = render_home()
    assert response.status == 200
    assert response.text().startswith("<!DOCTYPE html>")
    assert "/api/echo" in response.text()


def test_render_not_found():
    response = render_not_found()
    assert response.status == 404
    assert "页面未找到" in response.text()


def test_response_text_decodes_utf8():
    assert Response(200, {}, "你好".encode("utf-8")).text() == "你好"