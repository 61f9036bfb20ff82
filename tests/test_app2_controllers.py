import json

from demoapps.app2.controllers import HealthController, MessageController, PageController
from demoapps.app2.services import HealthService, MessageService


def _payload(response):
    return json.loads(response.text())


def test_check_health():
    controller = HealthController(HealthService())
    response = controller.check_health()
    assert response.status == 200


def test_check_health_body():
    payload = _payload(HealthController().check_health())
    assert payload["success"] is True
    assert payload["message"] == "服务器运行正常"
    assert payload["data"]["status"] == "healthy"


def test_handle_hello():
    response = MessageController(MessageService()).handle_hello()
    payload = _payload(response)
    assert response.status == 200
    assert payload["message"] == "请求成功"
    assert payload["data"]["message"] == "Hello from App2 Server!"
    assert payload["data"]["server"] == "App2/Tokio"


def test_handle_echo_success():
    response = MessageController().handle_echo(b'{"message": "test"}')
    payload = _payload(response)
    assert response.status == 200
    assert payload["message"] == "Echo 成功"
    assert payload["data"]["echo"] == "test"
    assert payload["data"]["length"] == 4


def test_handle_echo_unreadable_body():
    response = MessageController().handle_echo(None)
    payload = _payload(response)
    assert response.status == 400
    assert payload == {"success": False, "message": "无法读取请求体"}


def test_handle_echo_invalid_json():
    response = MessageController().handle_echo(b"not json")
    payload = _payload(response)
    assert response.status == 400
    assert payload["message"] == "无效的 JSON 格式"
    assert "data" not in payload


def test_handle_echo_empty_message():
    response = MessageController().handle_echo('{"message": ""}')
    payload = _payload(response)
    assert response.status == 400
    assert payload["success"] is False
    assert payload["message"] == "消息不能为空"


def test_render_home():
    response = PageController().render_home()
    assert response.status == 200
    assert response.headers["Content-Type"].startswith("text/html")
    assert "App2 Server" in response.text()