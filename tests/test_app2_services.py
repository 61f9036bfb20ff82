import pytest

from demoapps.app2.models import EchoRequest, ValidationError
from demoapps.app2.services import HealthService, MessageService


class _FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_health_service():
    service = HealthService()
    health = service.get_health()
    assert health.is_healthy()
    assert health.status == "healthy"


def test_uptime_counts_whole_seconds():
    clock = _FakeClock(100.0)
    service = HealthService(clock=clock)
    assert service.uptime() == 0
    clock.now = 105.7
    assert service.uptime() == 5
    assert service.get_health().uptime == 5


def test_uptime_never_negative():
    clock = _FakeClock(50.0)
    service = HealthService(clock=clock)
    clock.now = 10.0
    assert service.uptime() == 0


def test_handle_hello():
    response = MessageService().handle_hello()
    assert response.message != ""
    assert response.message == "Hello from App2 Server!"


def test_handle_echo():
    response = MessageService().handle_echo(EchoRequest(message="test"))
    assert response.echo == "test"
    assert response.length == 4


def test_echo_validation():
    with pytest.raises(ValidationError):
        MessageService().handle_echo(EchoRequest(message=""))


def test_echo_rejects_overlong_message():
    with pytest.raises(ValidationError, match="1000"):
        MessageService().handle_echo(EchoRequest(message="a" * 1001))


def test_echo_accepts_message_at_limit():
    response = MessageService().handle_echo(EchoRequest(message="a" * 1000))
    assert response.length == 1000


def test_transform_message():
    assert MessageService().transform_message("hello") == "HELLO"