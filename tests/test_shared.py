from demoapps.shared import add, greet


def test_add():
    assert add(2, 2) == 4


def test_add_negative():
    assert add(-3, 3) == 0


def test_greet_mentions_name(capsys):
    greet("App1")
    out = capsys.readouterr().out
    assert out.startswith("你好, App1!")
    assert out.endswith("\n")