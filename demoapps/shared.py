"""Helpers shared by the demo applications."""


def greet(name: str) -> None:
    """Print a welcome line for the named application."""
    print(f"你好, {name}! 欢迎使用 Workspace!")


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b