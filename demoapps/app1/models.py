"""User and product records."""

from dataclasses import dataclass


@dataclass
class User:
    """A registered user."""

    id: int
    name: str
    email: str
    age: int

    def describe(self) -> str:
        """Return a one-line summary of the user."""
        return f"用户 #{self.id}: {self.name} ({self.age}岁) - 邮箱: {self.email}"

    def is_adult(self) -> bool:
        """Whether the user is 18 or older."""
        return self.age >= 18


@dataclass
class Product:
    """A product held in stock."""

    id: int
    name: str
    price: float
    stock: int

    def is_available(self) -> bool:
        """Whether at least one item is in stock."""
        return self.stock > 0

    def total_value(self) -> float:
        """Price multiplied by the number of items in stock."""
        return self.price * self.stock