import pytest

from demoapps.app1.models import Product, User


def test_user_creation():
    user = User(1, "张三", "zhangsan@example.com", 25)
    assert user.id == 1
    assert user.name == "张三"
    assert user.is_adult()


@pytest.mark.parametrize("age, adult", [(17, False), (18, True), (0, False), (40, True)])
def test_is_adult_boundary(age, adult):
    assert User(2, "李四", "lisi@example.com", age).is_adult() is adult


def test_describe_contains_fields():
    user = User(1, "张三", "zhangsan@example.com", 25)
    info = user.describe()
    assert info.startswith("用户 #1: 张三")
    assert "zhangsan@example.com" in info
    assert "25岁" in info


def test_product_availability():
    product = Product(1, "笔记本电脑", 5999.99, 10)
    assert product.is_available()
    assert abs(product.total_value() - 59999.9) < 0.01


def test_product_out_of_stock():
    product = Product(2, "鼠标", 99.0, 0)
    assert not product.is_available()
    assert product.total_value() == 0