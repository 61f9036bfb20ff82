"""Command that shows off the user, product and helper functions."""

import argparse
from collections.abc import Sequence

from demoapps.app1.models import Product, User
from demoapps.app1.utils import calculate_average, format_title, is_valid_email
from demoapps.shared import greet


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print its report."""
    parser = argparse.ArgumentParser(prog="app1", description="用户与产品管理演示")
    parser.parse_args(argv)

    print("App1 启动!")
    greet("App1")

    print(f"\n{format_title('用户管理')}")
    user = User(1, "张三", "zhangsan@example.com", 25)
    print(user.describe())
    print(f"是否成年: {str(user.is_adult()).lower()}")
    print(f"邮箱验证: {str(is_valid_email(user.email)).lower()}")

    print(f"\n{format_title('产品管理')}")
    product = Product(101, "笔记本电脑", 5999.99, 10)
    print(f"产品: {product.name} - 价格: ¥{product.price:.2f}")
    print(f"库存: {product.stock} 件")
    print(f"总价值: ¥{product.total_value():.2f}")
    print(f"是否有货: {str(product.is_available()).lower()}")

    print(f"\n{format_title('工具函数')}")
    average = calculate_average([10.0, 20.0, 30.0, 40.0, 50.0])
    if average is not None:
        print(f"数字平均值: {average:.2f}")

    print("\nApp1 完成!")
    return 0