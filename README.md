# demoapps

Two small demo applications that share a tiny helper module,
`demoapps.shared`, with `greet(name)` (prints a welcome line) and
`add(a, b)`.

No third-party libraries are needed; everything runs on the standard
library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## app1: console demo

```
demoapps-app1
```

Prints a greeting, then walks through a few examples:

- a `User` with its description, whether the user is an adult, and
  whether the e-mail address looks valid;
- a `Product` with its price, stock, total value and availability;
- the average of a list of numbers.

The building blocks can be used directly:

```python
from demoapps.app1.models import User, Product
from demoapps.app1.utils import format_title, calculate_average, is_valid_email

user = User(1, "张三", "zhangsan@example.com", 25)
user.describe()                    # "用户 #1: 张三 (25岁) - 邮箱: zhangsan@example.com"
user.is_adult()                    # True

product = Product(101, "笔记本电脑", 5999.99, 10)
product.is_available()             # True
product.total_value()              # about 59999.9

format_title("hello")              # "=== HELLO ==="
calculate_average([1.0, 2.0, 3.0]) # 2.0
calculate_average([])              # None
is_valid_email("test@example.com") # True
is_valid_email("invalid-email")    # False
```

`is_valid_email` is a loose check: the string only has to contain both
`@` and `.`.

## app2: HTTP server

```
demoapps-app2 [--host HOST] [--port PORT]
```

Starts a threaded HTTP/1.1 server, by default on `127.0.0.1:3000`, and
serves until Ctrl+C. Each request is logged to standard output. If the
address cannot be bound, the command prints the error and exits with
status 1.

The code is organised as models (`demoapps.app2.models`), services
(`demoapps.app2.services`), controllers (`demoapps.app2.controllers`),
views (`demoapps.app2.views`) and the router (`demoapps.app2.router`).

Endpoints:

| Method | Path         | Response                                              |
|--------|--------------|-------------------------------------------------------|
| GET    | `/`          | HTML welcome page                                     |
| GET    | `/health`    | JSON `status`, `version` and `uptime` in seconds      |
| GET    | `/api/hello` | JSON `message`, `timestamp` and `server`              |
| POST   | `/api/echo`  | echoes `{"message": "..."}` as `echo`, `length`, `timestamp` |

Any other method or path gets an HTML 404 page.

Every JSON reply is pretty-printed and has the shape:

```json
{
  "success": true,
  "message": "...",
  "data": { }
}
```

`data` is left out on errors. `/api/echo` answers `400` when the body
cannot be read, is not a JSON object with a string `message`, or when the
message is empty or longer than 1000 bytes in UTF-8. `length` is the
message length in UTF-8 bytes. Timestamps are local time in ISO 8601 form.

All responses carry `X-Content-Type-Options: nosniff`.

Requests can also be dispatched without a socket, which is handy in tests:

```python
from demoapps.app2.router import Router

router = Router()
response = router.handle("POST", "/api/echo", b'{"message": "test"}')
response.status   # 200
response.text()   # pretty-printed JSON with "echo": "test", "length": 4

router.handle("GET", "/missing").status   # 404
```

Passing `None` as the body to `Router.handle` for `/api/echo` stands for a
body that could not be read.