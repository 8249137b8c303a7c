"""Response Envelope — every success body is {status, message, data}."""

from typing import Any


def envelope(message: str, status_code: int = 200, **data: Any) -> dict:
    return {"status": status_code, "message": message, "data": data}
