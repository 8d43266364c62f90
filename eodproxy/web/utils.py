"""Web helper functions."""

import json
from typing import Any

from fastapi import Request

from eodproxy.core.exceptions import DataValidationError


def get_request_id(request: Request) -> str | None:
    """Return the X-Request-ID header, if any."""
    return request.headers.get("X-Request-ID")


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as JSON.

    Raises DataValidationError when the body is not valid JSON. Valid JSON
    that is not an object is treated as an empty object.
    """
    body = await request.body()
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataValidationError("Invalid JSON", field="body") from e
    return payload if isinstance(payload, dict) else {}
