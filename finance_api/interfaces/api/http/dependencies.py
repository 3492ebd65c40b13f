"""
Helpers compartidos por los routers HTTP.

- get_container: composition root publicado por el lifespan en app.state.
- read_json_body: body JSON crudo; vacío, malformado o no-objeto -> {}
  (la validación del caso de uso lo rechaza con 400 en lugar de romper el request).
"""

from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import Request

from ....container import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


async def read_json_body(request: Request) -> Dict[str, Any]:
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def query_input(request: Request, **params: Any) -> Dict[str, Any]:
    """Query string (filtros + paginación) + path params."""
    return {**dict(request.query_params), **params}
