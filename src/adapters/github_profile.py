"""Perfil de GitHub (API oficial).

Dos formas de la misma operación:
- `get_github_profile(username, callback)`: estilo callback `(error, profile)`.
- `fetch_profile(username)`: devuelve un `asyncio.Future` (vía `promisify`).

El éxito/fracaso lo decide el campo `message` del cuerpo, no el status HTTP:
GitHub siempre lo incluye en sus respuestas de error (404, rate limit, ...).
"""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.deferred import forward_task, promisify
from core.domain.errors import RemoteProfileError
from core.domain.models import ProfileRecord, RemoteErrorPayload
from core.interfaces.callback import NodeCallback

logger = logging.getLogger(__name__)


def profile_url(username: str, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return f"{settings.github_api_base_url}/users/{quote(username, safe='')}"


async def _request_profile(
    username: str,
    *,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None,
) -> ProfileRecord:
    url = profile_url(username, settings)
    logger.debug("GET %s", url)

    headers = {"Accept": "application/json"}
    async with build_async_client(settings, extra_headers=headers, transport=transport) as client:
        resp = await client.get(url)

    body = resp.json()
    payload = RemoteErrorPayload.from_body(body)
    if payload is not None:
        logger.warning(
            "GitHub reportó un error para %r (HTTP %s): %s",
            username,
            resp.status_code,
            payload.message,
        )
        raise RemoteProfileError(payload, username=username, status_code=resp.status_code)

    logger.debug("Perfil de %r recibido (HTTP %s)", username, resp.status_code)
    return body


def get_github_profile(
    username: str,
    callback: NodeCallback[ProfileRecord],
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Pide el perfil de `username` y lo entrega a `callback(error, profile)`.

    Requiere un loop en ejecución: la petición se programa como Task.
    """

    settings = settings or AppSettings()
    task = asyncio.ensure_future(_request_profile(username, settings=settings, transport=transport))
    forward_task(task, callback)


fetch_profile = promisify(get_github_profile)
fetch_profile.__name__ = fetch_profile.__qualname__ = "fetch_profile"
fetch_profile.__doc__ = """Devuelve un `asyncio.Future` con el perfil de GitHub de `username`.

Se rechaza con el error de transporte (httpx) tal cual, o con
`RemoteProfileError` si GitHub responde con un `message` de error.
"""
