"""Token aleatorio criptográficamente seguro.

- `generate_random_token(callback)`: estilo callback `(error, token)`.
- `generate_token()`: devuelve un `asyncio.Future` (vía `promisify`).

La lectura de entropía se hace en el executor por defecto del loop: en algunas
plataformas `os.urandom` puede bloquear.
"""

from __future__ import annotations

import asyncio
import logging
import secrets

from core.deferred import forward_task, promisify
from core.interfaces.callback import NodeCallback

logger = logging.getLogger(__name__)

TOKEN_BYTES = 20


def _draw_hex(nbytes: int) -> str:
    return secrets.token_bytes(nbytes).hex()


def generate_random_token(callback: NodeCallback[str], *, nbytes: int = TOKEN_BYTES) -> None:
    """Genera `nbytes` bytes aleatorios y entrega su hex (minúsculas) a `callback`.

    Un fallo de la fuente de entropía se entrega como error, nunca se sustituye.
    """

    loop = asyncio.get_running_loop()
    logger.debug("Generando token de %d bytes", nbytes)
    forward_task(loop.run_in_executor(None, _draw_hex, nbytes), callback)


generate_token = promisify(generate_random_token)
generate_token.__name__ = generate_token.__qualname__ = "generate_token"
generate_token.__doc__ = "Devuelve un `asyncio.Future` con un token hex de 40 caracteres."
