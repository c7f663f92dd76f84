"""Transformación "graciosa" de ficheros de texto.

Añade " lol" al final de cada línea. `make_file_funny` no usa `promisify`:
el valor de éxito necesita post-proceso, así que el future se construye a mano.

Detalle importante: `str.split("\\n")` conserva el segmento vacío tras un salto
final, así que `"a\\nb\\n"` -> `"a lol\\nb lol\\n lol"`. Es el comportamiento
esperado; no se recorta.
"""

from __future__ import annotations

import asyncio
import logging
from os import PathLike
from pathlib import Path

from core.deferred import forward_task, settle
from core.interfaces.callback import NodeCallback

logger = logging.getLogger(__name__)

SUFFIX = " lol"


def make_funny(text: str) -> str:
    return "\n".join(line + SUFFIX for line in text.split("\n"))


def _read_text(path: str | PathLike[str]) -> str:
    # newline="" -> el texto llega con sus saltos originales.
    with Path(path).open("r", encoding="utf-8", errors="strict", newline="") as fh:
        return fh.read()


def _read_funny(path: str | PathLike[str]) -> str:
    return make_funny(_read_text(path))


def read_file_and_make_it_funny(path: str | PathLike[str], callback: NodeCallback[str]) -> None:
    """Lee `path` y entrega el texto transformado a `callback(error, text)`."""

    loop = asyncio.get_running_loop()
    logger.debug("Leyendo %s", path)
    forward_task(loop.run_in_executor(None, _read_funny, path), callback)


def make_file_funny(path: str | PathLike[str]) -> asyncio.Future:
    """Devuelve un `asyncio.Future` con el contenido de `path` transformado.

    Se rechaza con el error de I/O tal cual (`FileNotFoundError`,
    `PermissionError`, `UnicodeDecodeError`, ...). Nunca hay resultado parcial.
    """

    loop = asyncio.get_running_loop()
    future = loop.create_future()
    logger.debug("Leyendo %s", path)

    def _done(read: asyncio.Future) -> None:
        if read.cancelled():
            future.cancel()
            return
        exc = read.exception()
        if exc is not None:
            settle(future, exc)
            return
        settle(future, None, make_funny(read.result()))

    loop.run_in_executor(None, _read_text, path).add_done_callback(_done)
    return future
