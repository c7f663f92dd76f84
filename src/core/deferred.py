"""Adaptador callback -> valor diferido (`asyncio.Future`).

Por qué un módulo propio:
- Las tres operaciones comparten la misma regla: un único desenlace por llamada.
- `promisify` evita repetir el boilerplate de crear/settle el future en cada adaptador.

Reglas:
- El callback es el último argumento posicional: `fn(*args, callback, **kwargs)`.
- `callback(error, result)`: error primero; si no es None, el future se rechaza
  con *ese mismo* objeto.
- El callback puede llegar desde otro hilo (executor); el settle se hace siempre
  en el hilo del loop.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable

from core.interfaces.callback import NodeCallback

logger = logging.getLogger(__name__)


def settle(future: asyncio.Future, error: BaseException | None, result: Any = None) -> bool:
    """Resuelve o rechaza `future` si sigue pendiente. Devuelve False si ya estaba cerrado."""

    if future.done():
        return False
    if error is None:
        future.set_result(result)
    elif isinstance(error, asyncio.CancelledError):
        future.cancel()
    else:
        future.set_exception(error)
    return True


def _on_loop_thread(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False


def callback_for(future: asyncio.Future) -> NodeCallback[Any]:
    """Crea el callback `(error, result)` que cierra `future` una sola vez."""

    loop = future.get_loop()

    def _apply(error: BaseException | None, result: Any) -> None:
        if not settle(future, error, result):
            logger.debug("Callback duplicado ignorado (future ya resuelto): error=%r", error)

    def _callback(error: BaseException | None, result: Any = None) -> None:
        if _on_loop_thread(loop):
            _apply(error, result)
        else:
            loop.call_soon_threadsafe(_apply, error, result)

    return _callback


def promisify(fn: Callable[..., None]) -> Callable[..., asyncio.Future]:
    """Convierte una función estilo callback en una que devuelve un `asyncio.Future`.

    La función resultante debe llamarse con un loop en ejecución. El future admite
    varios consumidores (`await` repetido, `add_done_callback`).

    Ejemplo:
        >>> fetch_async = promisify(fetch)   # fetch(user, callback)
        >>> profile = await fetch_async("octocat")
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        try:
            fn(*args, callback_for(future), **kwargs)
        except Exception as exc:
            if not settle(future, exc):
                logger.debug("Excepción síncrona tras resolver %s: %r", fn.__name__, exc)
        return future

    return wrapper


def forward_task(task: asyncio.Future, callback: NodeCallback[Any]) -> None:
    """Reenvía el desenlace de `task` (Task/Future) a un callback estilo `(error, result)`."""

    def _done(t: asyncio.Future) -> None:
        if t.cancelled():
            callback(asyncio.CancelledError(), None)
            return
        exc = t.exception()
        if exc is not None:
            callback(exc, None)
        else:
            callback(None, t.result())

    task.add_done_callback(_done)
