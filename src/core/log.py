"""Configuración de logging (stdlib + Rich).

Por qué Rich:
- Misma consola/estilo que el resto de salidas de terminal del proyecto.
- Los módulos solo usan `logging.getLogger(__name__)`; el handler se decide aquí.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

_HANDLER_NAME = "promisify-rich"


def setup_logging(
    level: int | str | None = None,
    *,
    settings: AppSettings | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Instala un `RichHandler` en el root logger.

    Llamarla varias veces no duplica handlers: reemplaza el instalado antes.
    Si no se pasa `level`, se usa `settings.log_level`.
    """

    if level is None:
        level = (settings or AppSettings()).log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    return logging.getLogger("promisification")
