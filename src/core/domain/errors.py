"""Errores del dominio.

Solo se modelan los fallos que este código *interpreta*. Los errores de
transporte (httpx), de entropía y de I/O se propagan tal cual, sin envolver.
"""

from __future__ import annotations

from core.domain.models import RemoteErrorPayload


class RemoteProfileError(RuntimeError):
    """La API respondió bien a nivel de red, pero reporta un fallo lógico.

    Ejemplos: usuario inexistente (404), rate limit (403).
    """

    def __init__(
        self,
        payload: RemoteErrorPayload,
        *,
        username: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"Failed to get GitHub profile: {payload.message}")
        self.payload = payload
        self.username = username
        self.status_code = status_code
