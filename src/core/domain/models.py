"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de las cargas de error remotas sin acoplar el Core a httpx.

Nota:
- El perfil de GitHub NO se modela: se devuelve el JSON decodificado sin tocar,
  porque su estructura la define el servicio remoto.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

ProfileRecord = dict[str, Any]


class RemoteErrorPayload(BaseModel):
    """Cuerpo de error de la API de GitHub.

    Ejemplo: {"message": "Not Found", "documentation_url": "https://docs.github.com/..."}
    """

    model_config = ConfigDict(extra="ignore")

    message: str = Field(
        ...,
        min_length=1,
        description="Texto del error reportado por el servicio.",
    )
    documentation_url: str | None = Field(
        default=None,
        description="Enlace a la documentación del error (si viene).",
    )

    @classmethod
    def from_body(cls, body: Any) -> "RemoteErrorPayload | None":
        """Devuelve el payload si `body` señala un error (objeto con `message` no vacío).

        La forma del resto del cuerpo la decide GitHub: un `documentation_url` que
        no sea string se descarta en vez de invalidar el error.
        """

        if not isinstance(body, dict):
            return None
        message = body.get("message")
        if not message:
            return None
        doc_url = body.get("documentation_url")
        return cls(
            message=str(message),
            documentation_url=doc_url if isinstance(doc_url, str) else None,
        )
