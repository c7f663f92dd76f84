"""Configuración de tests y fixtures compartidas."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# src/ importable sin instalar el paquete.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from core.config import AppSettings  # noqa: E402


@pytest.fixture
def settings() -> AppSettings:
    """Settings deterministas (sin leer `.env`)."""
    return AppSettings(_env_file=None, github_api_base_url="https://api.github.test")


@pytest.fixture
def json_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Fabrica un `MockTransport` que responde siempre con el mismo JSON.

    Devuelve también la lista de requests recibidas para poder inspeccionarlas.
    """

    def _factory(body: Any, status_code: int = 200) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                status_code,
                content=json.dumps(body).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        return httpx.MockTransport(handler), seen

    return _factory


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    return {
        "login": "octocat",
        "id": 583231,
        "name": "The Octocat",
        "company": "@github",
        "location": "San Francisco",
        "bio": None,
        "public_repos": 8,
        "followers": 9999,
    }
