"""Versiones con `asyncio.Future` de tres operaciones estilo callback.

Uso:
    >>> import asyncio
    >>> from promisification import fetch_profile, generate_token, make_file_funny
    >>> async def main():
    ...     profile = await fetch_profile("octocat")
    ...     token = await generate_token()
    ...     text = await make_file_funny("notes.txt")
    >>> asyncio.run(main())

Las funciones que devuelven future deben llamarse con un loop en ejecución.
"""

from __future__ import annotations

from adapters.funny_file import make_file_funny, make_funny, read_file_and_make_it_funny
from adapters.github_profile import fetch_profile, get_github_profile
from adapters.random_token import TOKEN_BYTES, generate_random_token, generate_token
from core.deferred import promisify
from core.domain.errors import RemoteProfileError
from core.log import setup_logging

__all__ = [
    "TOKEN_BYTES",
    "RemoteProfileError",
    "fetch_profile",
    "generate_random_token",
    "generate_token",
    "get_github_profile",
    "make_file_funny",
    "make_funny",
    "promisify",
    "read_file_and_make_it_funny",
    "setup_logging",
]
