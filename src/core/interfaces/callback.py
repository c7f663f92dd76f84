"""Contrato de callbacks de finalización.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Cualquier callable `(error, result)` sirve: funciones, lambdas, métodos.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class NodeCallback(Protocol[T_contra]):
    """Callback con el error primero.

    Reglas de diseño:
    - Se invoca una sola vez por operación.
    - Si `error` no es None, `result` no tiene significado (se pasa None).
    """

    def __call__(self, error: BaseException | None, result: T_contra | None) -> None:
        ...
