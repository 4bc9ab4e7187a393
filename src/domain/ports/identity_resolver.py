from __future__ import annotations

from typing import Protocol

from src.domain.value_objects.identity import Identity


class IdentityResolver(Protocol):
    def canonicalize(self, display: str) -> Identity: ...

    def display(self, identity: Identity) -> str: ...
