from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects.identity import Identity


@dataclass(slots=True)
class AuthContext:
    identity: Identity
    display: str
    claims: dict[str, Any] = field(default_factory=dict)
