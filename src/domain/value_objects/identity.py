from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Identity:
    """Canonical form of a caller or owner address. Compared only for equality."""

    value: str

    def __str__(self) -> str:
        return self.value


def parse_identity(value: str | Identity) -> Identity:
    return value if isinstance(value, Identity) else Identity(value)
