from __future__ import annotations

from src.application.errors import ValidationError
from src.domain.ports.identity_resolver import IdentityResolver
from src.domain.value_objects.identity import Identity


class NormalizingIdentityResolver(IdentityResolver):
    """Canonical form is the trimmed, lower-cased display address."""

    max_length = 255

    def canonicalize(self, display: str) -> Identity:
        value = (display or "").strip().lower()
        if not value:
            raise ValidationError("Address must not be empty")
        if any(ch.isspace() for ch in value):
            raise ValidationError(
                "Address must not contain whitespace", details={"address": display}
            )
        if len(value) > self.max_length:
            raise ValidationError("Address is too long", details={"max_length": self.max_length})
        return Identity(value)

    def display(self, identity: Identity) -> str:
        return identity.value
