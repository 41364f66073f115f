"""Column types: enums persisted by symbolic name via explicit mapping tables."""

from __future__ import annotations

from enum import Enum
from typing import Any

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class NamedEnumType(TypeDecorator):
    """Store an Enum member as its name from to_name; load it back via from_name.

    No reflection over the Enum class: both directions are explicit tables,
    so renaming or reordering members cannot silently change stored values.
    """

    impl = String(32)
    cache_ok = True

    def __init__(
        self,
        to_name: dict[Any, str],
        from_name: dict[str, Any],
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        # Stored as tuples under the parameter names: they form the cache key.
        self.to_name = tuple(to_name.items())
        self.from_name = tuple(from_name.items())

    def process_bind_param(self, value: Enum | str | None, dialect: Any) -> str | None:
        if value is None:
            return None
        for member, name in self.to_name:
            if value == member:
                return name
        raise ValueError(f"Unmapped enum value: {value!r}")

    def process_result_value(self, value: str | None, dialect: Any) -> Enum | None:
        if value is None:
            return None
        for name, member in self.from_name:
            if value == name:
                return member
        raise ValueError(f"Unknown stored enum name: {value!r}")
