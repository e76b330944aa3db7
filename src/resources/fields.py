"""Three-state values for request options.

An option is either left alone (unset), explicitly blanked out on the server
(cleared), or given a value (set). Clearing is only meaningful for fields the
API lets you remove, such as callback URLs and application sids.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldState(Enum):
    UNSET = "unset"
    CLEARED = "cleared"
    SET = "set"


@dataclass(frozen=True)
class FieldValue:
    state: FieldState
    value: Any = None

    @classmethod
    def unset(cls) -> FieldValue:
        return cls(FieldState.UNSET)

    @classmethod
    def cleared(cls) -> FieldValue:
        return cls(FieldState.CLEARED)

    @classmethod
    def of(cls, value: Any) -> FieldValue:
        if value is None:
            raise ValueError("Use FieldValue.unset() for a missing value.")
        return cls(FieldState.SET, value)

    @classmethod
    def coerce(cls, raw: Any, *, clearable: bool = True) -> FieldValue:
        """Map a plain caller value onto a field state.

        ``None`` is unset. An empty string clears the field when it is
        clearable and is otherwise treated as unset.
        """

        if isinstance(raw, FieldValue):
            if raw.is_cleared and not clearable:
                return cls.unset()
            return raw
        if raw is None:
            return cls.unset()
        if isinstance(raw, str) and raw == "":
            return cls.cleared() if clearable else cls.unset()
        return cls.of(raw)

    @property
    def is_unset(self) -> bool:
        return self.state is FieldState.UNSET

    @property
    def is_cleared(self) -> bool:
        return self.state is FieldState.CLEARED

    @property
    def is_set(self) -> bool:
        return self.state is FieldState.SET

    def to_param(self) -> str:
        if self.is_unset:
            raise ValueError("An unset field has no parameter value.")
        if self.is_cleared:
            return ""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


UNSET = FieldValue.unset()
CLEAR = FieldValue.cleared()
