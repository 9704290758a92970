from __future__ import annotations

from typing import Any

from .data_model import DataModel


class Operation(DataModel):
    """Call of a component operation.

    Attributes:
        name: Operation name.
        args: Keyword arguments of the call.
    """

    name: str | None = None
    args: dict[str, Any] | None = None

    @staticmethod
    def normalize(
        name: str | None,
        args: dict[str, Any] | None,
    ) -> Operation:
        """Build an operation from the bound arguments of a method.

        `self` and arguments left as None are dropped. A `kwargs` entry
        is flattened into the other arguments.
        """
        if args is None:
            return Operation(name=name)
        extra = args.get("kwargs") or {}
        normalized = {
            key: value
            for key, value in args.items()
            if key not in ("self", "kwargs") and value is not None
        }
        normalized.update(extra)
        return Operation(name=name, args=normalized)

    def __str__(self) -> str:
        if not self.args:
            return self.name or ""
        return f"{self.name}({', '.join(self.args)})"
