"""Application pagination – QueryInput and the PaginationOptions record."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence, Union

QueryInput = Mapping[str, Union[str, Sequence[str], None]]

_WIRE_NAMES: dict[str, str] = {
    "starting_after": "startingAfter",
    "ending_before": "endingBefore",
}


@dataclasses.dataclass(frozen=True)
class PaginationOptions:
    """Options handed to the pagination engine.

    Every field is optional; ``None`` means the caller did not ask for it.
    ``query`` and ``aggregate`` are never both set: when an aggregation is
    requested the filtered query becomes its leading ``$match`` stage.
    """

    select: str | None = None
    populate: str | None = None
    projection: str | None = None
    lean: bool | None = None
    key: str | None = None
    page: int | float | None = None
    limit: int | float | None = None
    sort: str | None = None
    starting_after: Any = None
    ending_before: Any = None
    query: dict[str, Any] | None = None
    aggregate: list[Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the set fields under their external names."""
        return {
            _WIRE_NAMES.get(field.name, field.name): getattr(self, field.name)
            for field in dataclasses.fields(self)
            if getattr(self, field.name) is not None
        }


__all__ = ["PaginationOptions", "QueryInput"]
