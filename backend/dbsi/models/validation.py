"""Translation of pydantic validation errors into field names."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import BaseModel, ValidationError


def invalid_fields(exc: ValidationError, model: type[BaseModel]) -> set[str]:
    """Return the python field names named in *exc*, resolving aliases."""
    by_alias = {(info.alias or name): name for name, info in model.model_fields.items()}
    fields: set[str] = set()
    for error in exc.errors():
        head = str(error["loc"][0]) if error["loc"] else "__root__"
        fields.add(by_alias.get(head, head))
    return fields
