"""Human-readable dumps of domain values."""

from __future__ import annotations

from functools import cache
from typing import Any

from pydantic import TypeAdapter


@cache
def _adapter_for(kind: type) -> TypeAdapter[Any]:
    return TypeAdapter(kind)


def dump(value: object) -> str:
    """Serialize a domain dataclass to indented JSON."""

    payload = _adapter_for(type(value)).dump_json(value, indent=2)
    return payload.decode("utf-8")
