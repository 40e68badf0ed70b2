"""
Declarative field schemas — presence validation and allow-list extraction.

A schema maps each field name of a resource to a ``FieldSpec`` that says
whether the field is required.  Two pure functions work against it:

    validate_against_schema(candidate, schema)
        "Is this payload acceptable as input?"  True only when the
        candidate is a mapping and every required field is a key of it.

    extract_valid_fields(candidate, schema)
        "Which subset is safe to persist?"  A new dict holding only the
        declared fields that are present in the candidate.

Route handlers validate before create/replace and always extract before
handing a payload to a repository.

Usage::

    PHOTO_SCHEMA = build_schema(userid=True, businessid=True, caption=False)

    if not validate_against_schema(payload, PHOTO_SCHEMA):
        ...  # 400
    fields = extract_valid_fields(payload, PHOTO_SCHEMA)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor for a single schema field."""

    required: bool = False


SchemaMap = Mapping[str, FieldSpec]


def build_schema(**fields: bool | FieldSpec) -> SchemaMap:
    """Build a read-only schema from ``name=required`` keyword pairs."""
    spec = {
        name: value if isinstance(value, FieldSpec) else FieldSpec(required=bool(value))
        for name, value in fields.items()
    }
    return MappingProxyType(spec)


def required_fields(schema: SchemaMap) -> list[str]:
    """Names of the fields a candidate must carry, in declaration order."""
    return [name for name, spec in schema.items() if spec.required]


def validate_against_schema(candidate: Any, schema: SchemaMap) -> bool:
    """
    Check that ``candidate`` carries every required field of ``schema``.

    Only key presence is checked: a required key holding ``None`` or any
    other falsy value still counts.  Keys the schema does not declare are
    ignored.  Non-mapping candidates (None, scalars, strings, lists) are
    rejected.
    """
    if not isinstance(candidate, Mapping):
        return False
    return all(name in candidate for name in required_fields(schema))


def extract_valid_fields(candidate: Any, schema: SchemaMap) -> dict[str, Any]:
    """
    Return a new dict with the declared fields present in ``candidate``.

    Values are carried over as-is (no copy).  A non-mapping candidate is
    treated as empty and yields ``{}``.
    """
    if not isinstance(candidate, Mapping):
        return {}
    return {name: candidate[name] for name in schema if name in candidate}
