"""CRUD + filter + search over a ``RecordStore``.

Same semantics as a generated ``services.ts``:

* ``address`` filter: case-insensitive exact match.
* ``age`` filter: numeric exact match, ignored when the value is not a number.
* ``search`` filter: case-insensitive substring match on ``name`` only.
* Filters compose with AND over a fresh copy, so the store is never
  reordered or mutated by a read.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from sv_modular.naming import to_pascal
from sv_modular.runtime import responses
from sv_modular.runtime.responses import ApiResponse
from sv_modular.runtime.store import RecordStore, SeedRecord, new_id


_JS_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_JS_RADIX = {
    "0x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"[0-7]+"), 8),
    "0b": (re.compile(r"[01]+"), 2),
}
_JS_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _string_to_number(text: str) -> float | None:
    """JavaScript's StringToNumber on an already trimmed string."""
    if not text:
        return 0.0
    if text in _JS_INFINITY:
        return _JS_INFINITY[text]
    radix = _JS_RADIX.get(text[:2].lower())
    if radix is not None:
        pattern, base = radix
        digits = text[2:]
        if not pattern.fullmatch(digits):
            return None
        try:
            return float(int(digits, base))
        except OverflowError:
            return math.inf
    if _JS_DECIMAL.fullmatch(text):
        return float(text)
    return None


def to_number(value: Any) -> int | float | None:
    """Coerce a scalar JSON value the way JavaScript's ``Number()`` does.

    Strings accept decimal literals with an optional exponent, unsigned
    ``0x``/``0o``/``0b`` integers and the exact spelling ``Infinity``; a
    blank string is ``0``. Python-only spellings such as ``"1_0"`` or
    ``"inf"`` are rejected. Returns ``None`` where ``Number()`` would yield
    ``NaN``, and for ``None``, lists and objects.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        number = _string_to_number(value.strip())
        if number is None:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return int(number) if number.is_integer() else number


def _parse_body(body: Any) -> Any:
    if isinstance(body, (str, bytes)):
        return json.loads(body)
    return body


class ResourceService:
    """The five operations of a generated module, bound to an injected store."""

    def __init__(self, name: str, store: RecordStore) -> None:
        self.class_name = to_pascal(name)
        self.store = store

    # -- Reads -------------------------------------------------------------

    def filter_records(
        self,
        address: str | None = None,
        age: str | None = None,
        search: str | None = None,
    ) -> list[SeedRecord]:
        records = self.store.snapshot()

        if address:
            wanted = address.lower()
            records = [r for r in records if r.address.lower() == wanted]

        if age:
            wanted_age = to_number(age)
            if wanted_age is not None:
                records = [r for r in records if r.age == wanted_age]

        if search:
            needle = search.lower()
            records = [r for r in records if needle in r.name.lower()]

        return records

    def list_records(
        self,
        address: str | None = None,
        age: str | None = None,
        search: str | None = None,
    ) -> ApiResponse:
        records = self.filter_records(address=address, age=age, search=search)
        return responses.ok([r.model_dump() for r in records])

    def get_record(self, record_id: str) -> ApiResponse:
        index = self.store.index_of(record_id)
        if index == -1:
            return responses.not_found(f"{self.class_name} not found")
        return responses.ok(self.store.snapshot()[index].model_dump())

    # -- Writes ------------------------------------------------------------

    def insert_record(self, body: Any) -> ApiResponse:
        try:
            payload = _parse_body(body)
        except json.JSONDecodeError as exc:
            return responses.bad_request("Invalid JSON body", str(exc))

        if not isinstance(payload, dict) or not payload.get("name") or not payload.get("email"):
            return responses.bad_request("Invalid payload")

        address = payload.get("address")
        record = SeedRecord.model_construct(
            id=new_id(),
            name=payload["name"],
            email=payload["email"],
            address="" if address is None else address,
            age=to_number(payload.get("age")) or 0,
        )
        self.store.append(record)
        return responses.created(record.model_dump())

    def update_record(self, record_id: str, body: Any) -> ApiResponse:
        index = self.store.index_of(record_id)
        if index == -1:
            return responses.not_found(f"{self.class_name} not found")

        try:
            payload = _parse_body(body)
        except json.JSONDecodeError as exc:
            return responses.bad_request("Invalid JSON body", str(exc))
        if not isinstance(payload, dict):
            payload = {}

        current = self.store.snapshot()[index]
        merged = SeedRecord.model_construct(**{**current.model_dump(), **payload})
        self.store.replace(index, merged)
        return responses.ok(merged.model_dump())

    def delete_record(self, record_id: str) -> ApiResponse:
        index = self.store.index_of(record_id)
        if index == -1:
            return responses.not_found(f"{self.class_name} not found")

        removed = self.store.pop(index)
        return responses.ok(removed.model_dump(), f"{self.class_name} deleted")
