"""Seed records and the in-memory store a generated module closes over."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field

from sv_modular.naming import to_pascal

SEED_COUNT = 5
BASE_AGE = 20


def new_id() -> str:
    """A random UUID4 string, the identifier format of every record."""
    return str(uuid.uuid4())


class SeedRecord(BaseModel):
    """The flat record shape declared in a module's ``types.ts``."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(default_factory=new_id)
    name: str
    email: str
    address: str = ""
    age: int | float = 0


def build_seed_records(name: str) -> list[SeedRecord]:
    """Five records for module *name*, aged ``20..24`` in order.

    ``build_seed_records("song")[0]`` is
    ``{"name": "Song User 1", "email": "song1@example.com", "address": "City 1", "age": 20}``
    plus a fresh id.
    """
    class_name = to_pascal(name)
    return [
        SeedRecord(
            name=f"{class_name} User {index + 1}",
            email=f"{name}{index + 1}@example.com",
            address=f"City {index + 1}",
            age=BASE_AGE + index,
        )
        for index in range(SEED_COUNT)
    ]


class RecordStore:
    """An explicitly owned, insertion-ordered list of records.

    Services receive a store instead of reaching for module-level state, so
    every test (or preview) works against its own copy.
    """

    def __init__(self, records: list[SeedRecord] | None = None) -> None:
        self._records: list[SeedRecord] = list(records or [])

    @classmethod
    def seeded(cls, name: str) -> "RecordStore":
        return cls(build_seed_records(name))

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> list[SeedRecord]:
        """A fresh list over the current records (records are shared)."""
        return list(self._records)

    def index_of(self, record_id: str) -> int:
        """Position of the record with *record_id*, or ``-1``."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def append(self, record: SeedRecord) -> None:
        self._records.append(record)

    def replace(self, index: int, record: SeedRecord) -> None:
        self._records[index] = record

    def pop(self, index: int) -> SeedRecord:
        return self._records.pop(index)
