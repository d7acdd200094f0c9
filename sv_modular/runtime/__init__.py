"""Executable model of the CRUD API a server module is generated with.

The generated TypeScript and this package implement the same contract: the
seed records embedded in ``values.ts`` come from ``RecordStore.seeded`` and
the ``preview`` command answers list queries through ``ResourceService``.
"""

from sv_modular.runtime.responses import ApiResponse
from sv_modular.runtime.service import ResourceService
from sv_modular.runtime.store import SEED_COUNT, RecordStore, SeedRecord

__all__ = [
    "SEED_COUNT",
    "ApiResponse",
    "RecordStore",
    "ResourceService",
    "SeedRecord",
]
