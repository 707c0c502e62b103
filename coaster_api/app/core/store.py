"""
In-memory coaster storage.

``CoasterStore`` owns the mapping from record ID to ``Coaster`` and
the single lock guarding it.  The lock is held only while the mapping
is read or written; callers encode JSON and talk to the network after
the store has handed back its copies.

Records are never updated or removed, and nothing survives a restart.
"""

import threading
import time
from typing import Callable, Dict, Iterable, List, Optional

from ..schemas.coaster import Coaster, CoasterBase


SEED_COASTERS = (
    Coaster(
        id="id1",
        name="Furry 325",
        manufacturer="B+M",
        in_park="CaroWinds",
        height=99,
    ),
)


class IdGenerator:
    """Hand out unique, strictly increasing numeric string IDs.

    Values track the wall clock in nanoseconds, but a value is never
    repeated: when the clock has not moved past the last issued value
    the next integer is used instead.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            self._last = max(self._clock(), self._last + 1)
            return str(self._last)


class CoasterStore:
    """Thread-safe mapping of coaster ID to record.

    Parameters
    ----------
    seed : Optional[Iterable[Coaster]]
        Records to start with.  ``None`` loads ``SEED_COASTERS``; pass an
        empty iterable for an empty store.  Seed records keep their IDs.
    id_generator : Optional[Callable[[], str]]
        Source of IDs for new records.  Defaults to an ``IdGenerator``.
    """

    def __init__(
        self,
        seed: Optional[Iterable[Coaster]] = None,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._records: Dict[str, Coaster] = {}
        self._next_id = id_generator or IdGenerator()
        for coaster in SEED_COASTERS if seed is None else seed:
            if not coaster.id:
                raise ValueError("seed coasters must carry an id")
            self._records[coaster.id] = coaster

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, coaster_id: object) -> bool:
        with self._lock:
            return coaster_id in self._records

    def snapshot(self) -> List[Coaster]:
        """Return a copy of every record, in no particular order."""
        with self._lock:
            return list(self._records.values())

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._records)

    def get(self, coaster_id: str) -> Optional[Coaster]:
        with self._lock:
            return self._records.get(coaster_id)

    def add(self, data: CoasterBase) -> Coaster:
        """Store ``data`` under a freshly generated ID and return the record.

        Any ID already present on ``data`` is discarded.
        """
        fields = data.model_dump(exclude={"id"})
        coaster = Coaster(id=self._next_id(), **fields)
        with self._lock:
            self._records[coaster.id] = coaster
        return coaster
