"""
Service layer for coaster records.

Listing, lookup, random selection and creation of coasters.  All data
lives in the ``CoasterStore`` handed to the service; the service adds
logging and the selection rules on top of it.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from coaster_api.app.core.store import CoasterStore
from coaster_api.app.schemas.coaster import Coaster, CoasterCreate

logger = logging.getLogger(__name__)


class CoasterService:
    """Service class for managing coasters."""

    def __init__(self, store: CoasterStore, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self._rng = rng or random.Random()

    def list_coasters(self) -> List[Coaster]:
        """Return every stored coaster, in no particular order."""
        return self.store.snapshot()

    def get_coaster(self, coaster_id: str) -> Optional[Coaster]:
        """Retrieve a single coaster by ID, or ``None`` if it does not exist."""
        return self.store.get(coaster_id)

    def get_random_coaster(self) -> Optional[Coaster]:
        """Pick one stored coaster uniformly at random.

        Returns ``None`` when the store is empty.  With a single record
        that record is returned without consulting the random number
        generator.  Selection is not cryptographically secure.
        """
        ids = self.store.ids()
        if not ids:
            return None
        if len(ids) == 1:
            target = ids[0]
        else:
            target = self._rng.choice(ids)
        # A record is never deleted, so the chosen id is still present.
        return self.store.get(target)

    def create_coaster(self, data: CoasterCreate) -> Coaster:
        """Insert a new coaster and return it with its server-assigned ID."""
        coaster = self.store.add(data)
        logger.info("Created coaster %s (%s)", coaster.id, coaster.name)
        return coaster
