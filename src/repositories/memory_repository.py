"""
In-memory drug repository.
Used for local development without AWS and in route tests.
"""
import itertools
import logging
import threading
from typing import Dict, Optional
from src.models.drug_model import Drug
from src.models.page import Page, PageRequest
from src.repositories.db_repository import DrugRepository

logger = logging.getLogger(__name__)


class InMemoryDrugRepository(DrugRepository):
    """Repository storing drugs in a dict keyed by id."""

    def __init__(self):
        self._store: Dict[int, Drug] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_all_paginated(self, page_request: PageRequest) -> Page:
        with self._lock:
            drugs = [self._copy(self._store[key]) for key in sorted(self._store)]

        content = drugs[page_request.offset:page_request.offset + page_request.size]
        return Page(content, page_request, len(drugs))

    def find_by_id(self, drug_id: int) -> Optional[Drug]:
        with self._lock:
            drug = self._store.get(drug_id)
        return self._copy(drug) if drug else None

    def save(self, drug: Drug) -> Drug:
        with self._lock:
            drug_id = drug.id
            while drug_id is None or (drug.id is None and drug_id in self._store):
                drug_id = next(self._ids)
            saved = Drug(name=drug.name, price=drug.price, id=drug_id)
            self._store[drug_id] = saved
        logger.debug("Stored drug %s in memory", drug_id)
        return self._copy(saved)

    def delete(self, drug: Drug) -> None:
        with self._lock:
            self._store.pop(drug.id, None)

    def _copy(self, drug: Drug) -> Drug:
        """Hand out copies so callers cannot mutate stored records."""
        return Drug(name=drug.name, price=drug.price, id=drug.id)
