"""
Abstract base class for drug repositories.
Defines the contract for drug data storage operations.
"""
from abc import ABC, abstractmethod
from typing import Optional
from src.models.drug_model import Drug
from src.models.page import Page, PageRequest


class DrugRepository(ABC):
    """Abstract repository interface for drug data operations."""

    @abstractmethod
    def find_all_paginated(self, page_request: PageRequest) -> Page:
        """Retrieve one page of drugs ordered by id. Never fails on an empty store."""
        pass

    @abstractmethod
    def find_by_id(self, drug_id: int) -> Optional[Drug]:
        """Find a drug by id, returning None when it does not exist."""
        pass

    @abstractmethod
    def save(self, drug: Drug) -> Drug:
        """Insert a new drug (assigning its id) or update an existing one."""
        pass

    @abstractmethod
    def delete(self, drug: Drug) -> None:
        """Delete a drug by id. Deleting an absent drug is a no-op."""
        pass
