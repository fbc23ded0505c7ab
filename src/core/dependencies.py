"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.core import config
from src.repositories.db_repository import DrugRepository
from src.repositories.dynamo_repository import DynamoRepository
from src.repositories.memory_repository import InMemoryDrugRepository
from src.services.drug_service import DrugService
from src.services.drug_validator import DrugValidator


@lru_cache()
def get_drug_repository() -> DrugRepository:
    """Get the configured DrugRepository singleton instance."""
    if config.settings.storage_backend.lower() == "memory":
        return InMemoryDrugRepository()
    return DynamoRepository()


@lru_cache()
def get_drug_validator() -> DrugValidator:
    """Get DrugValidator singleton instance."""
    return DrugValidator()


@lru_cache()
def get_drug_service() -> DrugService:
    """Get DrugService singleton instance with injected dependencies."""
    return DrugService(
        drug_repository=get_drug_repository(),
        drug_validator=get_drug_validator()
    )
