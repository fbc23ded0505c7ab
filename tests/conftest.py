"""
Shared test fixtures and utilities.
"""
from decimal import Decimal
from unittest.mock import Mock
import pytest
from src.models.drug_model import Drug
from src.repositories.db_repository import DrugRepository

TEST_DRUG_ID = 1


@pytest.fixture
def amoxicillin():
    """Stored drug used across workflow and route tests."""
    return Drug(name="Amoxicillin", price=Decimal("25.99"), id=TEST_DRUG_ID)


@pytest.fixture
def mock_drug_repo():
    """Mock DrugRepository that echoes saved drugs back with an id."""
    repo = Mock(spec=DrugRepository)
    repo.save.side_effect = lambda drug: Drug(
        name=drug.name,
        price=drug.price,
        id=drug.id if drug.id is not None else 42
    )
    return repo
