"""
Custom exceptions for the Drug Catalogue service.
Provides specific error types for different failure scenarios.
"""


class DrugCatalogueException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DrugCatalogueException):
    """Raised when a request cannot be processed as given."""
    pass


class DrugNotFoundException(DrugCatalogueException):
    """Raised when a drug is not found in the store."""
    def __init__(self, drug_id: int):
        self.drug_id = drug_id
        super().__init__(f"Drug with id {drug_id} not found")


class DynamoDBException(DrugCatalogueException):
    """Raised when DynamoDB operation fails."""
    pass
