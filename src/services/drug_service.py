"""
Drug Service for business logic.
Drives the list/create/edit/delete workflow between the routes and the repository.
"""
import logging
from src.core import config
from src.core.exceptions import DrugNotFoundException
from src.models.drug_model import Drug
from src.models.page import PageRequest
from src.models.dto.drug_dto import DrugForm, DrugFormResult, DrugListView, DrugResponse
from src.repositories.db_repository import DrugRepository
from src.services.drug_validator import DrugValidator

logger = logging.getLogger(__name__)

DRUG_LIST_URL = "/drugs"


class DrugService:
    """Service for drug-related workflow operations."""

    def __init__(self, drug_repository: DrugRepository, drug_validator: DrugValidator):
        self.drug_repository = drug_repository
        self.drug_validator = drug_validator

    def list_drugs(self, page: int = 1) -> DrugListView:
        """
        Retrieve one page of the drug list.

        Args:
            page: 1-based page number

        Returns:
            DrugListView with the page contents and pagination totals

        Raises:
            ValidationException: If the page number is invalid
        """
        result = self.drug_repository.find_all_paginated(
            PageRequest(page, config.settings.page_size)
        )

        return DrugListView(
            drugs=[DrugResponse.model_validate(drug) for drug in result.content],
            current_page=result.number,
            total_pages=result.total_pages,
            total_items=result.total_elements
        )

    def init_creation_form(self) -> DrugFormResult:
        """Blank form for a new drug."""
        return DrugFormResult(form=DrugForm())

    def process_creation_form(self, form: DrugForm) -> DrugFormResult:
        """
        Validate and persist a new drug.

        Returns:
            The same form with errors when invalid, otherwise a redirect to the list
        """
        errors = self.drug_validator.validate(form)
        if errors:
            logger.info("Rejected new drug: %s", errors)
            return DrugFormResult(form=form, errors=errors)

        drug = self.drug_repository.save(self.drug_validator.to_drug(form))
        logger.info("Created drug %s (%s)", drug.id, drug.name)
        return DrugFormResult(drug_id=drug.id, redirect_to=DRUG_LIST_URL)

    def init_update_form(self, drug_id: int) -> DrugFormResult:
        """
        Form pre-filled from a stored drug.

        Raises:
            DrugNotFoundException: If no drug has this id
        """
        drug = self._get_drug(drug_id)
        return DrugFormResult(form=DrugForm.from_drug(drug), drug_id=drug.id)

    def process_update_form(self, drug_id: int, form: DrugForm) -> DrugFormResult:
        """
        Validate and persist changes to an existing drug.

        Returns:
            The same form with errors when invalid, otherwise a redirect to the list

        Raises:
            DrugNotFoundException: If no drug has this id
        """
        self._get_drug(drug_id)

        errors = self.drug_validator.validate(form)
        if errors:
            logger.info("Rejected update of drug %s: %s", drug_id, errors)
            return DrugFormResult(form=form, drug_id=drug_id, errors=errors)

        self.drug_repository.save(self.drug_validator.to_drug(form, drug_id))
        logger.info("Updated drug %s", drug_id)
        return DrugFormResult(drug_id=drug_id, redirect_to=DRUG_LIST_URL)

    def delete_drug(self, drug_id: int) -> DrugFormResult:
        """
        Delete a drug. Deleting an unknown id still redirects to the list.
        """
        drug = self.drug_repository.find_by_id(drug_id)
        if drug is None:
            logger.info("Drug %s already absent, nothing to delete", drug_id)
        else:
            self.drug_repository.delete(drug)
            logger.info("Deleted drug %s", drug_id)

        return DrugFormResult(drug_id=drug_id, redirect_to=DRUG_LIST_URL)

    def _get_drug(self, drug_id: int) -> Drug:
        drug = self.drug_repository.find_by_id(drug_id)
        if drug is None:
            logger.warning("Drug %s not found", drug_id)
            raise DrugNotFoundException(drug_id)
        return drug
