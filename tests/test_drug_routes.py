"""
Route tests for the drug pages.
The repository is mocked; routes, service, validator and templates are real.
"""
from decimal import Decimal
import pytest
from fastapi.testclient import TestClient
from src.core.dependencies import get_drug_service
from src.main import app
from src.models.page import Page, PageRequest
from src.services.drug_service import DrugService
from src.services.drug_validator import DrugValidator

TEST_DRUG_ID = 1
FORM_VIEW = "drugs/create_or_update_drug_form.html"


class TestDrugRoutes:
    """Test suite for the drug routes."""

    @pytest.fixture
    def client(self, mock_drug_repo, amoxicillin):
        """TestClient whose DrugService uses the mocked repository."""
        mock_drug_repo.find_by_id.side_effect = (
            lambda drug_id: amoxicillin if drug_id == TEST_DRUG_ID else None
        )
        mock_drug_repo.find_all_paginated.return_value = Page([amoxicillin], PageRequest(1, 5), 1)
        service = DrugService(mock_drug_repo, DrugValidator(max_price=Decimal("1000")))

        app.dependency_overrides[get_drug_service] = lambda: service
        yield TestClient(app, follow_redirects=False)
        app.dependency_overrides.clear()

    def test_list_drugs(self, client):
        """Test the list page renders the drugs."""
        response = client.get("/drugs")

        assert response.status_code == 200
        assert response.template.name == "drugs/drug_list.html"
        assert "list_drugs" in response.context
        assert response.context["list_drugs"][0].name == "Amoxicillin"
        assert "Amoxicillin" in response.text

    def test_list_drugs_passes_page(self, client, mock_drug_repo):
        """Test the page query parameter reaches the repository."""
        client.get("/drugs", params={"page": 3})

        assert mock_drug_repo.find_all_paginated.call_args.args[0].page == 3

    def test_list_drugs_rejects_page_zero(self, client):
        """Test page numbers below 1 are rejected."""
        assert client.get("/drugs", params={"page": 0}).status_code == 422

    def test_init_creation_form(self, client):
        """Test the blank creation form."""
        response = client.get("/drugs/new")

        assert response.status_code == 200
        assert "drug" in response.context
        assert response.context["is_new"] is True
        assert response.template.name == FORM_VIEW

    def test_process_creation_form_success(self, client, mock_drug_repo):
        """Test a valid drug is created and redirects to the list."""
        response = client.post("/drugs/new", data={"name": "Carprofen", "price": "45.50"})

        assert response.status_code == 303
        assert response.headers["location"] == "/drugs"
        mock_drug_repo.save.assert_called_once()

    def test_process_creation_form_has_errors(self, client, mock_drug_repo):
        """Test empty fields re-display the form with errors."""
        response = client.post("/drugs/new", data={"name": "", "price": ""})

        assert response.status_code == 200
        assert response.context["errors"]
        assert response.template.name == FORM_VIEW
        mock_drug_repo.save.assert_not_called()

    def test_process_creation_form_missing_fields(self, client):
        """Test absent fields bind as empty and are reported."""
        response = client.post("/drugs/new", data={})

        assert response.status_code == 200
        assert set(response.context["errors"]) == {"name", "price"}

    def test_process_creation_form_price_too_high(self, client):
        """Test price 1000 gives a field error on price."""
        response = client.post("/drugs/new", data={"name": "Expensive Drug", "price": "1000"})

        assert response.status_code == 200
        assert "price" in response.context["errors"]
        assert "name" not in response.context["errors"]
        assert response.template.name == FORM_VIEW

    def test_process_creation_form_price_negative(self, client):
        """Test a negative price gives a field error on price."""
        response = client.post("/drugs/new", data={"name": "Cheap Drug", "price": "-10"})

        assert response.status_code == 200
        assert "price" in response.context["errors"]
        assert response.template.name == FORM_VIEW

    def test_invalid_submission_keeps_user_input(self, client):
        """Test the re-displayed form shows what the user typed."""
        response = client.post("/drugs/new", data={"name": "Expensive Drug", "price": "1000"})

        assert response.context["drug"].name == "Expensive Drug"
        assert response.context["drug"].price == "1000"
        assert 'value="Expensive Drug"' in response.text

    def test_init_update_form(self, client):
        """Test the edit form is pre-filled from the stored drug."""
        response = client.get(f"/drugs/{TEST_DRUG_ID}/edit")

        assert response.status_code == 200
        assert response.context["drug"].name == "Amoxicillin"
        assert response.context["drug"].price == "25.99"
        assert response.context["is_new"] is False
        assert response.template.name == FORM_VIEW

    def test_init_update_form_not_found(self, client):
        """Test editing an unknown drug renders a 404 page."""
        response = client.get("/drugs/999/edit")

        assert response.status_code == 404
        assert response.template.name == "error.html"

    def test_process_update_form_success(self, client):
        """Test a valid update redirects to the list."""
        response = client.post(
            f"/drugs/{TEST_DRUG_ID}/edit", data={"name": "Amoxicillin", "price": "30.00"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/drugs"

    def test_process_update_form_has_errors(self, client, mock_drug_repo, amoxicillin):
        """Test an out-of-range update re-displays and leaves the record unchanged."""
        response = client.post(
            f"/drugs/{TEST_DRUG_ID}/edit", data={"name": "Amoxicillin", "price": "1500"}
        )

        assert response.status_code == 200
        assert "price" in response.context["errors"]
        assert response.template.name == FORM_VIEW
        mock_drug_repo.save.assert_not_called()
        assert amoxicillin.price == Decimal("25.99")

    def test_process_update_form_not_found(self, client):
        """Test updating an unknown drug renders a 404 page."""
        response = client.post("/drugs/999/edit", data={"name": "Ghost", "price": "1"})

        assert response.status_code == 404

    def test_delete_drug(self, client, mock_drug_repo):
        """Test deleting a drug redirects to the list."""
        response = client.get(f"/drugs/{TEST_DRUG_ID}/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/drugs"
        mock_drug_repo.delete.assert_called_once()

    def test_delete_unknown_drug_redirects(self, client):
        """Test deleting an absent drug still redirects."""
        response = client.get("/drugs/999/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/drugs"
