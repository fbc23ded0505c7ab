"""
Unit tests for the pagination models.
"""
from decimal import Decimal
import pytest
from src.core.exceptions import ValidationException
from src.models.drug_model import Drug
from src.models.page import Page, PageRequest


class TestPage:
    """Test Page and PageRequest."""

    def test_page_request_offset(self):
        assert PageRequest(3, 5).offset == 10

    @pytest.mark.parametrize("page,size", [(0, 5), (-1, 5), (1, 0)])
    def test_page_request_rejects_invalid_values(self, page, size):
        with pytest.raises(ValidationException):
            PageRequest(page, size)

    def test_page_totals(self):
        """Test derived pagination flags."""
        page = Page([Drug("Amoxicillin", Decimal("25.99"), id=6)], PageRequest(2, 5), 11)

        assert page.total_pages == 3
        assert page.has_previous
        assert page.has_next
        assert len(page) == 1

    def test_empty_page(self):
        page = Page([], PageRequest(1, 5), 0)

        assert page.total_pages == 0
        assert not page.has_previous
        assert not page.has_next
