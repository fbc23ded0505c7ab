"""
Field validation for drug form submissions.
Checks every rule and collects all errors instead of stopping at the first one.
"""
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Dict, List, Optional
from src.core import config
from src.models.drug_model import Drug
from src.models.dto.drug_dto import DrugForm

NAME_MAX_LENGTH = 100
CENT = Decimal("0.01")

FieldErrors = Dict[str, List[str]]


def parse_price(text: str) -> Optional[Decimal]:
    """Parse price text into a finite Decimal, or None when it is not a number."""
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError):
        return None
    return value if value.is_finite() else None


class DrugValidator:
    """Validates a DrugForm against the catalogue rules."""

    def __init__(self, max_price: Optional[Decimal] = None):
        self.max_price = max_price if max_price is not None else config.settings.max_drug_price

    def validate(self, form: DrugForm) -> FieldErrors:
        """
        Validate a candidate drug.

        Args:
            form: Raw form input

        Returns:
            Mapping of field name to error messages; empty when the form is valid
        """
        errors: FieldErrors = {}

        name_errors = self._validate_name(form.name)
        if name_errors:
            errors['name'] = name_errors

        price_errors = self._validate_price(form.price)
        if price_errors:
            errors['price'] = price_errors

        return errors

    def to_drug(self, form: DrugForm, drug_id: Optional[int] = None) -> Drug:
        """
        Build a Drug from a form that passed validation.

        The price is stored in whole cents; extra digits are truncated so the
        stored value never rises above the validated one.
        """
        price = parse_price(form.price).quantize(CENT, rounding=ROUND_DOWN)
        return Drug(name=form.name.strip(), price=price, id=drug_id)

    def _validate_name(self, name: str) -> List[str]:
        name = (name or "").strip()
        if not name:
            return ["is required"]
        if len(name) > NAME_MAX_LENGTH:
            return [f"must be at most {NAME_MAX_LENGTH} characters"]
        return []

    def _validate_price(self, text: str) -> List[str]:
        if not (text or "").strip():
            return ["is required"]

        price = parse_price(text)
        if price is None:
            return ["must be a number"]

        errors = []
        if price < 0:
            errors.append("must be non-negative")
        if price >= self.max_price:
            errors.append(f"must be less than {self.max_price}")
        return errors
