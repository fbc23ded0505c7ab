"""
Data Transfer Objects for the drug pages.
Carries form input and view state between the service and the templates.
"""
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class DrugForm(BaseModel):
    """Raw form input for a drug, kept as entered so it can be re-displayed."""
    name: str = Field(default="", description="Name of the drug")
    price: str = Field(default="", description="Price as entered by the user")

    @classmethod
    def from_drug(cls, drug) -> "DrugForm":
        return cls(name=drug.name, price=format(drug.price, "f"))


class DrugResponse(BaseModel):
    """A persisted drug as shown in the list view."""
    id: int
    name: str
    price: Decimal

    class Config:
        from_attributes = True


class DrugListView(BaseModel):
    """One page of the drug list."""
    drugs: list[DrugResponse]
    current_page: int
    total_pages: int
    total_items: int


class DrugFormResult(BaseModel):
    """
    Outcome of a form step: either a form to render (possibly with errors)
    or a location to redirect to.
    """
    form: DrugForm = Field(default_factory=DrugForm)
    drug_id: Optional[int] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    redirect_to: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.drug_id is None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None
