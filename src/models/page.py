"""
Pagination models shared by repositories and services.
"""
import math
from typing import List
from src.core.exceptions import ValidationException
from src.models.drug_model import Drug


class PageRequest:
    """A 1-based page number and a page size."""

    def __init__(self, page: int = 1, size: int = 5):
        if page < 1:
            raise ValidationException("Page number must be at least 1")
        if size < 1:
            raise ValidationException("Page size must be at least 1")
        self.page = page
        self.size = size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def __repr__(self):
        return f"PageRequest(page={self.page}, size={self.size})"


class Page:
    """A slice of drugs plus the totals needed for pagination controls."""

    def __init__(self, content: List[Drug], page_request: PageRequest, total_elements: int):
        self.content = content
        self.number = page_request.page
        self.size = page_request.size
        self.total_elements = total_elements

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    def __len__(self):
        return len(self.content)

    def __repr__(self):
        return f"Page(number={self.number}, size={self.size}, total_elements={self.total_elements})"
