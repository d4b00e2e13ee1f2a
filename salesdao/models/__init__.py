"""Domain models for the department/seller data-access layer."""

from salesdao.models.department import Department
from salesdao.models.seller import Seller

__all__ = ["Department", "Seller"]
