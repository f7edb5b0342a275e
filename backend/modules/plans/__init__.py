"""
Plans module.

Public plan catalog and checkout. Payment collection is handled by an
external provider; this module prices the checkout and applies its result.
"""

from .interfaces import IPlanService
from .models import BillingPeriod, Checkout, PaymentStatus, PlanDetail
from .exceptions import InvalidBillingPeriodError, PlanNotFoundError, PlanNotPurchasableError

__all__ = [
    "IPlanService",
    "BillingPeriod",
    "Checkout",
    "PaymentStatus",
    "PlanDetail",
    "InvalidBillingPeriodError",
    "PlanNotFoundError",
    "PlanNotPurchasableError",
]
