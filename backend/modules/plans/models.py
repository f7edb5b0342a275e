"""
Plan catalog and checkout models.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import Plan


class BillingPeriod(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class PlanDetail(BaseModel):
    """One entry of the public plan catalog."""

    plan: Plan
    name: str
    monthly: Optional[Decimal] = Field(None, description="Monthly price; None for free plans")
    yearly: Optional[Decimal] = Field(None, description="Yearly price; None for free plans")
    features: list[str] = Field(default_factory=list)


class Checkout(BaseModel):
    """Summary shown before handing the caller to the payment provider."""

    user_id: str
    plan: Plan
    name: str
    period: BillingPeriod
    amount: Decimal


class PaymentStatus(str, Enum):
    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


# Response envelopes


class PlanCatalogResult(BaseModel):
    ok: bool = True
    plans: list[PlanDetail]


class PlanDetailResult(BaseModel):
    ok: bool = True
    plan: PlanDetail


class CheckoutResult(BaseModel):
    ok: bool = True
    checkout: Checkout


class PaymentResult(BaseModel):
    """
    Outcome of a checkout.

    Approved payments carry a reissued credential for the new plan;
    anything else sends the caller back to the catalog.
    """

    ok: bool
    token: Optional[str] = None
    plan: Optional[Plan] = None
    redirect: Optional[str] = None
