"""
Plan module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Checkout, PaymentResult, PlanDetail


@runtime_checkable
class IPlanService(Protocol):
    """
    Interface for the plan catalog and checkout.

    The payment provider itself is external; this service prices a checkout
    and applies its result.
    """

    def catalog(self) -> list[PlanDetail]:
        """Every plan, free plan included."""
        ...

    def detail(self, plan: str) -> PlanDetail:
        """
        Raises:
            PlanNotFoundError: If the plan is unknown
        """
        ...

    def checkout(self, user: AuthenticatedUser, plan: str, period: str = "monthly") -> Checkout:
        """
        Price a paid plan for the caller.

        Raises:
            PlanNotFoundError: If the plan is unknown
            PlanNotPurchasableError: If the plan has no price
            InvalidBillingPeriodError: If period is not monthly or yearly
        """
        ...

    async def complete_checkout(
        self,
        user: AuthenticatedUser,
        plan: str,
        status: str,
    ) -> PaymentResult:
        """
        Apply a payment outcome.

        Only an approved payment changes the stored plan and reissues the
        caller's credential.
        """
        ...
