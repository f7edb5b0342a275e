"""
Plan service implementation.

Prices come from the policy table's catalog. Decimal is used throughout;
amounts are never floats.
"""

import logging

from shared.models import AuthenticatedUser, Plan
from modules.auth.interfaces import IAuthService
from modules.policy import UPGRADE_REDIRECT, home_redirect, plan_details

from .interfaces import IPlanService
from .models import BillingPeriod, Checkout, PaymentResult, PaymentStatus, PlanDetail
from .exceptions import InvalidBillingPeriodError, PlanNotFoundError, PlanNotPurchasableError

logger = logging.getLogger(__name__)


def _detail(plan: Plan) -> PlanDetail:
    return PlanDetail(plan=plan, **plan_details(plan))


def _known_plan(plan: str) -> Plan:
    try:
        return Plan((plan or "").strip().lower())
    except ValueError:
        raise PlanNotFoundError(plan)


class PlanService(IPlanService):
    def __init__(self, auth: IAuthService):
        self._auth = auth

    def catalog(self) -> list[PlanDetail]:
        return [_detail(plan) for plan in Plan]

    def detail(self, plan: str) -> PlanDetail:
        return _detail(_known_plan(plan))

    def checkout(self, user: AuthenticatedUser, plan: str, period: str = "monthly") -> Checkout:
        detail = self.detail(plan)
        try:
            billing_period = BillingPeriod(period)
        except ValueError:
            raise InvalidBillingPeriodError(period)

        amount = getattr(detail, billing_period.value)
        if amount is None:
            raise PlanNotPurchasableError(detail.plan.value)

        return Checkout(
            user_id=user.id,
            plan=detail.plan,
            name=detail.name,
            period=billing_period,
            amount=amount,
        )

    async def complete_checkout(
        self,
        user: AuthenticatedUser,
        plan: str,
        status: str,
    ) -> PaymentResult:
        paid_plan = self.detail(plan).plan

        if status != PaymentStatus.APPROVED.value:
            logger.info("Payment for %s by user %s ended as %s", paid_plan.value, user.id, status)
            return PaymentResult(ok=False, redirect=UPGRADE_REDIRECT)

        session = await self._auth.update_plan(user, paid_plan.value)
        return PaymentResult(
            ok=True,
            token=session.token,
            plan=paid_plan,
            redirect=home_redirect(user.role),
        )
