"""
Plan catalog and checkout endpoints.

The catalog is public; checkout requires a session.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_plan_service
from shared.models import AuthenticatedUser

from .interfaces import IPlanService
from .models import CheckoutResult, PaymentResult, PlanCatalogResult, PlanDetailResult

router = APIRouter()


@router.get("/plans", response_model=PlanCatalogResult)
async def plans(service: IPlanService = Depends(get_plan_service)) -> PlanCatalogResult:
    return PlanCatalogResult(plans=service.catalog())


@router.get("/plan/detail", response_model=PlanDetailResult)
async def plan_detail(
    plan: str = Query(..., description="Plan name"),
    service: IPlanService = Depends(get_plan_service),
) -> PlanDetailResult:
    return PlanDetailResult(plan=service.detail(plan))


@router.get("/pay", response_model=CheckoutResult)
async def pay(
    plan: str = Query(..., description="Plan to buy"),
    period: str = Query("monthly", description="monthly or yearly"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPlanService = Depends(get_plan_service),
) -> CheckoutResult:
    """Checkout summary for a paid plan."""
    return CheckoutResult(checkout=service.checkout(user, plan, period))


@router.get("/pay/result", response_model=PaymentResult, response_model_exclude_none=True)
async def pay_result(
    plan: str = Query(..., description="Plan that was paid for"),
    status: str = Query(..., description="Payment provider status"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPlanService = Depends(get_plan_service),
) -> PaymentResult:
    """Apply the payment outcome; approved payments reissue the credential."""
    return await service.complete_checkout(user, plan, status)
