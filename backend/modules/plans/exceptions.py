"""
Plan module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class PlanNotFoundError(NotFoundError):
    """Raised for a plan name that is not in the catalog."""

    def __init__(self, plan: str):
        super().__init__(
            "Plan not found",
            code="PLAN_NOT_FOUND",
            details={"plan": plan},
        )


class PlanNotPurchasableError(ValidationError):
    """Raised when checking out a plan that has no price."""

    def __init__(self, plan: str):
        super().__init__(
            "This plan cannot be purchased",
            code="PLAN_NOT_PURCHASABLE",
            details={"plan": plan},
        )


class InvalidBillingPeriodError(ValidationError):
    def __init__(self, period: str):
        super().__init__(
            "Invalid billing period",
            code="INVALID_PERIOD",
            details={"period": period},
        )
