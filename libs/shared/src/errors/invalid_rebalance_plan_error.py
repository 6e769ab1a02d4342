"""Invalid Rebalance Plan Error"""

from libs.shared.src.errors.domain_error import DomainError


class InvalidRebalancePlanError(DomainError):
    """Invalid rebalance plan error

    Raised when an AI-authored sell/buy plan is malformed or references
    tokens outside the portfolio
    """

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Invalid rebalance plan: {reason}", code="INVALID_REBALANCE_PLAN"
        )
        self.reason = reason
