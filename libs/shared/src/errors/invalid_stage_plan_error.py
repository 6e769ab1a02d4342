"""Invalid Stage Plan Error"""

from libs.shared.src.errors.domain_error import DomainError


class InvalidStagePlanError(DomainError):
    """Invalid stage plan error

    Raised when a collaborator-authored stage list cannot be trusted
    (not a list, non-numeric fields, or percentages not summing to 100)
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid exit stage plan: {reason}", code="INVALID_STAGE_PLAN")
        self.reason = reason
