"""AI Planning Error"""

from libs.shared.src.errors.domain_error import DomainError


class AiPlanningError(DomainError):
    """AI planning collaborator failed to produce a plan"""

    def __init__(self, operation: str, reason: str | None = None) -> None:
        message = f"The AI planner failed to {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="AI_PLANNING_FAILED")
        self.operation = operation
        self.reason = reason
