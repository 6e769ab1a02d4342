"""Domain Error

Root of every error the exit planner raises on purpose
"""


class DomainError(Exception):
    """Rule violation in planning, rebalancing or risk analytics

    Attributes:
        message: Human-readable description, printed by the CLI
        code: Stable identifier such as "INVALID_STAGE_PLAN"
            (defaults to the class name)
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
