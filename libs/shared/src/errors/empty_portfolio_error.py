"""Empty Portfolio Error"""

from libs.shared.src.errors.domain_error import DomainError


class EmptyPortfolioError(DomainError):
    """Raised when an operation needs at least one token"""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"No tokens provided for {operation}", code="EMPTY_PORTFOLIO"
        )
        self.operation = operation
