"""AI Strategy Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO


class AiStrategyResultDTO(TypedDict):
    """Validated AI-authored stage plan"""

    stages: list[ExitStageDTO]
    warning: str | None
