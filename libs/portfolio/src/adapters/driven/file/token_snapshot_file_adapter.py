"""Token Snapshot File Adapter

Local JSON portfolio file
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from libs.planning.src.domain.services.stage_plan_validator import validate_stage_plan
from libs.portfolio.src.ports.token_snapshot_provider_port import (
    TokenSnapshotProviderPort,
)
from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.conviction import Conviction
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind
from libs.shared.src.errors.invalid_stage_plan_error import InvalidStagePlanError

# Exports from the web app use camelCase keys
_CAMEL_TO_SNAKE = {
    "pairAddress": "pair_address",
    "entryPrice": "entry_price",
    "marketCap": "market_cap",
    "targetMarketCap": "target_market_cap",
    "exitStrategy": "exit_strategy",
    "customExitStages": "custom_exit_stages",
    "imageUrl": "image_url",
    "percentChange24h": "percent_change_24h",
}

_NUMERIC_FIELDS = (
    "amount",
    "price",
    "entry_price",
    "market_cap",
    "target_market_cap",
    "percent_change_24h",
)


class TokenSnapshotFileAdapter(TokenSnapshotProviderPort):
    """Token snapshot file storage

    Format: JSON list of token objects (snake_case or camelCase keys)
    """

    def __init__(self, file_path: str = "data/portfolio.json") -> None:
        """Initialize

        Args:
            file_path: Portfolio JSON file path
        """
        self._file_path = Path(file_path)
        self._logger = logging.getLogger(self.__class__.__name__)

    def get_tokens(self) -> list[TokenSnapshotDTO]:
        if not self._file_path.exists():
            self._logger.warning(f"Portfolio file {self._file_path} not found")
            return []

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        if isinstance(raw, dict):
            raw = raw.get("tokens", [])
        if not isinstance(raw, list):
            raise ValueError(f"{self._file_path} must hold a list of tokens")

        return [self._to_snapshot(item) for item in raw if isinstance(item, dict)]

    def save_tokens(self, tokens: list[TokenSnapshotDTO]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(tokens, f, ensure_ascii=False, indent=2, default=_json_default)

    def _to_snapshot(self, item: dict[str, Any]) -> TokenSnapshotDTO:
        token: dict[str, Any] = {
            _CAMEL_TO_SNAKE.get(key, key): value for key, value in item.items()
        }

        for field in _NUMERIC_FIELDS:
            if field in token:
                token[field] = _to_float(token[field])

        if "custom_exit_stages" in token:
            token["custom_exit_stages"] = self._parse_custom_stages(
                token["custom_exit_stages"], token.get("symbol")
            )

        token["exit_strategy"] = self._parse_strategy(token.get("exit_strategy"))
        token["conviction"] = self._parse_conviction(token.get("conviction"))
        return token  # type: ignore[return-value]

    def _parse_strategy(self, value: Any) -> ExitStrategyKind:
        if value is None:
            return ExitStrategyKind.TARGET_ONLY
        try:
            return ExitStrategyKind(value)
        except ValueError:
            self._logger.warning(f"Unknown exit strategy {value!r}, using target only")
            return ExitStrategyKind.TARGET_ONLY

    def _parse_custom_stages(
        self, value: Any, symbol: Any
    ) -> list[ExitStageDTO] | None:
        if value is None:
            return None
        if isinstance(value, list):
            value = [_coerce_stage(stage) for stage in value]
        try:
            return validate_stage_plan(value, require_full_allocation=False)
        except InvalidStagePlanError as e:
            self._logger.warning(f"Dropping custom stages of {symbol}: {e.message}")
            return None

    def _parse_conviction(self, value: Any) -> Conviction:
        if value is None:
            return Conviction.MEDIUM
        try:
            return Conviction(value)
        except ValueError:
            self._logger.warning(f"Unknown conviction {value!r}, using medium")
            return Conviction.MEDIUM


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _coerce_stage(stage: Any) -> Any:
    if not isinstance(stage, dict):
        return stage
    coerced = dict(stage)
    for field in ("percentage", "multiplier"):
        # Unparseable strings become 0 and fail validation
        if isinstance(coerced.get(field), str):
            coerced[field] = _to_float(coerced[field])
    return coerced


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"{type(value).__name__} is not JSON serializable")
