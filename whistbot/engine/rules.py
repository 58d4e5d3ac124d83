"""Rule configuration models for whist tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .cards import DECK_SIZE
from .state import Seat

__all__ = ["TableRules", "TrickRules", "RulesConfig", "load_rules", "DEFAULT_RULES_PATH"]


@dataclass
class TableRules:
    """Global table parameters."""

    seats: int = 4
    hand_size: int = 13

    def __post_init__(self) -> None:
        if not 2 <= self.seats <= len(Seat):
            msg = f"seats must be between 2 and {len(Seat)}, got {self.seats}"
            raise ValueError(msg)
        if self.hand_size < 1 or self.seats * self.hand_size > DECK_SIZE:
            msg = f"Cannot deal {self.hand_size} cards to {self.seats} seats from a {DECK_SIZE}-card deck"
            raise ValueError(msg)

    def model_dump(self) -> Dict[str, Any]:
        return {
            "seats": self.seats,
            "hand_size": self.hand_size,
        }


@dataclass
class TrickRules:
    """Rules for trick validation."""

    check_turn_order: bool = True

    def model_dump(self) -> Dict[str, Any]:
        return {
            "check_turn_order": self.check_turn_order,
        }


@dataclass
class RulesConfig:
    """Aggregate rule model for the table."""

    table: TableRules = field(default_factory=TableRules)
    trick_rules: TrickRules = field(default_factory=TrickRules)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RulesConfig(table={self.table}, trick_rules={self.trick_rules})"

    def model_dump(self) -> Dict[str, Any]:
        return {
            "table": self.table.model_dump(),
            "trick_rules": self.trick_rules.model_dump(),
        }

    @classmethod
    def model_validate(cls, data: Dict[str, Any]) -> "RulesConfig":
        """Create a configuration instance from raw data."""

        def build(model_cls, values):
            if isinstance(values, dict):
                return model_cls(**values)
            return model_cls()

        return cls(
            table=build(TableRules, data.get("table", {})),
            trick_rules=build(TrickRules, data.get("trick_rules", {})),
        )


DEFAULT_RULES_PATH = Path(__file__).with_name("rules_whist.yaml")


def load_rules(path: Path | str | None = None) -> RulesConfig:
    """Load rule configuration from YAML, falling back to defaults."""

    cfg_path = Path(path) if path is not None else DEFAULT_RULES_PATH
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    return RulesConfig.model_validate(data)
