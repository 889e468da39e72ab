from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class Thresholds:
    finish: float = 65.0
    pause: float = 35.0


@dataclass(frozen=True)
class Weights:
    base_enjoyment: float = 10.0
    backlog_penalty_max: float = 25.0
    time_investment_bonus: float = 10.0
    completionist_bonus: float = 15.0
    remaining_time_penalty: float = 15.0


@dataclass(frozen=True)
class RemainingTimeRule:
    # penalty applies when hours_remaining > hours_trigger and enjoyment < enjoyment_cutoff
    hours_trigger: float = 20.0
    enjoyment_cutoff: int = 6
    hours_cap: float = 50.0


@dataclass(frozen=True)
class EngineConfig:
    thresholds: Thresholds = field(default_factory=Thresholds)
    weights: Weights = field(default_factory=Weights)
    remaining_time: RemainingTimeRule = field(default_factory=RemainingTimeRule)
    config_version: str = "v1"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = EngineConfig()


def load_config(path: Path) -> EngineConfig:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return config_from_dict(raw)


def config_from_dict(raw: Dict[str, Any]) -> EngineConfig:
    _validate_config(raw)
    t = raw["thresholds"]
    w = raw["weights"]
    r = raw.get("remaining_time", {}) or {}
    defaults = RemainingTimeRule()
    return EngineConfig(
        thresholds=Thresholds(finish=float(t["finish"]), pause=float(t["pause"])),
        weights=Weights(
            base_enjoyment=float(w["base_enjoyment"]),
            backlog_penalty_max=float(w["backlog_penalty_max"]),
            time_investment_bonus=float(w["time_investment_bonus"]),
            completionist_bonus=float(w["completionist_bonus"]),
            remaining_time_penalty=float(w["remaining_time_penalty"]),
        ),
        remaining_time=RemainingTimeRule(
            hours_trigger=float(r.get("hours_trigger", defaults.hours_trigger)),
            enjoyment_cutoff=int(r.get("enjoyment_cutoff", defaults.enjoyment_cutoff)),
            hours_cap=float(r.get("hours_cap", defaults.hours_cap)),
        ),
        config_version=str(raw.get("config_version", "v1")),
    )


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _validate_config(raw: Dict[str, Any]) -> None:
    if not isinstance(raw, dict):
        raise ValueError("Config must be a JSON object")
    for k in ["thresholds", "weights"]:
        if k not in raw:
            raise ValueError(f"Missing config key: {k}")
        if not isinstance(raw[k], dict):
            raise ValueError(f"Config key {k} must be an object")

    for k in ["finish", "pause"]:
        if k not in raw["thresholds"]:
            raise ValueError(f"Missing threshold: {k}")
        if not _is_number(raw["thresholds"][k]):
            raise ValueError(f"Threshold {k} must be a number")

    for k in Weights.__dataclass_fields__:
        if k not in raw["weights"]:
            raise ValueError(f"Missing weight: {k}")
        if not _is_number(raw["weights"][k]) or raw["weights"][k] < 0:
            raise ValueError(f"Weight {k} must be a non-negative number")

    finish = float(raw["thresholds"]["finish"])
    pause = float(raw["thresholds"]["pause"])
    if not (0 <= pause < finish <= 100):
        raise ValueError("Invalid thresholds: require 0 <= pause < finish <= 100")

    rule = raw.get("remaining_time", {}) or {}
    if not isinstance(rule, dict):
        raise ValueError("Config key remaining_time must be an object")
    for k, v in rule.items():
        if k not in RemainingTimeRule.__dataclass_fields__:
            raise ValueError(f"Unknown remaining_time key: {k}")
        if not _is_number(v):
            raise ValueError(f"remaining_time {k} must be a number")
    if float(rule.get("hours_cap", RemainingTimeRule.hours_cap)) <= 0:
        raise ValueError("remaining_time hours_cap must be positive")
