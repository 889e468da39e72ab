from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from worth_finishing.core.config import EngineConfig
from worth_finishing.core.decision_types import GameInputs


def hash_object(obj: Dict[str, Any]) -> str:
    serialized = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def build_fingerprints(
    inputs: GameInputs,
    config: EngineConfig,
    model_ref: str = "",
) -> Dict[str, str]:
    """Hashes that let a caller prove two results came from the same inputs and policy."""
    return {
        "input_hash": hash_object(inputs.to_dict()),
        "config_hash": hash_object(config.to_dict()),
        "model_hash": model_ref or "",
    }
