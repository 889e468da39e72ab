from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from worth_finishing.core.config import DEFAULT_CONFIG, EngineConfig, load_config
from worth_finishing.core.decision_engine import DecisionEngine
from worth_finishing.core.errors import InvalidInput
from worth_finishing.core.fingerprints import build_fingerprints
from worth_finishing.engine.validation import validate_inputs

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m worth_finishing.cli.main <input.json|-> [config.json]\n"


def _load_input(path: str, stdin: TextIO) -> Dict[str, Any]:
    if path == "-":
        return json.load(stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 1:
        sys.stderr.write(USAGE)
        return 2

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config: EngineConfig = DEFAULT_CONFIG
    if len(args) > 1:
        config = load_config(Path(args[1]))

    raw = _load_input(args[0], stdin)
    engine = DecisionEngine(config=config)

    try:
        inputs = validate_inputs(raw)
        result = engine.evaluate(inputs)
    except InvalidInput as e:
        logger.warning("Rejected input from %s: %s", args[0], e)
        sys.stderr.write(json.dumps({"error": "invalid_input", "details": e.errors}, ensure_ascii=False))
        sys.stderr.write("\n")
        return 1

    output = result.to_dict()
    output["audit"] = {
        "fingerprint": build_fingerprints(
            inputs=inputs,
            config=config,
            model_ref="worth-finishing",
        ),
    }

    sys.stdout.write(json.dumps(output, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
