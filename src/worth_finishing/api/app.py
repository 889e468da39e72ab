from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException

from worth_finishing.core.decision_engine import DecisionEngine
from worth_finishing.core.errors import InvalidInput

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Worth Finishing")

engine = DecisionEngine()


@app.get("/")
def home() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/evaluate")
def evaluate_game(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    try:
        result = engine.evaluate(payload)
    except InvalidInput as e:
        logger.warning("Rejected evaluation request: %s", e)
        raise HTTPException(status_code=422, detail=e.errors) from e

    logger.info("Evaluated game: score=%s recommendation=%s", result.score, result.recommendation.value)
    return result.to_dict()
