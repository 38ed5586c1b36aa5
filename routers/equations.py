from __future__ import annotations

import math
import time
from typing import Any, Dict, List

from fastapi import APIRouter

from answers import answer_satisfies, parse_answer
from equations import EquationEngine, get_solution, validate_answer
from routers.attempts import record_attempt
from schemas.equations import (
    CheckBatchRequest,
    CheckBatchResponse,
    CheckRequest,
    CheckResponse,
    Equation,
    GenerateRequest,
    SolutionRequest,
    SolutionResponse,
)

router = APIRouter(prefix="/equations", tags=["equations"])

_BROKEN_EQUATION_MSG = "Equation answer does not satisfy its expression."


def _num_to_clean_str(x: float) -> str:
    if math.isfinite(x) and abs(x - round(x)) < 1e-12:
        return str(int(round(x)))
    return str(x)


def _check_one(equation: Equation, answer: str) -> Dict[str, Any]:
    exp_str = _num_to_clean_str(equation.answer)

    # Equations round-trip through the client; make sure the root still holds
    if not answer_satisfies(equation.expression, equation.answer):
        return {
            "ok": False,
            "correct": False,
            "score": 0,
            "feedback": _BROKEN_EQUATION_MSG,
            "expected": None,
        }

    try:
        value = parse_answer(answer)
    except ValueError as e:
        return {
            "ok": False,
            "correct": False,
            "score": 0,
            "feedback": str(e),
            "expected": exp_str,
        }

    correct = validate_answer(equation, value)
    return {
        "ok": True,
        "correct": correct,
        "score": 1 if correct else 0,
        "feedback": "",
        "expected": exp_str,
    }


# --- Endpoints --------------------------------------------------------------------


@router.post("/generate", response_model=Equation)
def generate(req: GenerateRequest):
    return EquationEngine(seed=req.seed).generate(req.difficulty)


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    return _check_one(req.equation, req.answer)


@router.post("/check-batch", response_model=CheckBatchResponse)
def check_batch(req: CheckBatchRequest):
    t0 = time.perf_counter()

    results: List[Dict[str, Any]] = []
    correct_count = 0
    for it in req.items:
        res = _check_one(it.equation, it.answer)
        results.append({"id": it.equation.id, "response": res})
        if res["correct"]:
            correct_count += 1

    total = len(results)
    measured_ms = int(round((time.perf_counter() - t0) * 1000))
    duration_ms = req.duration_ms if req.duration_ms is not None else measured_ms

    attempt_id = record_attempt(
        game="algebra",
        total=total,
        correct=correct_count,
        score=correct_count,
        items=results,
        duration_ms=duration_ms,
        session_id=req.session_id,
    )

    return {
        "ok": True,
        "total": total,
        "correct": correct_count,
        "results": results,
        "attempt_id": attempt_id,
        "duration_ms": duration_ms,
    }


@router.post("/solution", response_model=SolutionResponse)
def solution(req: SolutionRequest):
    return {"steps": get_solution(req.equation)}
