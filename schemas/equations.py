# schemas/equations.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------- Domain ----------


class Equation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    expression: str
    answer: int | float
    difficulty: int = Field(ge=1, le=5)
    hint: Optional[str] = None


# ---------- Generate ----------


class GenerateRequest(BaseModel):
    # Out-of-range tiers are accepted and fall back to tier 1.
    difficulty: int = 1
    seed: Optional[int] = None


# ---------- Check single ----------


class CheckRequest(BaseModel):
    equation: Equation
    answer: str


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    score: int
    feedback: str
    expected: Optional[str] = None


# ---------- Check batch ----------


class CheckBatchItem(BaseModel):
    id: str
    response: CheckResponse


class CheckBatchRequest(BaseModel):
    items: List[CheckRequest]
    duration_ms: Optional[int] = None
    session_id: Optional[str] = Field(default=None, max_length=64)


class CheckBatchResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    results: List[CheckBatchItem]
    attempt_id: Optional[int] = None
    duration_ms: Optional[int] = None


# ---------- Solution ----------


class SolutionRequest(BaseModel):
    equation: Equation


class SolutionResponse(BaseModel):
    steps: List[str]
