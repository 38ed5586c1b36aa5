# schemas/chemistry.py
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class Reactant(BaseModel):
    model_config = ConfigDict(frozen=True)

    formula: str
    ratio: PositiveFloat


class Reaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    reactants: List[Reactant]
    products: List[Reactant]
    # expected volume ratio for the two reactants
    correct_ratio: Tuple[PositiveFloat, PositiveFloat]
    result_color: str = Field(pattern=HEX_COLOR)


class Chemical(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    formula: str
    color: str = Field(pattern=HEX_COLOR)
    concentration: float = Field(default=1.0, ge=0)
    volume: float = Field(default=100.0, ge=0)  # mL
    description: str = ""


class MixingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    result_chemical: Optional[Chemical] = None
    feedback: str
    score_earned: int = Field(ge=0, le=100)
    is_optimal_ratio: bool


class OptimalVolumes(BaseModel):
    volume_a: float
    volume_b: float


# ---------- HTTP ----------


class OptimalVolumesResponse(OptimalVolumes):
    hint: str


class MixRequest(BaseModel):
    chemical_a: str  # chemical id
    volume_a: float = Field(gt=0, le=1000)
    chemical_b: str
    volume_b: float = Field(gt=0, le=1000)
    reaction_id: str
    session_id: Optional[str] = Field(default=None, max_length=64)


class MixResponse(MixingResult):
    attempt_id: Optional[int] = None
