from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter

from bank import build_adventure_levels, build_chemistry_levels
from equations import EquationEngine
from schemas.levels import AdventureLevel, ChemistryLevel

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("/adventure", response_model=List[AdventureLevel])
def adventure_levels(seed: Optional[int] = None):
    # same seed -> same map, so a client can rebuild it after a reload
    return build_adventure_levels(EquationEngine(seed=seed))


@router.get("/chemistry", response_model=List[ChemistryLevel])
def chemistry_levels():
    return build_chemistry_levels()
