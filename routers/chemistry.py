from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query

from bank import get_chemical, get_chemicals, get_reaction, get_reactions
from mixing import calculate_optimal_volumes, evaluate_mixture, optimal_volume_hint
from routers.attempts import record_attempt
from schemas.chemistry import (
    Chemical,
    MixRequest,
    MixResponse,
    OptimalVolumesResponse,
    Reaction,
)

router = APIRouter(prefix="/chemistry", tags=["chemistry"])


def _reaction_or_404(reaction_id: str) -> Reaction:
    reaction = get_reaction(reaction_id)
    if reaction is None:
        raise HTTPException(status_code=404, detail="reaction not found")
    return reaction


def _chemical_or_404(chemical_id: str) -> Chemical:
    chem = get_chemical(chemical_id)
    if chem is None:
        raise HTTPException(status_code=404, detail=f"chemical not found: {chemical_id}")
    return chem


@router.get("/chemicals", response_model=List[Chemical])
def list_chemicals():
    return get_chemicals()


@router.get("/reactions", response_model=List[Reaction])
def list_reactions():
    return get_reactions()


@router.get("/reactions/{reaction_id}", response_model=Reaction)
def get_reaction_detail(reaction_id: str):
    return _reaction_or_404(reaction_id)


@router.get("/reactions/{reaction_id}/optimal-volumes", response_model=OptimalVolumesResponse)
def optimal_volumes(
    reaction_id: str,
    total_volume: float = Query(default=100, gt=0, le=1000),
):
    reaction = _reaction_or_404(reaction_id)
    v = calculate_optimal_volumes(reaction, total_volume)
    return {
        "volume_a": v.volume_a,
        "volume_b": v.volume_b,
        "hint": optimal_volume_hint(reaction, total_volume),
    }


@router.post("/mix", response_model=MixResponse)
def mix(req: MixRequest):
    reaction = _reaction_or_404(req.reaction_id)
    chem_a = _chemical_or_404(req.chemical_a)
    chem_b = _chemical_or_404(req.chemical_b)

    result = evaluate_mixture(chem_a, req.volume_a, chem_b, req.volume_b, reaction)

    attempt_id = record_attempt(
        game="chemistry",
        total=1,
        correct=int(result.success),
        score=result.score_earned,
        items=[
            {
                "reaction_id": reaction.id,
                "chemical_a": chem_a.id,
                "volume_a": req.volume_a,
                "chemical_b": chem_b.id,
                "volume_b": req.volume_b,
                "result": result.model_dump(mode="json"),
            }
        ],
        session_id=req.session_id,
    )
    return {**result.model_dump(), "attempt_id": attempt_id}
