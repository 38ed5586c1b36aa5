# schemas/levels.py
from typing import List

from pydantic import BaseModel, Field

from schemas.chemistry import Chemical, Reaction
from schemas.equations import Equation


class AdventureLevel(BaseModel):
    id: str
    name: str
    description: str
    equations: List[Equation]
    is_unlocked: bool = False
    is_completed: bool = False
    reward: str
    story_text: str


class ChemistryLevel(BaseModel):
    id: str
    title: str
    description: str
    target_reaction: Reaction
    available_chemicals: List[Chemical]
    max_attempts: int = Field(default=3, ge=1)
    score_multiplier: float = Field(default=1.0, gt=0)
    is_unlocked: bool = False
    is_completed: bool = False
