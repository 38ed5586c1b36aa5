from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class AttemptOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    game: str
    total: int
    correct: int
    score: int = 0
    duration_ms: int | None = None
    session_id: str | None = None
    # keep items optional; usually excluded in list views
    items: list[Any] | dict | None = None
