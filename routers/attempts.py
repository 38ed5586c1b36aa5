# routers/attempts.py

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from db import SessionLocal
from deps.auth import require_client
from models import Attempt
from schemas.attempts import AttemptOut

logger = logging.getLogger("adventure-lab")

router = APIRouter(prefix="/attempts", tags=["attempts"])


def record_attempt(
    *,
    game: str,
    total: int,
    correct: int,
    score: int,
    items: List[Any],
    duration_ms: Optional[int] = None,
    session_id: Optional[str] = None,
) -> Optional[int]:
    """Persist one attempt; returns its id, or None when the database is unavailable."""
    try:
        with SessionLocal() as db:
            attempt = Attempt(
                game=game,
                total=total,
                correct=correct,
                score=score,
                items=items,
                duration_ms=duration_ms,
                session_id=session_id,
            )
            db.add(attempt)
            db.commit()
            db.refresh(attempt)
            return attempt.id
    except Exception as e:
        logger.warning("could not record %s attempt: %s: %s", game, type(e).__name__, e)
        return None


@router.get("/recent-list", dependencies=[Depends(require_client)])
def attempts_recent(limit: int = 20, game: Optional[str] = None):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        q = db.query(Attempt)
        if game:
            q = q.filter(Attempt.game == game)
        items = q.order_by(Attempt.created_at.desc()).limit(limit).all()

    # Reuse schema; exclude potentially large JSON "items"
    rows = [AttemptOut.model_validate(a).model_dump(exclude={"items"}) for a in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{attempt_id}", response_model=AttemptOut)
def get_attempt(attempt_id: int):
    # Public endpoint: no client key required
    with SessionLocal() as db:
        a = db.get(Attempt, attempt_id)
        if not a:
            raise HTTPException(status_code=404, detail="Attempt not found")
        return AttemptOut.model_validate(a)
