from __future__ import annotations

from fastapi import APIRouter, Depends

from bank import reload_bank
from deps.auth import require_admin

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reload", dependencies=[Depends(require_admin)])
def reload_catalog():
    n = reload_bank()
    return {"ok": True, "count": n}
