# routers/health.py
from pathlib import Path

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from alembic.config import Config
from alembic.script import ScriptDirectory
from bank import build_chemistry_levels, get_chemicals, get_reactions
from db import engine

router = APIRouter(prefix="/health", tags=["health"])

_ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")


@router.get("/catalog")
def health_catalog():
    chemicals = get_chemicals()
    reactions = get_reactions()
    levels = build_chemistry_levels()
    return {
        "ok": bool(reactions) and bool(levels),
        "chemicals": len(chemicals),
        "reactions": len(reactions),
        "chemistry_levels": len(levels),
    }


def _alembic_heads() -> list[str]:
    cfg = Config(str(_ALEMBIC_INI))
    cfg.set_main_option("script_location", str(_ALEMBIC_INI.parent / "alembic"))
    script = ScriptDirectory.from_config(cfg)
    return list(script.get_heads())


@router.get("/migrations")
def health_migrations():
    heads: list[str] = []
    db_ver = None
    try:
        heads = _alembic_heads()
    except Exception:
        heads = []

    try:
        with engine.connect() as conn:
            try:
                db_ver = conn.execute(
                    text("SELECT version_num FROM alembic_version")
                ).scalar_one_or_none()
            except Exception:
                db_ver = None
    except Exception as e:
        return {
            "ok": False,
            "error": f"db_connect_failed: {e}",
            "code_heads": heads,
            "db_version": db_ver,
        }

    synced = (db_ver in heads) if heads else False
    return {"ok": synced, "synced": synced, "db_version": db_ver, "code_heads": heads}
