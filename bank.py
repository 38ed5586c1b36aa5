# bank.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

import catalog
from equations import EquationEngine
from schemas.chemistry import Chemical, Reaction
from schemas.levels import AdventureLevel, ChemistryLevel

logger = logging.getLogger("adventure-lab")

_BASE = Path(__file__).resolve().parent
_DATA_DIR = Path(os.getenv("CATALOG_DIR") or _BASE / "data" / "chemistry")

_MODELS = {"chemical": Chemical, "reaction": Reaction}


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("catalog: skipping malformed line %s:%d", p.name, idx)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("catalog: %s is not valid JSON, ignoring", p.name)
            data = []
    if isinstance(data, list):
        for obj in data:
            yield obj


def _parse(raw: Any) -> Optional[Chemical | Reaction]:
    if not isinstance(raw, dict):
        return None
    model = _MODELS.get(raw.get("kind"))
    if model is None:
        return None
    try:
        return model(**raw)
    except ValidationError:
        return None


class CatalogBank:
    _chemicals: Dict[str, Chemical] = {}
    _reactions: Dict[str, Reaction] = {}

    @classmethod
    def load(cls) -> None:
        if not cls._chemicals and not cls._reactions:
            cls.reload()

    @classmethod
    def chemicals(cls) -> Dict[str, Chemical]:
        cls.load()
        return cls._chemicals

    @classmethod
    def reactions(cls) -> Dict[str, Reaction]:
        cls.load()
        return cls._reactions

    @classmethod
    def reload(cls, data_dir: Optional[Path] = None) -> int:
        data_dir = data_dir or _DATA_DIR
        chemicals: Dict[str, Chemical] = {}
        reactions: Dict[str, Reaction] = {}

        # Prefer sharded directory if present
        if data_dir.exists():
            for p in sorted(data_dir.rglob("*")):
                if not p.is_file():
                    continue
                suf = p.suffix.lower()
                if suf == ".jsonl":
                    source = _iter_jsonl(p)
                elif suf == ".json":
                    source = _iter_json(p)
                else:
                    continue

                for raw in source:
                    item = _parse(raw)
                    if item is None:
                        logger.warning("catalog: skipping invalid record in %s", p.name)
                    elif isinstance(item, Chemical):
                        chemicals[item.id] = item
                    else:
                        reactions[item.id] = item

        # Fall back to the built-in catalog if nothing valid loaded
        if not chemicals and not reactions:
            for raw in catalog.CHEMICALS + catalog.REACTIONS:
                item = _parse(raw)
                if isinstance(item, Chemical):
                    chemicals[item.id] = item
                elif isinstance(item, Reaction):
                    reactions[item.id] = item

        cls._chemicals = chemicals
        cls._reactions = reactions
        n = len(chemicals) + len(reactions)
        logger.info("catalog: %d chemicals, %d reactions", len(chemicals), len(reactions))
        return n


# Public API
def get_chemicals() -> List[Chemical]:
    return list(CatalogBank.chemicals().values())


def get_chemical(chemical_id: str) -> Optional[Chemical]:
    return CatalogBank.chemicals().get(chemical_id)


def get_reactions() -> List[Reaction]:
    return list(CatalogBank.reactions().values())


def get_reaction(reaction_id: str) -> Optional[Reaction]:
    return CatalogBank.reactions().get(reaction_id)


def reload_bank() -> int:
    return CatalogBank.reload()


def build_chemistry_levels() -> List[ChemistryLevel]:
    levels: List[ChemistryLevel] = []
    for tpl in catalog.CHEMISTRY_LEVELS:
        reaction = get_reaction(tpl["reaction_id"])
        chems = [get_chemical(cid) for cid in tpl["chemical_ids"]]
        if reaction is None or any(c is None for c in chems):
            logger.warning("chemistry level %s references unknown catalog ids", tpl["id"])
            continue
        levels.append(
            ChemistryLevel(
                id=tpl["id"],
                title=tpl["title"],
                description=tpl["description"],
                target_reaction=reaction,
                available_chemicals=chems,
                max_attempts=tpl["max_attempts"],
                score_multiplier=tpl["score_multiplier"],
                is_unlocked=not levels,  # first playable level starts open
            )
        )
    return levels


def build_adventure_levels(engine: EquationEngine) -> List[AdventureLevel]:
    return [
        AdventureLevel(
            id=tpl["id"],
            name=tpl["name"],
            description=tpl["description"],
            equations=[engine.generate(d) for d in tpl["difficulties"]],
            is_unlocked=i == 0,
            reward=tpl["reward"],
            story_text=tpl["story_text"],
        )
        for i, tpl in enumerate(catalog.ADVENTURE_LEVELS)
    ]
