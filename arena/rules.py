# arena/rules.py

import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class RuleError(Exception):
    code: str
    message: str
    status: int = 400
    details: Optional[Dict[str, Any]] = None


# ============================================================
# EASY TO CHANGE STUFF (keep it here)
# ============================================================

ATTACK_MIN = 0
ATTACK_MAX = 100

CSV_COLUMNS = ("name", "attack", "defense", "hp", "speed", "image_url")


# ============================================================
# HELPERS
# ============================================================

def parse_identifier(raw: Any) -> Optional[uuid.UUID]:
    """
    Returns the UUID for a well-formed identifier, None otherwise.
    Accepts UUID instances and their usual string forms.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None


# ============================================================
# VALIDATION
# ============================================================

def require_identifier(raw: Any, label: str) -> uuid.UUID:
    """
    Malformed ids can never match a record, so they are reported as
    NOT_FOUND without touching the store.
    """
    parsed = parse_identifier(raw)
    if parsed is None:
        raise RuleError(
            code="NOT_FOUND",
            message=f"{label} not found",
            status=404,
            details={"id": raw},
        )
    return parsed


def validate_battle_request(monster_a: Any, monster_b: Any) -> tuple:
    """
    Format check for both participants of a battle request.
    Existence is checked later by the service, against the store.
    """
    a = require_identifier(monster_a, "Monster a")
    b = require_identifier(monster_b, "Monster b")
    return a, b
