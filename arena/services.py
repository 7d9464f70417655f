from __future__ import annotations

import logging
from typing import Optional

from django.db import DatabaseError

from .engine import resolve_battle, snapshot_from_monster
from .models import Battle
from .repositories import BattleRepository, MonsterRepository
from .rules import RuleError, validate_battle_request

logger = logging.getLogger(__name__)


def create_battle(
    monster_a,
    monster_b,
    monsters: Optional[MonsterRepository] = None,
    battles: Optional[BattleRepository] = None,
) -> Battle:
    """
    Validate ids -> fetch both monsters -> run the engine -> store the result.

    Raises RuleError for anything the caller should turn into a response:
    NOT_FOUND (404) for malformed or unknown ids, STORAGE (500) when the
    insert fails.
    """
    if monsters is None:
        monsters = MonsterRepository()
    if battles is None:
        battles = BattleRepository()

    a_id, b_id = validate_battle_request(monster_a, monster_b)

    a = monsters.get_by_id(a_id)
    if a is None:
        raise RuleError(code="NOT_FOUND", message="Monster a not found", status=404, details={"id": str(a_id)})
    b = monsters.get_by_id(b_id)
    if b is None:
        raise RuleError(code="NOT_FOUND", message="Monster b not found", status=404, details={"id": str(b_id)})

    winner = resolve_battle(snapshot_from_monster(a), snapshot_from_monster(b))

    try:
        battle = battles.insert(a_id, b_id, winner)
    except DatabaseError as exc:
        logger.exception("could not store battle %s vs %s", a_id, b_id)
        raise RuleError(code="STORAGE", message=str(exc), status=500) from exc

    logger.info("battle %s: %s vs %s, winner=%s", battle.id, a_id, b_id, winner)
    return battle
