"""
Storage capabilities handed to the battle service and the views.

The engine never sees these; callers fetch snapshots through a repository,
run the engine, and write the result back through another one.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from django.db import transaction

from .models import Battle, Monster
from .rules import parse_identifier

logger = logging.getLogger(__name__)

MONSTER_FIELDS = ("name", "image_url", "attack", "defense", "hp", "speed")


class MonsterRepository:

    def list(self) -> List[Monster]:
        return list(Monster.objects.all())

    def get_by_id(self, monster_id) -> Optional[Monster]:
        parsed = parse_identifier(monster_id)
        if parsed is None:
            return None
        return Monster.objects.filter(pk=parsed).first()

    def insert(self, data: dict) -> Monster:
        monster = Monster.objects.create(**{k: data[k] for k in MONSTER_FIELDS})
        logger.info("monster created id=%s name=%r", monster.id, monster.name)
        return monster

    def bulk_insert(self, rows: Iterable[dict]) -> List[Monster]:
        # all or nothing
        with transaction.atomic():
            created = [
                Monster.objects.create(**{k: row[k] for k in MONSTER_FIELDS})
                for row in rows
            ]
        logger.info("imported %d monsters", len(created))
        return created

    def update(self, monster_id, data: dict) -> Optional[Monster]:
        monster = self.get_by_id(monster_id)
        if monster is None:
            return None
        for key in MONSTER_FIELDS:
            if key in data:
                setattr(monster, key, data[key])
        monster.save()
        logger.info("monster updated id=%s", monster.id)
        return monster

    def delete(self, monster_id) -> bool:
        monster = self.get_by_id(monster_id)
        if monster is None:
            return False
        monster.delete()
        logger.info("monster deleted id=%s", monster_id)
        return True


class BattleRepository:

    def list(self) -> List[Battle]:
        return list(Battle.objects.all())

    def get_by_id(self, battle_id) -> Optional[Battle]:
        parsed = parse_identifier(battle_id)
        if parsed is None:
            return None
        return Battle.objects.filter(pk=parsed).first()

    def insert(self, monster_a, monster_b, winner) -> Battle:
        return Battle.objects.create(
            monster_a=monster_a,
            monster_b=monster_b,
            winner_id=winner,
        )

    def delete(self, battle_id) -> bool:
        battle = self.get_by_id(battle_id)
        if battle is None:
            return False
        battle.delete()
        logger.info("battle deleted id=%s", battle_id)
        return True
