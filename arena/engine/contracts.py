from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CreatureSnapshot:
    id: str
    name: str
    attack: int
    defense: int
    hp: int
    speed: int


@dataclass(frozen=True)
class AttackEvent:
    exchange: int
    attacker: str
    defender: str
    damage: int
    defender_hp: int  # after the hit, can go negative


@dataclass(frozen=True)
class BattleOutcome:
    winner: str
    first: str
    second: str
    exchanges: int = 0
    attacks: Tuple[AttackEvent, ...] = field(default_factory=tuple)


def snapshot_from_monster(monster) -> CreatureSnapshot:
    """
    Copy the combat stats of a stored monster.
    The snapshot is detached: later edits to the record don't reach it.
    """
    return CreatureSnapshot(
        id=str(monster.id),
        name=monster.name,
        attack=int(monster.attack),
        defense=int(monster.defense),
        hp=int(monster.hp),
        speed=int(monster.speed),
    )
