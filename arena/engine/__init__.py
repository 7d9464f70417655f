from .battle import damage, resolve_battle, simulate_battle, turn_order
from .contracts import AttackEvent, BattleOutcome, CreatureSnapshot, snapshot_from_monster

__all__ = [
    "AttackEvent",
    "BattleOutcome",
    "CreatureSnapshot",
    "damage",
    "resolve_battle",
    "simulate_battle",
    "snapshot_from_monster",
    "turn_order",
]
