from __future__ import annotations

from typing import List, Tuple

from .contracts import AttackEvent, BattleOutcome, CreatureSnapshot

# =========================
# CONFIG
# =========================

MIN_DAMAGE = 1


# =========================
# TURN ORDER
# =========================

def turn_order(a: CreatureSnapshot, b: CreatureSnapshot) -> Tuple[CreatureSnapshot, CreatureSnapshot]:
    """
    Faster creature acts first, then the one with more attack.
    Full tie: the lower id goes first, so swapping the arguments
    never changes the result.
    """
    if a.speed != b.speed:
        return (a, b) if a.speed > b.speed else (b, a)
    if a.attack != b.attack:
        return (a, b) if a.attack > b.attack else (b, a)
    return (a, b) if a.id <= b.id else (b, a)


def damage(attacker: CreatureSnapshot, defender: CreatureSnapshot) -> int:
    # Flat reduction with floor
    return max(attacker.attack - defender.defense, MIN_DAMAGE)


def _hits_to_down(hp: int, per_hit: int) -> int:
    return -(-hp // per_hit)


# =========================
# PUBLIC API
# =========================

def simulate_battle(a: CreatureSnapshot, b: CreatureSnapshot, trace: bool = False) -> BattleOutcome:
    """
    Settles the fight between two snapshots and reports the survivor.

    A creature that starts at hp <= 0 loses before anyone swings
    (if both do, the first actor takes it).
    Without a trace the result is computed from hit counts, so huge hp
    values cost nothing. With trace=True every attack is replayed and
    returned as an AttackEvent.
    """
    first, second = turn_order(a, b)

    if second.hp <= 0:
        return BattleOutcome(winner=first.id, first=first.id, second=second.id)
    if first.hp <= 0:
        return BattleOutcome(winner=second.id, first=first.id, second=second.id)

    first_dmg = damage(first, second)
    second_dmg = damage(second, first)

    if not trace:
        # hits each side needs to land
        first_needs = _hits_to_down(second.hp, first_dmg)
        second_needs = _hits_to_down(first.hp, second_dmg)
        if first_needs <= second_needs:
            return BattleOutcome(winner=first.id, first=first.id, second=second.id, exchanges=first_needs)
        return BattleOutcome(winner=second.id, first=first.id, second=second.id, exchanges=second_needs)

    first_hp = first.hp
    second_hp = second.hp
    log: List[AttackEvent] = []
    exchange = 0

    while True:
        exchange += 1

        second_hp -= first_dmg
        log.append(AttackEvent(exchange, first.id, second.id, first_dmg, second_hp))
        if second_hp <= 0:
            winner = first.id
            break

        first_hp -= second_dmg
        log.append(AttackEvent(exchange, second.id, first.id, second_dmg, first_hp))
        if first_hp <= 0:
            winner = second.id
            break

    return BattleOutcome(
        winner=winner,
        first=first.id,
        second=second.id,
        exchanges=exchange,
        attacks=tuple(log),
    )


def resolve_battle(a: CreatureSnapshot, b: CreatureSnapshot) -> str:
    return simulate_battle(a, b).winner
