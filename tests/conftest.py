import pytest
from rest_framework.test import APIClient

from arena.engine import CreatureSnapshot
from arena.models import Monster


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_monster(db):
    """Creates a stored monster; any stat can be overridden."""
    def _make(**overrides):
        data = {
            "name": "insect rabbit",
            "image_url": "https://loremflickr.com/640/480",
            "attack": 10,
            "defense": 5,
            "hp": 30,
            "speed": 10,
        }
        data.update(overrides)
        return Monster.objects.create(**data)
    return _make


@pytest.fixture
def snapshot():
    """Builds an engine snapshot without touching the database."""
    def _snap(id, attack=10, defense=0, hp=10, speed=10, name=None):
        return CreatureSnapshot(
            id=id,
            name=name or id,
            attack=attack,
            defense=defense,
            hp=hp,
            speed=speed,
        )
    return _snap
