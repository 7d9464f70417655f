import uuid

import pytest

from arena.models import Battle, Monster
from arena.rules import ATTACK_MAX, ATTACK_MIN

pytestmark = pytest.mark.django_db


def _payload(**overrides):
    data = {
        "name": "insect rabbit",
        "image_url": "https://loremflickr.com/640/480",
        "attack": 82,
        "defense": 45,
        "hp": 66,
        "speed": 42,
    }
    data.update(overrides)
    return data


def test_list_monsters(api_client, make_monster):
    assert api_client.get("/api/monsters").json() == []

    make_monster(name="one")
    make_monster(name="two")

    resp = api_client.get("/api/monsters/")
    assert resp.status_code == 200
    assert sorted(m["name"] for m in resp.json()) == ["one", "two"]


def test_create_monster(api_client):
    client_id = str(uuid.uuid4())
    resp = api_client.post("/api/monsters", _payload(id=client_id))

    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] != client_id
    assert body["name"] == "insect rabbit"
    assert body["createdAt"] is not None
    assert "updatedAt" in body
    assert Monster.objects.filter(pk=body["id"]).exists()


@pytest.mark.parametrize(
    "overrides",
    [
        {"attack": 101},
        {"attack": -1},
        {"name": ""},
        {"hp": "lots"},
    ],
)
def test_create_monster_rejects_invalid_data(api_client, overrides):
    resp = api_client.post("/api/monsters", _payload(**overrides))

    assert resp.status_code == 400
    assert Monster.objects.count() == 0


def test_create_monster_requires_every_stat(api_client):
    data = _payload()
    del data["speed"]

    resp = api_client.post("/api/monsters", data)

    assert resp.status_code == 400
    assert "speed" in resp.json()


def test_negative_defense_is_allowed(api_client):
    resp = api_client.post("/api/monsters", _payload(defense=-5, hp=0))
    assert resp.status_code == 201


def test_get_monster(api_client, make_monster):
    monster = make_monster(name="golem")

    resp = api_client.get(f"/api/monsters/{monster.id}")

    assert resp.status_code == 200
    assert resp.json()["id"] == str(monster.id)
    assert resp.json()["name"] == "golem"


@pytest.mark.parametrize("monster_id", ["999999", str(uuid.uuid4())])
def test_get_unknown_monster_is_404(api_client, monster_id):
    resp = api_client.get(f"/api/monsters/{monster_id}")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Monster not found"


def test_update_monster(api_client, make_monster):
    monster = make_monster()

    resp = api_client.put(f"/api/monsters/{monster.id}", _payload(name="Update name of monster"))

    assert resp.status_code == 200
    assert resp.json()["name"] == "Update name of monster"
    monster.refresh_from_db()
    assert monster.name == "Update name of monster"
    assert monster.attack == 82


def test_update_unknown_monster_is_404(api_client, make_monster):
    make_monster()

    resp = api_client.put("/api/monsters/99999", _payload())

    assert resp.status_code == 404


def test_update_monster_validates_attack(api_client, make_monster):
    monster = make_monster(attack=10)

    resp = api_client.put(f"/api/monsters/{monster.id}", _payload(attack=500))

    assert resp.status_code == 400
    monster.refresh_from_db()
    assert monster.attack == 10


def test_delete_monster(api_client, make_monster):
    monster = make_monster()

    resp = api_client.delete(f"/api/monsters/{monster.id}")

    assert resp.status_code == 204
    assert api_client.get(f"/api/monsters/{monster.id}").status_code == 404


def test_delete_unknown_monster_is_404(api_client, make_monster):
    make_monster()
    assert api_client.delete("/api/monsters/99999").status_code == 404


def test_deleting_a_monster_removes_battles_it_won(api_client, make_monster):
    winner = make_monster(name="winner")
    loser = make_monster(name="loser")
    Battle.objects.create(monster_a=winner.id, monster_b=loser.id, winner=winner)
    Battle.objects.create(monster_a=winner.id, monster_b=loser.id, winner=loser)

    api_client.delete(f"/api/monsters/{winner.id}")

    assert list(Battle.objects.values_list("winner_id", flat=True)) == [loser.id]


def test_attack_bounds_are_inclusive(api_client):
    assert api_client.post("/api/monsters", _payload(attack=ATTACK_MIN)).status_code == 201
    assert api_client.post("/api/monsters", _payload(attack=ATTACK_MAX)).status_code == 201
    assert api_client.post("/api/monsters", _payload(attack=ATTACK_MAX + 1)).status_code == 400
    assert Monster.objects.count() == 2
