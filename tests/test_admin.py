import pytest

from arena.models import Battle

pytestmark = pytest.mark.django_db


def test_monster_changelist(admin_client, make_monster):
    make_monster(name="golem")

    resp = admin_client.get("/admin/arena/monster/")

    assert resp.status_code == 200
    assert b"golem" in resp.content


def test_battle_changelist_and_detail(admin_client, make_monster):
    a = make_monster(name="a")
    b = make_monster(name="b")
    battle = Battle.objects.create(monster_a=a.id, monster_b=b.id, winner=b)

    assert admin_client.get("/admin/arena/battle/").status_code == 200
    assert admin_client.get(f"/admin/arena/battle/{battle.id}/change/").status_code == 200
