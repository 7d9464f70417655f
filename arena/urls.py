from django.urls import re_path
from . import views

# trailing slash optional everywhere
urlpatterns = [
    re_path(r"^health/?$", views.health_view, name="health"),

    re_path(r"^api/monsters/?$", views.monster_collection, name="monster-list"),
    re_path(r"^api/monsters/import_csv/?$", views.monster_import_csv, name="monster-import-csv"),
    re_path(r"^api/monsters/(?P<monster_id>[^/]+)/?$", views.monster_detail, name="monster-detail"),

    re_path(r"^api/battles/?$", views.battle_collection, name="battle-list"),
    re_path(r"^api/battles/(?P<battle_id>[^/]+)/?$", views.battle_detail, name="battle-detail"),
]
