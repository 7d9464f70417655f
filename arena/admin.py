from django.contrib import admin

from .models import Battle, Monster


# -----------------------------
# Monster Admin
# -----------------------------

@admin.register(Monster)
class MonsterAdmin(admin.ModelAdmin):
    list_display = ("name", "attack", "defense", "hp", "speed", "created_at")
    search_fields = ("name", "id")
    readonly_fields = ("id", "created_at", "updated_at")
    ordering = ("name",)


# -----------------------------
# Battle Admin
# -----------------------------

@admin.register(Battle)
class BattleAdmin(admin.ModelAdmin):
    # battles come from the engine, not from hand edits
    list_display = ("id", "monster_a", "monster_b", "winner", "created_at")
    search_fields = ("id", "monster_a", "monster_b", "winner__name")
    list_filter = ("created_at",)
    readonly_fields = ("id", "monster_a", "monster_b", "winner", "created_at", "updated_at")
