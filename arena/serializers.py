from rest_framework import serializers
from .models import Battle, Monster


class MonsterSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Monster
        fields = ("id", "name", "image_url", "attack", "defense", "hp", "speed", "createdAt", "updatedAt")


class BattleSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Battle
        fields = ("id", "monster_a", "monster_b", "winner", "createdAt", "updatedAt")
        read_only_fields = ("id", "monster_a", "monster_b", "winner")


class BattleRequestSerializer(serializers.Serializer):
    # plain strings: a malformed id is a "not found", not a field error
    monster_a = serializers.CharField(allow_blank=True, trim_whitespace=False)
    monster_b = serializers.CharField(allow_blank=True, trim_whitespace=False)
