import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .rules import ATTACK_MAX, ATTACK_MIN


class Monster(models.Model):
    """
    A creature that can be sent into battle.
    Only attack is range-checked; the other stats are free integers.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    image_url = models.CharField(max_length=2048)

    attack = models.IntegerField(validators=[MinValueValidator(ATTACK_MIN), MaxValueValidator(ATTACK_MAX)])
    defense = models.IntegerField()
    hp = models.IntegerField()
    speed = models.IntegerField()

    created_at = models.DateTimeField(auto_now_add=True, null=True)
    updated_at = models.DateTimeField(auto_now=True, null=True)

    class Meta:
        db_table = "monsters"
        ordering = ["created_at"]

    def __str__(self):
        return self.name


class Battle(models.Model):
    """
    Stored outcome of one fight. Written once, never updated by the game.
    Deleting the winning monster deletes the battle with it.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    monster_a = models.UUIDField()
    monster_b = models.UUIDField()
    winner = models.ForeignKey(Monster, on_delete=models.CASCADE, related_name="wins")

    created_at = models.DateTimeField(auto_now_add=True, null=True)
    updated_at = models.DateTimeField(auto_now=True, null=True)

    class Meta:
        db_table = "battles"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.monster_a} vs {self.monster_b}"
