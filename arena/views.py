import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .importers import parse_monster_csv
from .repositories import BattleRepository, MonsterRepository
from .rules import RuleError
from .serializers import BattleRequestSerializer, BattleSerializer, MonsterSerializer
from .services import create_battle

logger = logging.getLogger(__name__)

monster_repo = MonsterRepository()
battle_repo = BattleRepository()


def _rule_error_response(e: RuleError, with_details: bool = False) -> Response:
    body = {"detail": e.message, "code": e.code}
    if with_details and e.details:
        body["details"] = e.details
    return Response(body, status=e.status)


def _not_found(what: str) -> Response:
    return Response({"detail": f"{what} not found", "code": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)


# -----------------------------
# Service
# -----------------------------

def health_view(request):
    return JsonResponse({"message": "Everything is working fine"})


def not_found_view(request, exception=None):
    return JsonResponse({"message": "Resource not found"}, status=404)


# -----------------------------
# Monsters
# -----------------------------

@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def monster_collection(request):
    if request.method == "GET":
        serializer = MonsterSerializer(monster_repo.list(), many=True)
        return Response(serializer.data)

    serializer = MonsterSerializer(data=request.data)
    if not serializer.is_valid():
        logger.info("monster rejected: %s", serializer.errors)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    monster = monster_repo.insert(serializer.validated_data)
    return Response(MonsterSerializer(monster).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "PUT", "DELETE"])
@permission_classes([AllowAny])
def monster_detail(request, monster_id):
    if request.method == "DELETE":
        if not monster_repo.delete(monster_id):
            return _not_found("Monster")
        return Response(status=status.HTTP_204_NO_CONTENT)

    monster = monster_repo.get_by_id(monster_id)
    if monster is None:
        return _not_found("Monster")

    if request.method == "GET":
        return Response(MonsterSerializer(monster).data)

    serializer = MonsterSerializer(monster, data=request.data)
    if not serializer.is_valid():
        logger.info("monster update rejected id=%s: %s", monster_id, serializer.errors)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    monster = monster_repo.update(monster_id, serializer.validated_data)
    if monster is None:
        # deleted between the read and the write
        return _not_found("Monster")
    return Response(MonsterSerializer(monster).data)


@api_view(["POST"])
@permission_classes([AllowAny])
@parser_classes([MultiPartParser, FormParser, JSONParser])
def monster_import_csv(request):
    upload = next(iter(request.FILES.values()), None)
    if upload is None:
        return Response({"detail": "No file uploaded", "code": "NO_FILE"}, status=status.HTTP_400_BAD_REQUEST)

    try:
        rows = parse_monster_csv(upload)
    except RuleError as e:
        return _rule_error_response(e, with_details=True)

    monsters = monster_repo.bulk_insert(rows)
    return Response(MonsterSerializer(monsters, many=True).data)


# -----------------------------
# Battles
# -----------------------------

@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def battle_collection(request):
    if request.method == "GET":
        serializer = BattleSerializer(battle_repo.list(), many=True)
        return Response(serializer.data)

    payload = BattleRequestSerializer(data=request.data)
    if not payload.is_valid():
        return Response(payload.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        battle = create_battle(
            payload.validated_data["monster_a"],
            payload.validated_data["monster_b"],
            monsters=monster_repo,
            battles=battle_repo,
        )
    except RuleError as e:
        logger.info("battle rejected: %s (%s)", e.message, e.code)
        return _rule_error_response(e)

    return Response(BattleSerializer(battle).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "DELETE"])
@permission_classes([AllowAny])
def battle_detail(request, battle_id):
    if request.method == "DELETE":
        if not battle_repo.delete(battle_id):
            return _not_found("Battle")
        return Response(status=status.HTTP_204_NO_CONTENT)

    battle = battle_repo.get_by_id(battle_id)
    if battle is None:
        return _not_found("Battle")
    return Response(BattleSerializer(battle).data)
