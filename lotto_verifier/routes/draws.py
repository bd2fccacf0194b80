"""Draw result routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_verifier.db import get_session
from lotto_verifier.repositories.draw_repository import PRIZE_TIER_COUNT, PrizeTier
from lotto_verifier.schemas.draw import DrawCreateSchema, DrawListQuerySchema, DrawSchema
from lotto_verifier.services.draw_service import DrawService
from lotto_verifier.services.number_set import NumberSet
from lotto_verifier.utils.identity import current_user_id, require_admin
from lotto_verifier.utils.responses import ok

draws_bp = Blueprint("draws", __name__)

_draw_schema = DrawSchema()
_draws_schema = DrawSchema(many=True)
_create_schema = DrawCreateSchema()
_list_query_schema = DrawListQuerySchema()
_service = DrawService()


def _draw_fields(data: dict) -> dict:
    return {
        "draw_date": data["draw_date"],
        "lotto_type": str(data["lotto_type"]),
        "numbers": NumberSet(data["numbers"]),
        "draw_system_id": data.get("draw_system_id"),
        "ticket_price": data.get("ticket_price"),
        "prize_tiers": [
            PrizeTier(count=data.get(f"win_pool_count{i}"), amount=data.get(f"win_pool_amount{i}"))
            for i in range(1, PRIZE_TIER_COUNT + 1)
        ],
    }


@draws_bp.get("/draws")
def list_draws():
    """List draw results, optionally within [date_from, date_to]."""

    current_user_id()
    query = _list_query_schema.load(request.args.to_dict())

    draws = _service.list_draws(get_session(), query.get("date_from"), query.get("date_to"))
    return ok(_draws_schema.dump(draws))


@draws_bp.get("/draws/<int:draw_id>")
def get_draw(draw_id: int):
    """Get a single draw result by id."""

    current_user_id()
    draw = _service.get_draw(get_session(), draw_id)
    return ok(_draw_schema.dump(draw))


@draws_bp.post("/draws")
def create_draw():
    """Register an official draw result (administrators only)."""

    require_admin()
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    draw = _service.create_draw(get_session(), **_draw_fields(data))
    return ok(_draw_schema.dump(draw), status_code=201)


@draws_bp.put("/draws/<int:draw_id>")
def update_draw(draw_id: int):
    """Replace a draw result (administrators only)."""

    require_admin()
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    draw = _service.update_draw(get_session(), draw_id, **_draw_fields(data))
    return ok(_draw_schema.dump(draw))


@draws_bp.delete("/draws/<int:draw_id>")
def delete_draw(draw_id: int):
    """Delete a draw result (administrators only)."""

    require_admin()
    _service.delete_draw(get_session(), draw_id)
    return ok({"draw_id": draw_id})
