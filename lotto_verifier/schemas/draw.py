"""Schemas for official draw results."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_dump, validate, validates_schema

from lotto_verifier.services.draw_service import LottoType
from lotto_verifier.services.number_set import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_SET


LOTTO_TYPES = [t.value for t in LottoType]


def draw_columns(record) -> dict[str, object]:  # type: ignore[no-untyped-def]
    """Flatten a draw-like record into the response field names."""

    out: dict[str, object] = {
        "draw_id": record.draw_id if hasattr(record, "draw_id") else record.id,
        "draw_date": record.draw_date,
        "draw_system_id": record.draw_system_id,
        "lotto_type": record.lotto_type,
        "ticket_price": record.ticket_price,
    }
    for i, tier in enumerate(record.prize_tiers, start=1):
        out[f"win_pool_count{i}"] = tier.count
        out[f"win_pool_amount{i}"] = tier.amount
    return out


class PrizeTierFieldsSchema(Schema):
    win_pool_count1 = fields.Integer(allow_none=True)
    win_pool_amount1 = fields.Decimal(allow_none=True, as_string=True)
    win_pool_count2 = fields.Integer(allow_none=True)
    win_pool_amount2 = fields.Decimal(allow_none=True, as_string=True)
    win_pool_count3 = fields.Integer(allow_none=True)
    win_pool_amount3 = fields.Decimal(allow_none=True, as_string=True)
    win_pool_count4 = fields.Integer(allow_none=True)
    win_pool_amount4 = fields.Decimal(allow_none=True, as_string=True)


class DrawCreateSchema(Schema):
    """Validate create Draw payload."""

    draw_date = fields.Date(required=True)
    lotto_type = fields.String(required=True, validate=validate.OneOf(LOTTO_TYPES))
    numbers = fields.List(
        fields.Integer(validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER)),
        required=True,
        validate=validate.Length(equal=NUMBERS_PER_SET),
    )
    draw_system_id = fields.Integer(required=False, load_default=None, allow_none=True)
    ticket_price = fields.Decimal(
        required=False,
        load_default=None,
        allow_none=True,
        validate=validate.Range(min=0),
    )

    win_pool_count1 = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_amount1 = fields.Decimal(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_count2 = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_amount2 = fields.Decimal(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_count3 = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_amount3 = fields.Decimal(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_count4 = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    win_pool_amount4 = fields.Decimal(load_default=None, allow_none=True, validate=validate.Range(min=0))

    @validates_schema
    def _validate_unique(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers") or []
        if len(nums) != len(set(nums)):
            raise ValidationError({"numbers": ["Numbers must be unique"]})


class DrawListQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date_from = fields.Date(required=False, load_default=None)
    date_to = fields.Date(required=False, load_default=None)


class DrawSchema(PrizeTierFieldsSchema):
    """Serialize a stored draw."""

    draw_id = fields.Integer(required=True)
    draw_date = fields.Date(required=True)
    draw_system_id = fields.Integer(allow_none=True)
    lotto_type = fields.String(required=True)
    numbers = fields.List(fields.Integer(), required=True)
    ticket_price = fields.Decimal(allow_none=True, as_string=True)

    @pre_dump
    def _flatten(self, record, **kwargs):  # type: ignore[no-untyped-def]
        out = draw_columns(record)
        out["numbers"] = record.numbers.to_list()
        return out
