"""Schemas for ticket and generator endpoints."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_dump, validate, validates_schema

from lotto_verifier.services.number_set import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_SET


def _numbers_field(**kwargs):  # type: ignore[no-untyped-def]
    return fields.List(
        fields.Integer(validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER)),
        validate=validate.Length(equal=NUMBERS_PER_SET),
        **kwargs,
    )


class TicketCreateSchema(Schema):
    """Validate create Ticket payload."""

    numbers = _numbers_field(required=True)
    group_name = fields.String(
        required=False,
        load_default=None,
        allow_none=True,
        validate=validate.Length(max=100),
    )

    @validates_schema
    def _validate_unique(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers") or []
        if len(nums) != len(set(nums)):
            raise ValidationError({"numbers": ["Numbers must be unique"]})


class TicketListQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    group_name = fields.String(required=False, load_default=None, allow_none=True)


class GenerateSystemRequestSchema(Schema):
    # When true the 9 sets are stored as tickets instead of only previewed.
    save = fields.Boolean(required=False, load_default=False)


class TicketSchema(Schema):
    """Serialize a stored ticket."""

    id = fields.Integer(required=True)
    group_name = fields.String(allow_none=True)
    numbers = fields.List(fields.Integer(), required=True)
    created_at = fields.DateTime(allow_none=True)

    @pre_dump
    def _unwrap_numbers(self, record, **kwargs):  # type: ignore[no-untyped-def]
        return {
            "id": record.id,
            "group_name": record.group_name,
            "numbers": record.numbers.to_list(),
            "created_at": record.created_at,
        }


class RandomNumbersResponseSchema(Schema):
    numbers = fields.List(fields.Integer(), required=True)


class SystemTicketsResponseSchema(Schema):
    tickets = fields.List(fields.List(fields.Integer()), required=True)
