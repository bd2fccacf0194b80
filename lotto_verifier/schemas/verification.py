"""Schemas for the verification check API."""

from __future__ import annotations

from marshmallow import Schema, fields, pre_dump, validate

from lotto_verifier.schemas.draw import PrizeTierFieldsSchema, draw_columns


class VerificationRequestSchema(Schema):
    date_from = fields.Date(required=True)
    date_to = fields.Date(required=True)

    # Case-insensitive substring filter on the ticket group label.
    group_name = fields.String(
        required=False,
        load_default=None,
        allow_none=True,
        validate=validate.Length(max=100),
    )


class WinningTicketSchema(Schema):
    ticket_id = fields.Integer(required=True)
    matching_numbers = fields.List(fields.Integer(), required=True)


class DrawResultSchema(PrizeTierFieldsSchema):
    draw_id = fields.Integer(required=True)
    draw_date = fields.Date(required=True)
    draw_system_id = fields.Integer(allow_none=True)
    lotto_type = fields.String(required=True)
    draw_numbers = fields.List(fields.Integer(), required=True)
    ticket_price = fields.Decimal(allow_none=True, as_string=True)
    winning_tickets = fields.List(fields.Nested(WinningTicketSchema), required=True)

    @pre_dump
    def _flatten(self, draw, **kwargs):  # type: ignore[no-untyped-def]
        out = draw_columns(draw)
        out["draw_numbers"] = list(draw.numbers)
        out["winning_tickets"] = [
            {"ticket_id": w.ticket_id, "matching_numbers": list(w.matched_numbers)}
            for w in draw.winners
        ]
        return out


class TicketResultSchema(Schema):
    ticket_id = fields.Integer(required=True)
    group_name = fields.String(required=True)
    ticket_numbers = fields.List(fields.Integer(), required=True)

    @pre_dump
    def _rename(self, ticket, **kwargs):  # type: ignore[no-untyped-def]
        return {
            "ticket_id": ticket.ticket_id,
            "group_name": ticket.group_name,
            "ticket_numbers": list(ticket.numbers),
        }


class VerificationResponseSchema(Schema):
    execution_time_ms = fields.Integer(required=True)
    draws_results = fields.List(fields.Nested(DrawResultSchema), required=True)
    tickets_results = fields.List(fields.Nested(TicketResultSchema), required=True)

    @pre_dump
    def _from_outcome(self, outcome, **kwargs):  # type: ignore[no-untyped-def]
        return {
            "execution_time_ms": outcome.execution_time_ms,
            "draws_results": outcome.draws,
            "tickets_results": outcome.tickets,
        }
