"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotto_verifier.db import get_session
from lotto_verifier.schemas.ticket import (
    GenerateSystemRequestSchema,
    RandomNumbersResponseSchema,
    SystemTicketsResponseSchema,
    TicketCreateSchema,
    TicketListQuerySchema,
    TicketSchema,
)
from lotto_verifier.services.number_set import NumberSet
from lotto_verifier.services.ticket_service import TicketService
from lotto_verifier.utils.identity import current_user_id
from lotto_verifier.utils.responses import ok

tickets_bp = Blueprint("tickets", __name__)

_ticket_schema = TicketSchema()
_tickets_schema = TicketSchema(many=True)
_create_schema = TicketCreateSchema()
_list_query_schema = TicketListQuerySchema()
_system_request_schema = GenerateSystemRequestSchema()
_random_response_schema = RandomNumbersResponseSchema()
_system_response_schema = SystemTicketsResponseSchema()
_service = TicketService()


@tickets_bp.get("/tickets")
def list_tickets():
    """List the caller's tickets, optionally filtered by group name."""

    user_id = current_user_id()
    query = _list_query_schema.load(request.args.to_dict())

    tickets = _service.list_tickets(get_session(), user_id, group_name=query.get("group_name"))
    return ok(_tickets_schema.dump(tickets))


@tickets_bp.post("/tickets")
def create_ticket():
    """Store a ticket with the given numbers."""

    user_id = current_user_id()
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    ticket = _service.create_ticket(
        get_session(),
        user_id,
        NumberSet(data["numbers"]),
        group_name=data.get("group_name"),
        max_tickets=int(current_app.config["MAX_TICKETS_PER_USER"]),
    )

    # Commit occurs in teardown if no exception.
    return ok(_ticket_schema.dump(ticket), status_code=201)


@tickets_bp.post("/tickets/generate-random")
def generate_random():
    """Preview one random set of 6 numbers."""

    user_id = current_user_id()
    numbers = _service.generate_random(user_id)
    return ok(_random_response_schema.dump({"numbers": numbers.to_list()}))


@tickets_bp.post("/tickets/generate-system")
def generate_system():
    """Preview (or store, with ``save``) 9 sets covering every number 1..49."""

    user_id = current_user_id()
    payload = request.get_json(silent=True) or {}
    data = _system_request_schema.load(payload)

    if data.get("save"):
        tickets = _service.save_system_tickets(
            get_session(),
            user_id,
            max_tickets=int(current_app.config["MAX_TICKETS_PER_USER"]),
        )
        return ok({"tickets": _tickets_schema.dump(tickets)}, status_code=201)

    sets = _service.generate_system(user_id)
    return ok(_system_response_schema.dump({"tickets": [s.to_list() for s in sets]}))


@tickets_bp.get("/tickets/<int:ticket_id>")
def get_ticket(ticket_id: int):
    """Get one of the caller's tickets."""

    user_id = current_user_id()
    ticket = _service.get_ticket(get_session(), user_id, ticket_id)
    return ok(_ticket_schema.dump(ticket))


@tickets_bp.put("/tickets/<int:ticket_id>")
def update_ticket(ticket_id: int):
    """Replace the numbers and group name of one of the caller's tickets."""

    user_id = current_user_id()
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    ticket = _service.update_ticket(
        get_session(),
        user_id,
        ticket_id,
        NumberSet(data["numbers"]),
        group_name=data.get("group_name"),
    )
    return ok(_ticket_schema.dump(ticket))


@tickets_bp.delete("/tickets/<int:ticket_id>")
def delete_ticket(ticket_id: int):
    """Delete one of the caller's tickets."""

    user_id = current_user_id()
    _service.delete_ticket(get_session(), user_id, ticket_id)
    return ok({"ticket_id": ticket_id})


@tickets_bp.delete("/tickets/all")
def delete_all_tickets():
    """Delete every ticket the caller owns."""

    user_id = current_user_id()
    deleted = _service.delete_all_tickets(get_session(), user_id)
    return ok({"deleted": deleted})
