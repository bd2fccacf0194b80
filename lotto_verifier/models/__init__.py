"""ORM models."""

from lotto_verifier.models.draw import Draw
from lotto_verifier.models.ticket import Ticket

__all__ = ["Draw", "Ticket"]
