"""Types whose annotations are only evaluated on demand."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal


class Ledger:
    pass


class Billing:
    def __init__(self, ledger: Ledger, amount: Decimal | None = None):
        self.ledger = ledger
        self.amount = amount
