"""
Settlement service for fair settlement calculation.

The engine (`compute_settlement`) is a pure function of a member list and a
set of expense records. `calculate_trip_settlement` is the thin loader that
reads one trip's snapshot from the database and hands it to the engine.
"""
import logging
import math
from collections import deque
from decimal import Decimal
from numbers import Real
from typing import Deque, Dict, Iterable, List, NamedTuple, Sequence
from sqlalchemy.orm import Session
from tripsplit.core.exceptions import InvalidAmount, InvalidTripState
from tripsplit.core.utils import round_currency
from tripsplit.models.expense import Expense
from tripsplit.models.trip import Trip

logger = logging.getLogger(__name__)

# Balances closer than this to zero are treated as settled (one minor currency unit)
SETTLEMENT_EPSILON = 0.01


class ExpenseRecord(NamedTuple):
    """Minimal expense shape the engine needs."""
    amount: float
    payer: str


class Balance(NamedTuple):
    """A member's outstanding amount while matching (always positive)."""
    member: str
    remaining: float


class Transfer(NamedTuple):
    """A single payment instruction between two members."""
    from_member: str
    to_member: str
    amount: float


class SettlementReport(NamedTuple):
    """Balances and payment instructions for a trip at one point in time."""
    paid: Dict[str, float]
    should_pay: Dict[str, float]
    net: Dict[str, float]
    settlements: List[Transfer]
    total: float


def _validate_amount(amount) -> float:
    """Coerce an expense amount to float, rejecting anything that would poison the sums."""
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidAmount(f"Expense amount must be a number, got {amount!r}")
    value = float(amount)
    if not math.isfinite(value):
        raise InvalidAmount(f"Expense amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidAmount(f"Expense amount must not be negative, got {amount!r}")
    return value


def compute_settlement(members: Sequence[str], expenses: Iterable) -> SettlementReport:
    """
    Compute paid totals, fair shares, net balances and settling transfers.

    `expenses` may be any objects exposing `amount` and `payer`. Expenses paid
    by someone who is no longer a member still count towards `total` and get
    a `paid` entry, but the total is shared only among current `members`.

    Raises InvalidTripState for an empty member list and InvalidAmount for a
    negative or non-numeric amount.
    """
    # Keep enumeration order, drop duplicates
    members = list(dict.fromkeys(members))
    if not members:
        raise InvalidTripState("Cannot settle a trip with no members")

    records = [ExpenseRecord(_validate_amount(e.amount), e.payer) for e in expenses]

    paid: Dict[str, float] = {m: 0.0 for m in members}
    for record in records:
        paid[record.payer] = paid.get(record.payer, 0.0) + record.amount

    total = sum(record.amount for record in records)
    share = total / len(members)
    should_pay = {m: share for m in members}
    net = {m: paid[m] - share for m in members}

    debtors = deque(Balance(m, -n) for m, n in net.items() if n < -SETTLEMENT_EPSILON)
    creditors = deque(Balance(m, n) for m, n in net.items() if n > SETTLEMENT_EPSILON)

    return SettlementReport(
        paid=paid,
        should_pay=should_pay,
        net=net,
        settlements=minimize_transfers(debtors, creditors),
        total=round_currency(total),
    )


def minimize_transfers(debtors: Deque[Balance], creditors: Deque[Balance]) -> List[Transfer]:
    """
    Greedily pair the head debtor with the head creditor until one side runs out.

    Every round retires at least one party, so at most
    len(debtors) + len(creditors) - 1 transfers are produced.
    Consumes both deques.
    """
    transfers = []
    while debtors and creditors:
        debtor = debtors.popleft()
        creditor = creditors.popleft()

        amount = min(debtor.remaining, creditor.remaining)
        transfers.append(Transfer(debtor.member, creditor.member, round_currency(amount)))

        debtor = debtor._replace(remaining=debtor.remaining - amount)
        creditor = creditor._replace(remaining=creditor.remaining - amount)
        if debtor.remaining >= SETTLEMENT_EPSILON:
            debtors.appendleft(debtor)
        if creditor.remaining >= SETTLEMENT_EPSILON:
            creditors.appendleft(creditor)

    return transfers


def calculate_trip_settlement(trip: Trip, db: Session) -> SettlementReport:
    """Recompute the settlement report for a trip from its current members and expenses."""
    members = trip.member_usernames
    expenses = db.query(Expense).filter(Expense.trip_id == trip.id).order_by(Expense.id).all()
    report = compute_settlement(members, expenses)
    logger.debug(
        f"Settled trip {trip.id}: {len(members)} members, {len(expenses)} expenses, "
        f"{len(report.settlements)} transfers"
    )
    return report
