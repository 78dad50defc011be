"""Order lifecycle state machine.

PENDING -> CONFIRMED -> IN_PREPARATION -> OUT_FOR_DELIVERY -> DELIVERED,
with CANCELED reachable from every non-terminal state.  DELIVERED and
CANCELED are terminal.

``validate_transition`` is the single authority on whether a status
change is legal; the service only persists what it returns.  Rejections,
in order of precedence:

1. unknown target value;
2. target equal to the current status;
3. current status is terminal;
4. edge missing from ``VALID_TRANSITIONS`` (the message names the
   allowed targets).
"""

from __future__ import annotations

from typing import List

from modules.orders.constants import TERMINAL_STATES, VALID_TRANSITIONS, OrderStatus
from modules.orders.exceptions import InvalidOrderStatus, InvalidStatusTransition


def parse_status(value: object) -> OrderStatus:
    """Normalise ``value`` (case and surrounding spaces) to an ``OrderStatus``."""
    if isinstance(value, str):
        normalized = value.strip().upper()
        if normalized in OrderStatus.values:
            return OrderStatus(normalized)
    valid = ", ".join(OrderStatus.values)
    raise InvalidOrderStatus(f"Invalid status '{value}'. Valid statuses: {valid}.")


def allowed_targets(current: str) -> List[OrderStatus]:
    """Legal next statuses, in declaration order."""
    targets = VALID_TRANSITIONS.get(current, set())
    return [status for status in OrderStatus if status in targets]


def describe_targets(targets: List[OrderStatus]) -> str:
    names = [str(status.value) for status in targets]
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} or {names[-1]}"


def can_transition(current: str, target: str) -> bool:
    return target in VALID_TRANSITIONS.get(current, set())


def validate_transition(current: str, target: object) -> OrderStatus:
    """Return the parsed target status or raise if the move is illegal."""
    new_status = parse_status(target)

    if new_status == current:
        raise InvalidStatusTransition(f"Order is already in status {new_status.value}.")

    if current in TERMINAL_STATES:
        raise InvalidStatusTransition(f"Orders in status {current} cannot be changed.")

    if not can_transition(current, new_status):
        raise InvalidStatusTransition(
            f"Status {current} can only transition to "
            f"{describe_targets(allowed_targets(current))}."
        )
    return new_status
