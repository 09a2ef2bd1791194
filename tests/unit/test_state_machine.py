# tests/unit/test_state_machine.py

import pytest

from src.domain.state_machine import OrderStateMachine, OrderStatus
from src.domain.exceptions import InvalidStateTransitionError


def test_pending_can_be_approved():
    assert OrderStateMachine.can_transition(
        OrderStatus.PENDING,
        OrderStatus.APPROVED,
    )


def test_approved_is_terminal():
    assert OrderStateMachine.is_terminal(OrderStatus.APPROVED)
    assert not OrderStateMachine.is_terminal(OrderStatus.PENDING)

    with pytest.raises(InvalidStateTransitionError):
        OrderStateMachine.validate_transition(
            OrderStatus.APPROVED,
            OrderStatus.PENDING,
        )


def test_cannot_approve_twice():
    with pytest.raises(InvalidStateTransitionError) as excinfo:
        OrderStateMachine.validate_transition(
            OrderStatus.APPROVED,
            OrderStatus.APPROVED,
        )

    assert excinfo.value.from_state == "approved"
    assert excinfo.value.to_state == "approved"


def test_invalid_type_guard():
    with pytest.raises(TypeError):
        OrderStateMachine.validate_transition(
            "pending",  # invalid type
            OrderStatus.APPROVED,
        )
