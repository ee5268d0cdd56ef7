import pytest

from core.login import LoginGate, get_login_gate


def test_default_state_is_unknown():
    assert LoginGate().get() is None


@pytest.mark.parametrize(
    ("state", "requires_login", "blocked"),
    [
        (None, True, False),
        (None, False, False),
        (True, True, False),
        (True, False, False),
        (False, True, True),
        (False, False, False),
    ],
)
def test_only_explicit_logout_blocks(state, requires_login, blocked):
    gate = LoginGate(state)
    assert gate.blocks(requires_login) is blocked


def test_set_and_reset():
    gate = LoginGate()
    gate.set(False)
    assert gate.get() is False
    gate.set(True)
    assert gate.get() is True
    gate.reset()
    assert gate.get() is None


def test_process_wide_gate_is_shared():
    get_login_gate().set(False)
    assert get_login_gate().get() is False
