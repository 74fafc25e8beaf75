"""Keyboard shortcuts map onto evaluator events."""

from scicalc.keymap import KEY_MAP, handle_key
from scicalc.state import Mode


def type_keys(ev, *keys):
    for key in keys:
        assert handle_key(ev, key), f"unbound key {key!r}"
    return ev.state


def test_typed_calculation(ev):
    state = type_keys(ev, "1", "2", "+", "3", "0", "Enter")
    assert state.display == "42"
    assert state.history == ("12 + 30 = 42",)


def test_no_precedence_from_keyboard(ev):
    assert type_keys(ev, "2", "+", "3", "*", "4", "=").display == "20"


def test_return_escape_and_backspace(ev):
    type_keys(ev, "7", "8", "Backspace")
    assert ev.state.display == "7"
    type_keys(ev, "/", "2", "Return")
    assert ev.state.display == "3.5"
    type_keys(ev, "Escape")
    assert ev.state.display == "0"
    assert ev.state.history == ("7 / 2 = 3.5",)


def test_power_and_percent_keys(ev):
    assert type_keys(ev, "2", "^", "8", "Enter").display == "256"
    assert type_keys(ev, "5", "0", "%", "1", "0", "Enter").display == "5"


def test_bracket_keys(ev):
    state = type_keys(ev, "(", "{", "[", "]")
    assert state.open_brackets == 2


def test_tab_toggles_mode(ev):
    assert type_keys(ev, "Tab").mode is Mode.SCIENTIFIC


def test_decimal_key(ev):
    assert type_keys(ev, "1", ".", "2", ".", "5").display == "1.25"


def test_unbound_key(ev):
    before = ev.state
    assert not handle_key(ev, "q")
    assert not handle_key(ev, "")
    assert ev.state is before


def test_every_digit_is_bound():
    assert all(d in KEY_MAP for d in "0123456789")
