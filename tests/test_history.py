import pytest

from scicalc.errors import HistoryEntryError
from scicalc.history import DEFAULT_EXPORT_NAME, export_history, result_of, write_history
from scicalc.state import BinaryOp, UnaryFn


def test_export_one_line_per_entry_in_order():
    entries = ["5 + 3 = 8", "√(9) = 3", "8 * 3 = 24"]
    text = export_history(entries)
    assert text.splitlines() == entries
    assert not text.endswith("\n")


def test_export_empty_history():
    assert export_history([]) == ""


def test_export_from_a_session(ev):
    ev.enter_digit("5")
    ev.apply_binary_operator(BinaryOp.ADD)
    ev.enter_digit("3")
    ev.apply_equals()
    ev.enter_digit("9")
    ev.apply_unary_function(UnaryFn.SQRT, "√")
    assert export_history(ev.state.history) == "5 + 3 = 8\n√(9) = 3"


def test_write_history(tmp_path):
    target = tmp_path / DEFAULT_EXPORT_NAME
    path = write_history(target, ("1 + 1 = 2", "2 * 2 = 4"))
    assert path == target
    assert target.read_text(encoding="utf-8") == "1 + 1 = 2\n2 * 2 = 4"


def test_result_of():
    assert result_of("sin⁻¹(1) = 90") == "90"
    with pytest.raises(HistoryEntryError):
        result_of("no result here")
    with pytest.raises(HistoryEntryError):
        result_of("dangling =")
