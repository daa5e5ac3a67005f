import pytest

from hxlib.history import GROW_SIZE, History, HistoryEntry, HistoryFlags, HistoryState


def lines(history):
    return [entry.line for entry in history.entries()]


@pytest.fixture
def filled():
    history = History()
    for line in ("alpha", "beta", "gamma"):
        history.add(line)
    return history


def test_new_history_is_empty():
    history = History()
    assert history.where() == 0
    assert history.current() is None
    assert history.get(1) is None
    assert history.set_pos(0) is False
    assert history.entries() == []


def test_add_keeps_order(filled):
    assert lines(filled) == ["alpha", "beta", "gamma"]
    assert len(filled) == 3


def test_get_is_relative_to_base(filled):
    assert filled.get(1).line == "alpha"
    assert filled.get(3).line == "gamma"
    assert filled.get(0) is None
    assert filled.get(4) is None


def test_using_history_and_walking_back(filled):
    filled.using_history()
    assert filled.where() == 3
    assert filled.current() is None
    assert filled.previous().line == "gamma"
    assert filled.previous().line == "beta"
    assert filled.previous().line == "alpha"
    assert filled.previous() is None
    assert filled.where() == 0


def test_next_stops_at_end(filled):
    assert filled.set_pos(1) is True
    assert filled.current().line == "beta"
    assert filled.next().line == "gamma"
    assert filled.next() is None
    assert filled.where() == 3
    assert filled.next() is None


def test_set_pos_range(filled):
    assert filled.set_pos(3) is True
    assert filled.set_pos(4) is False
    assert filled.set_pos(-1) is False
    assert filled.where() == 3


def test_total_bytes(filled):
    assert filled.total_bytes() == len("alpha") + len("beta") + len("gamma")


def test_replace_returns_old_entry(filled):
    old = filled.replace(1, "delta", {"k": 1})
    assert old == HistoryEntry("beta")
    assert filled.entries()[1] == HistoryEntry("delta", {"k": 1})
    assert filled.replace(3, "x") is None
    assert filled.replace(-1, "x") is None


def test_remove(filled):
    removed = filled.remove(0)
    assert removed.line == "alpha"
    assert lines(filled) == ["beta", "gamma"]
    assert filled.remove(2) is None
    assert History().remove(0) is None


def test_stifle_drops_oldest_and_sets_base(filled):
    filled.stifle(2)
    assert filled.is_stifled() is True
    assert lines(filled) == ["beta", "gamma"]
    assert filled.base == 1
    assert filled.get(1).line == "beta"


def test_stifled_add_rotates(filled):
    filled.stifle(2)
    filled.add("delta")
    assert lines(filled) == ["gamma", "delta"]
    assert filled.base == 2
    assert filled.get(2).line == "gamma"


def test_stifle_zero_refuses_additions(filled):
    filled.stifle(-5)
    assert filled.entries() == []
    filled.add("omega")
    assert filled.entries() == []


def test_unstifle_return_values(filled):
    assert filled.unstifle() == 0
    filled.stifle(5)
    assert filled.unstifle() == -5
    assert filled.is_stifled() is False
    assert filled.unstifle() == 5


def test_unstifled_history_grows(filled):
    filled.stifle(3)
    filled.unstifle()
    filled.add("delta")
    assert lines(filled) == ["alpha", "beta", "gamma", "delta"]


def test_state_round_trip(filled):
    filled.set_pos(1)
    filled.stifle(10)
    state = filled.get_state()
    assert state.length == 3
    assert state.offset == 1
    assert state.size == GROW_SIZE
    assert state.flags & HistoryFlags.STIFLED

    other = History()
    other.set_state(state)
    assert lines(other) == lines(filled)
    assert other.where() == 1
    assert other.current().line == "beta"
    assert other.is_stifled() is True


def test_set_state_rejects_mismatched_length():
    history = History()
    with pytest.raises(ValueError):
        history.set_state(HistoryState(entries=[HistoryEntry("a")], length=2))


def test_size_grows_in_steps():
    history = History()
    for index in range(GROW_SIZE):
        history.add(str(index))
    assert history.get_state().size == 2 * GROW_SIZE
    assert len(history) == GROW_SIZE


def test_clear_keeps_base(filled):
    filled.stifle(2)
    filled.add("delta")
    base = filled.base
    filled.using_history()
    filled.clear()
    assert filled.entries() == []
    assert filled.where() == 0
    assert filled.base == base
    assert filled.current() is None
    assert filled.total_bytes() == 0