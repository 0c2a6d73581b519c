import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.algorithm import prep_for_push, sort_three, sort_values, turk_sort
from pushswap.analysis import current_index
from pushswap.stacks import PushSwap

MOVES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(values, moves):
    state = PushSwap(values)
    for move in moves:
        getattr(state, move)()
    return state


def test_sorted_input_needs_no_moves():
    assert sort_values([1, 2, 3, 4, 5]) == []


def test_empty_input_needs_no_moves():
    assert sort_values([]) == []


def test_two_values_swap():
    assert sort_values([2, 1]) == ["sa"]


def test_three_values_biggest_on_top():
    assert sort_values([3, 2, 1]) == ["ra", "sa"]


@pytest.mark.parametrize(
    "values", [[1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]
)
def test_sort_three_all_orders(values):
    state = PushSwap(values)
    sort_three(state)
    assert state.a.values() == sorted(values)
    assert len(state.moves) <= 2


def test_prep_for_push_uses_reverse_rotation_below_median():
    state = PushSwap([1, 2, 3, 4, 5])
    current_index(state.a)
    node = list(state.a)[3]
    prep_for_push(state, node, "a")
    assert state.a.head() is node
    assert state.moves == ["rra", "rra"]


def test_prep_for_push_on_b_uses_b_moves():
    state = PushSwap([1, 2, 3, 4])
    state.pb()
    state.pb()
    state.pb()
    current_index(state.b)
    node = list(state.b)[1]
    prep_for_push(state, node, "b")
    assert state.b.head() is node
    assert set(state.moves[3:]) <= {"rb", "rrb"}


def test_prep_for_push_rejects_unknown_stack():
    state = PushSwap([1, 2])
    with pytest.raises(ValueError):
        prep_for_push(state, state.a.head(), "c")


def test_prep_for_push_rejects_foreign_node():
    state = PushSwap([1, 2])
    other = PushSwap([3])
    with pytest.raises(ValueError):
        prep_for_push(state, other.a.head(), "a")


def test_turk_sort_sorts_and_empties_b():
    values = [5, 1, 4, 2, 3, 0]
    state = PushSwap(values)
    turk_sort(state)
    assert state.a.values() == sorted(values)
    assert len(state.b) == 0


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=40))
def test_moves_sort_any_input(values):
    moves = sort_values(values)
    assert set(moves) <= MOVES
    state = _replay(values, moves)
    assert state.a.values() == sorted(values)
    assert len(state.b) == 0


@settings(max_examples=30, deadline=None)
@given(st.permutations(list(range(5))))
def test_five_values_sorted(values):
    state = _replay(values, sort_values(values))
    assert state.a.values() == list(range(5))