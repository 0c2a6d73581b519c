import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Node, PushSwap, Stack

distinct_ints = st.lists(
    st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, max_size=30
)
MOVE_NAMES = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def test_values_keep_order_and_length():
    stack = Stack([4, 2, 9])
    assert stack.values() == [4, 2, 9]
    assert len(stack) == 3


def test_iteration_yields_nodes_in_order():
    stack = Stack([5, -3, 8])
    assert [node.value for node in stack] == [5, -3, 8]


def test_head_of_empty_stack_is_none():
    assert Stack().head() is None
    assert Stack().pop() is None


def test_head_is_top_value():
    assert Stack([7, 1]).head().value == 7


def test_push_and_pop_round_trip():
    stack = Stack([1, 2, 3])
    node = stack.pop()
    assert node.value == 1
    assert stack.values() == [2, 3]
    stack.push(node)
    assert stack.head() is node
    assert stack.values() == [1, 2, 3]


@given(distinct_ints)
def test_swap_exchanges_top_two(values):
    stack = Stack(values)
    stack.swap()
    if len(values) >= 2:
        assert stack.values()[:2] == [values[1], values[0]]
        assert stack.values()[2:] == values[2:]
    else:
        assert stack.values() == values


@given(distinct_ints)
def test_swap_twice_is_identity(values):
    stack = Stack(values)
    stack.swap()
    stack.swap()
    assert stack.values() == values


@given(distinct_ints.filter(lambda v: len(v) >= 2))
def test_rotate_moves_head_to_bottom(values):
    stack = Stack(values)
    stack.rotate()
    assert stack.values()[-1] == values[0]
    assert stack.values()[:-1] == values[1:]


@given(distinct_ints)
def test_rotate_then_reverse_rotate_is_identity(values):
    stack = Stack(values)
    stack.rotate()
    stack.reverse_rotate()
    assert stack.values() == values


@given(distinct_ints)
def test_rotating_full_length_is_identity(values):
    stack = Stack(values)
    for _ in values:
        stack.rotate()
    assert stack.values() == values


def test_rotation_keeps_node_identity():
    stack = Stack([3, 1, 2])
    before = {id(node) for node in stack}
    stack.rotate()
    stack.reverse_rotate()
    stack.reverse_rotate()
    assert {id(node) for node in stack} == before


@given(distinct_ints)
def test_is_sorted_matches_sorted_order(values):
    assert Stack(sorted(values)).is_sorted()
    assert Stack(values).is_sorted() == (values == sorted(values))


def test_empty_and_single_are_sorted():
    assert Stack().is_sorted()
    assert Stack([42]).is_sorted()


@given(distinct_ints.filter(bool))
def test_min_and_max_nodes(values):
    stack = Stack(values)
    assert stack.min_node().value == min(values)
    assert stack.max_node().value == max(values)
    assert stack.min_node() in list(stack)


def test_min_and_max_of_empty_stack():
    assert Stack().min_node() is None
    assert Stack().max_node() is None


def test_node_defaults():
    node = Node(5)
    assert (node.index, node.push_cost, node.above_median, node.cheapest) == (0, 0, False, False)
    assert node.target_node is None


def test_pb_and_pa_move_tops():
    game = PushSwap([1, 2, 3])
    game.pb()
    game.pb()
    assert game.a.values() == [3]
    assert game.b.values() == [2, 1]
    game.pa()
    assert game.a.values() == [2, 3]
    assert game.b.values() == [1]
    assert game.moves == ["pb", "pb", "pa"]


def test_push_from_empty_stack_is_recorded_but_changes_nothing():
    game = PushSwap([1, 2])
    game.pa()
    assert game.a.values() == [1, 2]
    assert len(game.b) == 0
    assert game.moves == ["pa"]


def test_combined_moves_act_on_both_stacks():
    game = PushSwap([1, 2, 3, 4, 5])
    game.pb()
    game.pb()
    game.ss()
    assert game.a.values() == [4, 3, 5]
    assert game.b.values() == [1, 2]
    game.rr()
    game.rrr()
    assert game.a.values() == [4, 3, 5]
    assert game.b.values() == [1, 2]
    assert game.moves == ["pb", "pb", "ss", "rr", "rrr"]


@given(distinct_ints, st.lists(st.sampled_from(MOVE_NAMES), max_size=40))
def test_moves_preserve_contents_and_are_recorded(values, names):
    game = PushSwap(values)
    for name in names:
        getattr(game, name)()
    assert sorted(game.a.values() + game.b.values()) == sorted(values)
    assert game.moves == names


@pytest.mark.parametrize(
    "move, undo",
    [("ra", "rra"), ("rb", "rrb"), ("rr", "rrr"), ("sa", "sa"), ("sb", "sb"), ("ss", "ss")],
)
def test_moves_have_inverses(move, undo):
    game = PushSwap([6, 2, 9, 4, 1])
    game.pb()
    game.pb()
    a_before, b_before = game.a.values(), game.b.values()
    getattr(game, move)()
    getattr(game, undo)()
    assert game.a.values() == a_before
    assert game.b.values() == b_before