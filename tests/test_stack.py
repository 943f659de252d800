import pytest

from linkedkit.stack import EmptyStackError, Stack


@pytest.fixture
def filled():
    stack = Stack()
    for value in (11, 21, 51, 101):
        stack.push(value)
    return stack


def test_push_counts_and_orders(filled):
    assert len(filled) == 4
    assert list(filled) == [101, 51, 21, 11]


def test_peek_does_not_remove(filled):
    assert filled.peek() == 101
    assert len(filled) == 4
    assert filled.peek() == 101


def test_pop_sequence_from_source(filled):
    assert filled.pop() == 101
    assert len(filled) == 3
    assert filled.pop() == 51
    assert len(filled) == 2
    filled.push(121)
    assert list(filled) == [121, 21, 11]
    assert len(filled) == 3


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_peek_empty_raises():
    with pytest.raises(EmptyStackError):
        Stack().peek()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_pop_until_empty_then_raise():
    stack = Stack([1, 2])
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert len(stack) == 0
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_init_items_pushed_in_order():
    stack = Stack("ABCD")
    assert stack.peek() == "D"
    assert list(stack) == ["D", "C", "B", "A"]


def test_render_empty():
    assert Stack().render() == "Stack is empty"


def test_render_items():
    stack = Stack(["A", "B"])
    assert stack.render() == "|\tB\t|\n|\tA\t|"


def test_render_line_count_matches_length(filled):
    assert len(filled.render().splitlines()) == len(filled)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], list(range(20))])
def test_push_pop_round_trip(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert len(stack) == 0