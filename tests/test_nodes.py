import pytest

from singlylinked.nodes import Node, find_middle, format_nodes, has_cycle, reverse_nodes


def _chain(values):
    nodes = [Node(value) for value in values]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return nodes


def test_iter_yields_values_in_order():
    nodes = _chain([1, 2, 3])
    assert list(nodes[0]) == [1, 2, 3]


def test_iter_from_inner_node_starts_there():
    nodes = _chain([1, 2, 3])
    assert list(nodes[1]) == [2, 3]


def test_format_with_spaced_separator():
    head = _chain([10, 20, 30])[0]
    assert format_nodes(head, " -> ") == "10 -> 20 -> 30 -> NULL"


def test_format_default_separator():
    head = _chain([20, 30])[0]
    assert format_nodes(head) == "20->30->NULL"


def test_format_empty_chain():
    assert format_nodes(None) == "NULL"


@pytest.mark.parametrize("values", [[1], [1, 2], [20, 30, 90, 80, 40, 60]])
def test_reverse_nodes(values):
    head = _chain(values)[0]
    assert list(reverse_nodes(head)) == values[::-1]


def test_reverse_makes_old_head_the_tail():
    nodes = _chain([1, 2, 3])
    new_head = reverse_nodes(nodes[0])
    assert new_head is nodes[-1]
    assert nodes[0].next is None


def test_reverse_empty():
    assert reverse_nodes(None) is None


def test_double_reverse_restores_order():
    values = [5, 6, 7, 8]
    head = _chain(values)[0]
    assert list(reverse_nodes(reverse_nodes(head))) == values


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 6])
def test_find_middle_returns_upper_middle(length):
    nodes = _chain(range(length))
    assert find_middle(nodes[0]) is nodes[length // 2]


def test_find_middle_of_sample_list():
    head = _chain([20, 40, 30, 90, 80])[0]
    assert find_middle(head).data == 30


def test_find_middle_empty():
    assert find_middle(None) is None


def test_no_cycle_in_plain_chain():
    assert has_cycle(_chain([1, 2, 3, 4])[0]) is False


def test_cycle_detected():
    nodes = _chain([1, 2, 3, 4])
    nodes[-1].next = nodes[1]
    assert has_cycle(nodes[0]) is True


def test_self_loop_detected():
    node = Node(1)
    node.next = node
    assert has_cycle(node) is True


def test_empty_and_single_have_no_cycle():
    assert has_cycle(None) is False
    assert has_cycle(Node(1)) is False