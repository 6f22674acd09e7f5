import pytest

from algokit.linked import (
    FlatNode,
    LinkedList,
    ListNode,
    add_two_numbers,
    delete_node,
    detect_cycle,
    flatten,
    from_iterable,
    has_cycle,
    intersection_point,
    is_palindrome,
    merge_sorted_lists,
    middle_node,
    remove_nth_from_end,
    reverse,
    reverse_k_group,
    rotate_right,
    to_list,
)


def _digits_to_int(head):
    return int("".join(str(d) for d in reversed(to_list(head))) or "0")


def _with_cycle(values, entry):
    head = from_iterable(values)
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    nodes[-1].next = nodes[entry]
    return head, nodes[entry]


def _bottom_values(node):
    values = []
    while node is not None:
        values.append(node.data)
        node = node.bottom
    return values


def test_from_iterable_round_trip():
    values = [3, 1, 4, 1, 5]
    assert to_list(from_iterable(values)) == values


def test_from_iterable_empty():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_linked_list_push_and_reverse():
    ll = LinkedList()
    for value in (11, 41, 51, 81):
        ll.push(value)
    assert list(ll) == [81, 51, 41, 11]
    ll.reverse()
    assert list(ll) == [11, 41, 51, 81]


def test_linked_list_empty_iterates_nothing():
    ll = LinkedList()
    ll.reverse()
    assert list(ll) == []


def test_list_node_iterates_values():
    assert list(ListNode(1, ListNode(2))) == [1, 2]


def test_reverse_function():
    values = [1, 2, 3, 4]
    assert to_list(reverse(from_iterable(values))) == values[::-1]
    assert reverse(None) is None


def test_middle_node_odd():
    head = from_iterable([9, 8, 7, 6, 5])
    assert middle_node(head).val == 7


def test_middle_node_even_takes_second():
    values = [1, 2, 3, 4]
    assert middle_node(from_iterable(values)).val == values[len(values) // 2]


def test_middle_node_empty():
    assert middle_node(None) is None


def test_merge_sorted_lists():
    a = [10, 20, 40, 50, 60]
    b = [15, 18, 25, 30, 55]
    merged = merge_sorted_lists(from_iterable(a), from_iterable(b))
    assert to_list(merged) == sorted(a + b)


def test_merge_sorted_lists_with_empty():
    assert to_list(merge_sorted_lists(None, from_iterable([1, 2]))) == [1, 2]
    assert to_list(merge_sorted_lists(from_iterable([1, 2]), None)) == [1, 2]


def test_merge_sorted_lists_tie_takes_second_first():
    first = from_iterable([5])
    second = from_iterable([5])
    assert merge_sorted_lists(first, second) is second


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_remove_nth_from_end(n):
    values = [10, 20, 30, 40, 50]
    index = len(values) - 1 - n
    result = remove_nth_from_end(from_iterable(values), n)
    assert to_list(result) == values[:index] + values[index + 1 :]


@pytest.mark.parametrize("n", [-1, 5, 9])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(IndexError):
        remove_nth_from_end(from_iterable([1, 2, 3, 4, 5]), n)


def test_delete_node_in_middle():
    head = from_iterable([4, 5, 1, 9])
    delete_node(head.next)
    assert to_list(head) == [4, 1, 9]


def test_delete_node_last_raises():
    head = from_iterable([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize(
    "a, b",
    [([2, 4, 3], [5, 6, 4]), ([9, 9, 9, 9], [9]), ([0], [0]), ([1], [9, 9, 9])],
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = add_two_numbers(from_iterable(a), from_iterable(b))
    expected = _digits_to_int(from_iterable(a)) + _digits_to_int(from_iterable(b))
    assert _digits_to_int(result) == expected
    assert all(0 <= d <= 9 for d in to_list(result))


def test_intersection_point_shared_tail():
    shared = from_iterable([8, 4, 5])
    first = ListNode(4, ListNode(1, shared))
    second = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert intersection_point(first, second) is shared


def test_intersection_point_disjoint():
    assert intersection_point(from_iterable([1, 2]), from_iterable([3])) is None


def test_has_cycle():
    head, _ = _with_cycle([1, 2, 3, 4], 1)
    assert has_cycle(head) is True
    assert has_cycle(from_iterable([1, 2, 3])) is False
    assert has_cycle(None) is False


@pytest.mark.parametrize("entry", [0, 1, 3])
def test_detect_cycle_finds_entry(entry):
    head, node = _with_cycle([3, 2, 0, -4], entry)
    assert detect_cycle(head) is node


def test_detect_cycle_none_without_loop():
    assert detect_cycle(from_iterable([1, 2, 3])) is None
    assert detect_cycle(None) is None


def test_reverse_k_group_example():
    head = reverse_k_group(from_iterable([1, 2, 3, 4, 5]), 2)
    assert to_list(head) == [2, 1, 4, 3, 5]


def test_reverse_k_group_whole_length_is_reverse():
    values = [1, 2, 3, 4]
    assert to_list(reverse_k_group(from_iterable(values), 4)) == values[::-1]


def test_reverse_k_group_one_and_too_large_keep_order():
    values = [1, 2, 3]
    assert to_list(reverse_k_group(from_iterable(values), 1)) == values
    assert to_list(reverse_k_group(from_iterable(values), 5)) == values


def test_reverse_k_group_rejects_zero():
    with pytest.raises(ValueError):
        reverse_k_group(from_iterable([1]), 0)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2, 1], True), ([7], True), ([1, 2], False), ([], False)],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_iterable(values)) is expected


def test_flatten_merges_all_columns():
    columns = [[5, 7, 8, 30], [10, 20], [19, 22, 50], [28, 35, 40, 45]]
    heads = []
    for column in columns:
        top = None
        for value in reversed(column):
            top = FlatNode(value, bottom=top)
        heads.append(top)
    for upper, lower in zip(heads, heads[1:]):
        upper.next = lower
    result = flatten(heads[0])
    assert _bottom_values(result) == sorted(v for c in columns for v in c)


def test_flatten_empty():
    assert flatten(None) is None


@pytest.mark.parametrize("k", [0, 1, 2, 5, 7])
def test_rotate_right(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[-shift:] + values[:-shift] if shift else values
    assert to_list(rotate_right(from_iterable(values), k)) == expected


def test_rotate_right_empty_and_negative():
    assert rotate_right(None, 3) is None
    with pytest.raises(ValueError):
        rotate_right(from_iterable([1]), -1)