"""Singly linked lists and the classic algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; iterating yields the values from here on."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False, repr=False)
class FlatNode:
    """A node with a ``next`` column link and a sorted ``bottom`` chain."""

    data: int
    next: FlatNode | None = None
    bottom: FlatNode | None = None


class LinkedList:
    """A linked list that grows at its head."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    def push(self, value: int) -> None:
        """Insert ``value`` at the front."""
        self.head = ListNode(value, self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head = reverse(self.head)

    def __iter__(self) -> Iterator[int]:
        return iter(self.head) if self.head is not None else iter(())


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; ``None`` if there are none."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[int]:
    """Values of the list starting at ``head``."""
    return list(head) if head is not None else []


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def middle_node(head: ListNode | None) -> ListNode | None:
    """The middle node; for an even length, the second of the two middles."""
    nodes = list(_nodes(head))
    return nodes[len(nodes) // 2] if nodes else None


def merge_sorted_lists(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one; on ties the node of ``second`` comes first."""
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the node ``n`` places before the last (0 is the last); return the head."""
    count = sum(1 for _ in _nodes(head))
    if not 0 <= n < count:
        raise IndexError(f"position {n} from the end is outside a list of {count}")
    assert head is not None
    target = count - 1 - n
    if target == 0:
        return head.next
    previous = head
    for _ in range(target - 1):
        assert previous.next is not None
        previous = previous.next
    assert previous.next is not None
    previous.next = previous.next.next
    return head


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list in O(1) by pulling in its successor."""
    successor = node.next
    if successor is None:
        raise ValueError("the last node cannot be deleted without its predecessor")
    node.val = successor.val
    node.next = successor.next


def add_two_numbers(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def intersection_point(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """The first node shared by two lists, or ``None`` if they never meet."""
    p, q = first, second
    while p is not q:
        p = second if p is None else p.next
        q = first if q is None else q.next
    return p


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short tail is left as it is."""
    if k < 1:
        raise ValueError("group size must be positive")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: ListNode | None = group_prev
        for _ in range(k):
            assert kth is not None
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        group_first = group_prev.next
        previous, node = group_next, group_first
        while node is not group_next:
            assert node is not None
            node.next, previous, node = previous, node, node.next
        group_prev.next = kth
        assert group_first is not None
        group_prev = group_first


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """The node where a cycle begins, or ``None`` if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    fast = head
    while slow is not fast:
        assert slow is not None and fast is not None
        slow = slow.next
        fast = fast.next
    return slow


def is_palindrome(head: ListNode | None) -> bool:
    """Whether the values read the same both ways; an empty list is not one."""
    if head is None:
        return False
    values = list(head)
    return values == values[::-1]


def _merge_bottom(a: FlatNode | None, b: FlatNode | None) -> FlatNode | None:
    dummy = FlatNode(0)
    tail = dummy
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.bottom = a
            a = a.bottom
        else:
            tail.bottom = b
            b = b.bottom
        tail = tail.bottom
    tail.bottom = a if a is not None else b
    return dummy.bottom


def flatten(root: FlatNode | None) -> FlatNode | None:
    """Merge sorted ``bottom`` columns joined by ``next`` into one ``bottom`` chain."""
    columns: list[FlatNode] = []
    node = root
    while node is not None:
        columns.append(node)
        node = node.next
    result: FlatNode | None = None
    for column in reversed(columns):
        column.next = None
        result = _merge_bottom(column, result)
    return result


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError("rotation cannot be negative")
    if head is None:
        return None
    nodes = list(_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head
    nodes[-k - 1].next = None
    nodes[-1].next = head
    return nodes[-k]