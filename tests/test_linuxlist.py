import pytest

from samkit.linuxlist import ListHead


class Item:
    def __init__(self, name):
        self.name = name
        self.node = ListHead(self)


def names(it):
    return [item.name for item in it]


def make_list(*labels):
    head = ListHead()
    items = [Item(label) for label in labels]
    for item in items:
        head.add_tail(item.node)
    return head, items


def check_links(head):
    pos = head
    for _ in range(len(head) + 1):
        assert pos.next.prev is pos
        pos = pos.next
    assert pos is head


def test_new_head_is_empty():
    head = ListHead()
    assert head.is_empty()
    assert head.is_empty_careful()
    assert not head.is_singular()
    assert len(head) == 0
    assert list(head) == []


def test_add_is_stack_order():
    head = ListHead()
    items = [Item(n) for n in "abc"]
    for item in items:
        head.add(item.node)
    assert names(head) == ["c", "b", "a"]
    check_links(head)


def test_add_tail_is_queue_order():
    head, _ = make_list("a", "b", "c")
    assert names(head) == ["a", "b", "c"]
    assert names(reversed(head)) == ["c", "b", "a"]
    assert len(head) == 3
    check_links(head)


def test_first_and_last_entry():
    head, items = make_list("a", "b", "c")
    assert head.first_entry() is items[0]
    assert head.last_entry() is items[2]
    assert head.first_entry_or_none() is items[0]


def test_empty_first_entry_raises():
    head = ListHead()
    with pytest.raises(IndexError):
        head.first_entry()
    with pytest.raises(IndexError):
        head.last_entry()
    assert head.first_entry_or_none() is None


def test_delete_unlinks_and_poisons():
    head, items = make_list("a", "b", "c")
    items[1].node.delete()
    assert names(head) == ["a", "c"]
    assert items[1].node.next is None
    assert items[1].node.prev is None
    check_links(head)
    with pytest.raises(ValueError):
        items[1].node.delete()


def test_delete_init_leaves_empty_node():
    head, items = make_list("a", "b")
    items[0].node.delete_init()
    assert items[0].node.is_empty()
    assert names(head) == ["b"]
    assert head.is_singular()


def test_replace():
    head, items = make_list("a", "b", "c")
    new = Item("x")
    items[1].node.replace(new.node)
    assert names(head) == ["a", "x", "c"]
    check_links(head)


def test_replace_init():
    head, items = make_list("a", "b")
    new = Item("x")
    items[0].node.replace_init(new.node)
    assert names(head) == ["x", "b"]
    assert items[0].node.is_empty()


def test_move_between_lists():
    head1, items = make_list("a", "b")
    head2, others = make_list("x", "y")
    items[1].node.move(head2)
    assert names(head1) == ["a"]
    assert names(head2) == ["b", "x", "y"]
    items[0].node.move_tail(head2)
    assert head1.is_empty()
    assert names(head2) == ["b", "x", "y", "a"]
    check_links(head2)


def test_is_last():
    head, items = make_list("a", "b")
    assert items[1].node.is_last(head)
    assert not items[0].node.is_last(head)


def test_is_singular():
    head, _ = make_list("a")
    assert head.is_singular()
    head2, _ = make_list("a", "b")
    assert not head2.is_singular()


def test_rotate_left():
    head, _ = make_list("a", "b", "c")
    head.rotate_left()
    assert names(head) == ["b", "c", "a"]
    empty = ListHead()
    empty.rotate_left()
    assert empty.is_empty()


def test_cut_position():
    head, items = make_list("a", "b", "c", "d")
    cut = ListHead()
    cut.cut_position(head, items[1].node)
    assert names(cut) == ["a", "b"]
    assert names(head) == ["c", "d"]
    check_links(cut)
    check_links(head)


def test_cut_position_at_head_empties_target():
    head, _ = make_list("a", "b")
    cut, _ = make_list("z")
    cut.cut_position(head, head)
    assert cut.is_empty()
    assert names(head) == ["a", "b"]


def test_cut_position_singular_foreign_entry_is_noop():
    head, _ = make_list("a")
    other = Item("o")
    cut = ListHead()
    cut.cut_position(head, other.node)
    assert cut.is_empty()
    assert names(head) == ["a"]


def test_cut_position_empty_head_is_noop():
    head = ListHead()
    cut, _ = make_list("z")
    cut.cut_position(head, head)
    assert names(cut) == ["z"]


def test_splice():
    src, _ = make_list("a", "b")
    dst, _ = make_list("x", "y")
    src.splice(dst)
    assert names(dst) == ["a", "b", "x", "y"]
    check_links(dst)


def test_splice_tail():
    src, _ = make_list("a", "b")
    dst, _ = make_list("x", "y")
    src.splice_tail(dst)
    assert names(dst) == ["x", "y", "a", "b"]
    check_links(dst)


def test_splice_init_and_tail_init():
    src, _ = make_list("a")
    dst, _ = make_list("x")
    src.splice_init(dst)
    assert src.is_empty()
    assert names(dst) == ["a", "x"]
    src2, _ = make_list("b")
    src2.splice_tail_init(dst)
    assert src2.is_empty()
    assert names(dst) == ["a", "x", "b"]


def test_splice_empty_is_noop():
    src = ListHead()
    dst, _ = make_list("x")
    src.splice(dst)
    src.splice_tail_init(dst)
    assert names(dst) == ["x"]


def test_next_and_prev_entry():
    head, items = make_list("a", "b", "c")
    assert items[0].node.next_entry() is items[1]
    assert items[2].node.prev_entry() is items[1]
    assert items[2].node.next_entry() is head.owner


def test_nodes_iteration():
    head, items = make_list("a", "b", "c")
    assert list(head.nodes()) == [i.node for i in items]
    assert list(head.nodes_reversed()) == [i.node for i in reversed(items)]


def test_iteration_safe_against_removal():
    head, items = make_list("a", "b", "c", "d")
    seen = []
    for item in head.entries():
        seen.append(item.name)
        if item.name in ("b", "c"):
            item.node.delete()
    assert seen == ["a", "b", "c", "d"]
    assert names(head) == ["a", "d"]


def test_entries_from_after_before():
    head, items = make_list("a", "b", "c", "d")
    assert names(head.entries_from(items[1].node)) == ["b", "c", "d"]
    assert names(head.entries_after(items[1].node)) == ["c", "d"]
    assert names(head.entries_before(items[2].node)) == ["b", "a"]
    assert list(head.entries_from(head)) == []


def test_entries_reversed_matches_reversed_entries():
    head, _ = make_list("a", "b", "c", "d", "e")
    assert list(head.entries_reversed()) == list(reversed(list(head.entries())))