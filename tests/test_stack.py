import pytest

from flow.ds.stack import Stack


def test_add_and_remove_is_lifo():
    s = Stack()
    for item in ["a", "b", "c"]:
        s.add(item)
    assert len(s) == 3
    assert s.remove() == "c"
    assert s.remove() == "b"
    assert s.remove() == "a"
    assert len(s) == 0


def test_remove_empty_raises():
    s = Stack()
    with pytest.raises(IndexError):
        s.remove()


def test_remove_after_draining_raises():
    s = Stack()
    s.add(1)
    assert s.remove() == 1
    with pytest.raises(IndexError):
        s.remove()


def test_buffer_reflects_contents():
    s = Stack()
    s.add(10)
    s.add(20)
    assert s.buffer == [10, 20]
    assert list(s) == [10, 20]


def test_new_stacks_do_not_share_storage():
    first = Stack()
    second = Stack()
    first.add("x")
    assert len(second) == 0
    assert len(first) == 1