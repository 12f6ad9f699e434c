import pytest

from redblack.rbtree import BLACK
from redblack.samples import load, load_sample
from redblack.settings import DEFAULT_SEARCH_KEY, SAMPLE_ONE, SAMPLE_TWO


def test_sample_one():
    tree = load_sample(1)

    assert list(tree) == list(SAMPLE_ONE)
    assert tree.root.color == BLACK
    tree.validate()


def test_sample_two():
    tree = load_sample(2)

    assert list(tree) == sorted(SAMPLE_TWO)
    assert tree.search(DEFAULT_SEARCH_KEY).describe() == (
        "[ 20(RED)  P:40(BLACK)  L:10(BLACK)  R:35(BLACK) ]"
    )
    tree.validate()


def test_unknown_sample():
    with pytest.raises(ValueError):
        load_sample(3)


def test_load_with_trace():
    messages = []
    tree = load([3, 2, 1], trace=lambda msg, *args: messages.append(msg % args))

    assert len(tree) == 3
    assert "case 3: uncle is black, node is a left child" in messages
