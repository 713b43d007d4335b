from hypothesis import given
from hypothesis import strategies as st

from dsakit.randomlist import RandomNode, copy_random_list


def _build(spec):
    """Build a list from (value, random_index_or_None) pairs."""
    nodes = [RandomNode(val) for val, _ in spec]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    for node, (_, target) in zip(nodes, spec):
        node.random = None if target is None else nodes[target]
    return nodes


def _walk(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _describe(nodes):
    index = {id(n): i for i, n in enumerate(nodes)}
    return [
        (n.val, None if n.random is None else index[id(n.random)]) for n in nodes
    ]


@st.composite
def specs(draw):
    size = draw(st.integers(1, 20))
    return [
        (
            draw(st.integers(-1000, 1000)),
            draw(st.one_of(st.none(), st.integers(0, size - 1))),
        )
        for _ in range(size)
    ]


@given(specs())
def test_copy_preserves_structure(spec):
    nodes = _build(spec)
    copy = copy_random_list(nodes[0])
    copied = _walk(copy)
    assert _describe(copied) == spec


@given(specs())
def test_copy_shares_no_nodes_and_leaves_original(spec):
    nodes = _build(spec)
    copy = copy_random_list(nodes[0])
    copied = _walk(copy)
    original_ids = {id(n) for n in nodes}
    assert all(id(n) not in original_ids for n in copied)
    assert all(
        n.random is None or id(n.random) not in original_ids for n in copied
    )
    assert _describe(_walk(nodes[0])) == spec


def test_copy_of_empty_list():
    assert copy_random_list(None) is None


def test_copy_self_random_link():
    node = RandomNode(5)
    node.random = node
    copy = copy_random_list(node)
    assert copy is not node
    assert copy.random is copy
    assert copy.val == 5
    assert copy.next is None