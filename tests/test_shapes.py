import doctest

import pytest

from seqzip import NotABranch
from seqzip._lib import cli, shapes, zipper
from seqzip._lib import path as paths
from seqzip._lib.path import Path, Rest, enter, siblings, touch


@pytest.mark.parametrize('module', [shapes, zipper, cli])
def test_doctests(module):
    failed, _ = doctest.testmod(module)
    assert failed == 0


def test_is_branch():
    assert shapes.is_branch([])
    assert shapes.is_branch((1,))
    assert not shapes.is_branch('ab')
    assert not shapes.is_branch(b'ab')
    assert not shapes.is_branch({'a': 1})
    assert not shapes.is_branch(None)


def test_get_children_is_identity():
    node = [1, 2]
    assert shapes.get_children(node) is node
    with pytest.raises(NotABranch):
        shapes.get_children('ab')


def test_make_node_keeps_sequence_kind():
    assert shapes.make_node([0], (1, 2)) == [1, 2]
    assert shapes.make_node((0,), [1, 2]) == (1, 2)
    children = (1, 2)
    assert shapes.make_node((), children) is children


def test_path_helpers():
    children = [1, 2, 3]
    path = enter(None, children, children)
    assert path == Path(l=None, r=Rest(children, 1), pnodes=(children, None),
                        ppath=None, changed=False)
    assert path.r.seq is children
    assert siblings(path, 1) == (1, 2, 3)
    assert touch(path).changed
    assert touch(None) is None

    inner = enter(path, [4], [4])
    assert inner.r is None
    assert inner.pnodes[1] is path.pnodes
    assert paths.backward(inner.pnodes) == ([1, 2, 3], [4])
    assert inner.ppath is path


def test_linked_lists():
    rest = paths.rest((1, 2, 3), 1)
    assert paths.forward(rest) == (2, 3)
    assert paths.pop(rest) == (2, Rest((1, 2, 3), 2))
    assert paths.pop(paths.rest((1, 2), 1)) == (2, None)
    assert paths.rest((1,), 1) is None

    lst = (0, rest)
    assert paths.forward(lst) == (0, 2, 3)
    assert paths.backward(lst) == (3, 2, 0)
    assert paths.pop(lst) == (0, rest)

    assert paths.stack([1, 2, 3]) == (3, (2, (1, None)))
    assert paths.forward(None) == ()
