from collections import namedtuple

from .exceptions import NotABranch

Shape = namedtuple('Shape', ['is_branch', 'children', 'make_node'])


def isa(types):
    """
    Returns is_<type>(obj) a function that returns true
    when it's argument is an instance of one of types

    >>> is_list = isa(list)
    >>> is_list.__name__
    'is_list'
    >>> is_list([]), is_list(())
    (True, False)
    """
    if not isinstance(types, tuple):
        types = (types,)

    def f(obj):
        return isinstance(obj, types)

    f.__name__ = 'is_' + '_or_'.join(t.__name__ for t in types)
    return f


is_branch = isa((list, tuple))


def get_children(node):
    """
    A sequence node is its own list of children.

    >>> get_children([1, [2, 3]])
    [1, [2, 3]]
    >>> get_children(1)
    Traceback (most recent call last):
        ...
    seqzip._lib.exceptions.NotABranch: 1 is not a branch
    """
    if not is_branch(node):
        raise NotABranch('{0!r} is not a branch'.format(node))
    return node


def make_node(node, children):
    """
    Builds the replacement branch for node out of children. Only the kind
    of sequence is taken from the old node.

    >>> make_node([1, 2], (3, 4))
    [3, 4]
    >>> make_node((1, 2), [3])
    (3,)
    """
    if isinstance(node, list):
        return list(children)
    return tuple(children)


SEQUENCE = Shape(is_branch, get_children, make_node)
