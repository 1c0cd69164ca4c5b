from collections import namedtuple
from itertools import islice

# l: left siblings as a linked list, nearest first
# r: right siblings as a linked list, nearest first
# pnodes: ancestors as a linked list, the parent of this level first
# ppath: the Path of the parent level, None at the top
# changed: the level must be rebuilt on the way up
#
# A linked list is None when empty, a (head, tail) pair, or a Rest
# standing for the untouched end of a child sequence. Moves only ever
# push or pop the head, so every Path built from another shares its tail.
Path = namedtuple('Path', ['l', 'r', 'pnodes', 'ppath', 'changed'])

Rest = namedtuple('Rest', ['seq', 'start'])


def rest(seq, start):
    """seq[start:] without copying, None when empty"""
    if start < len(seq):
        return Rest(seq, start)


def pop(lst):
    """Splits a non-empty list into its head and tail"""
    if isinstance(lst, Rest):
        return lst.seq[lst.start], rest(lst.seq, lst.start + 1)
    return lst


def items(lst):
    while lst is not None:
        if isinstance(lst, Rest):
            for item in islice(lst.seq, lst.start, None):
                yield item
            return
        head, lst = lst
        yield head


def forward(lst):
    return tuple(items(lst))


def backward(lst):
    return forward(lst)[::-1]


def stack(seq):
    """Linked list of seq with its last item at the head"""
    lst = None
    for item in seq:
        lst = (item, lst)
    return lst


def enter(ppath, node, children):
    """Path for the first child of node, reached from ppath"""
    return Path(
        l=None,
        r=rest(children, 1),
        pnodes=(node, ppath.pnodes if ppath else None),
        ppath=ppath,
        changed=False,
    )


def siblings(path, current):
    """The complete child sequence of the level, current included"""
    return backward(path.l) + (current,) + forward(path.r)


def touch(path):
    """Mark path as changed, keeping the absent path absent."""
    return path and path._replace(changed=True)
