from collections import namedtuple

from . import path as paths
from .exceptions import EndOfTraversal, NotABranch, TopLevelError
from .shapes import SEQUENCE, Shape


def zipper(root, is_branch, children, make_node):
    return Loc(root, None, Shape(is_branch, children, make_node))


def seq_zip(root):
    """
    Returns a zipper for nested lists and tuples, given a root sequence.

    >>> seq_zip([1, [2, 3], 4]).down().right().down().node()
    2
    """
    return Loc(root, None, SEQUENCE)


_Loc = namedtuple('Loc', ['current', 'path', 'shape'])


class Loc(_Loc):

    def __repr__(self):
        return '<seqzip.Loc({0!r}) object at {1}>'.format(
            self.current, id(self),
        )

    ## Context
    def node(self):
        return self.current

    def branch(self):
        return self.shape.is_branch(self.current)

    def children(self):
        if not self.branch():
            raise NotABranch('{0!r} is not a branch'.format(self.current))
        return self.shape.children(self.current)

    def ancestors(self):
        """Nodes leading to this loc, starting at the root"""
        return paths.backward(self.path.pnodes) if self.path else ()

    def lefts(self):
        return paths.backward(self.path.l) if self.path else ()

    def rights(self):
        return paths.forward(self.path.r) if self.path else ()

    def depth(self):
        return len(self.ancestors())

    def is_top(self):
        return self.path is None

    def at_end(self):
        return False

    ## Navigation
    def down(self):
        if not self.branch():
            return None
        children = self.shape.children(self.current)
        if children:
            return self._replace(
                current=children[0],
                path=paths.enter(self.path, self.current, children),
            )

    def up(self):
        path = self.path
        if path:
            pnode = path.pnodes[0]
            if path.changed:
                return self._replace(
                    current=self.shape.make_node(
                        pnode, paths.siblings(path, self.current),
                    ),
                    path=paths.touch(path.ppath),
                )
            else:
                return self._replace(current=pnode, path=path.ppath)

    def top(self):
        loc = self
        while not loc.is_top():
            loc = loc.up()
        return loc

    def root(self):
        """
        Zips all the way up and returns the root node, reflecting any
        changes.
        """
        return self.top().current

    def left(self):
        if self.path and self.path.l:
            l, r = self.path[:2]
            current, ls = l
            return self._replace(current=current, path=self.path._replace(
                l=ls,
                r=(self.current, r),
            ))

    def right(self):
        if self.path and self.path.r:
            l, r = self.path[:2]
            current, rs = paths.pop(r)
            return self._replace(current=current, path=self.path._replace(
                l=(self.current, l),
                r=rs,
            ))

    def leftmost(self):
        """Returns the left most sibling at this location or self"""

        path = self.path
        if path and path.l:
            t = paths.siblings(path, self.current)
            return self._replace(current=t[0], path=path._replace(
                l=None,
                r=paths.rest(t, 1),
            ))
        else:
            return self

    def rightmost(self):
        """Returns the right most sibling at this location or self"""

        path = self.path
        if path and path.r:
            t = paths.siblings(path, self.current)
            return self._replace(current=t[-1], path=path._replace(
                l=paths.stack(t[:-1]),
                r=None,
            ))
        else:
            return self

    def leftmost_descendant(self):
        loc = self
        while True:
            d = loc.down()
            if d is None:
                return loc
            loc = d

    def rightmost_descendant(self):
        loc = self
        while True:
            d = loc.down()
            if d is None:
                return loc
            loc = d.rightmost()

    def move_to(self, dest):
        """
        Replays the descents and right moves that lead to dest, starting
        from the top of this loc's tree. Returns whatever sits at that
        position now, which need not be dest's node once either tree has
        been edited, or None when the position no longer exists.
        """

        moves = []
        path = dest.path

        while path:
            moves.extend(len(paths.forward(path.l)) * ['r'])
            moves.append('d')
            path = path.ppath

        moves.reverse()

        loc = self.top()
        for m in moves:
            if loc is None:
                break
            if m == 'd':
                loc = loc.down()
            else:
                loc = loc.right()

        return loc

    ## Enumeration
    def next(self):
        """
        Moves to the next loc in the hierarchy, depth-first. When reaching
        the end, returns an End location, detectable via at_end().

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        next visits the nodes in the order a, b, c, d, e, f, g
        """

        n = self.down()
        if n is None:
            n = self.right()
        if n is not None:
            return n

        loc = self
        while True:
            u = loc.up()
            if u is None:
                return End(loc.current, self.shape)
            r = u.right()
            if r is not None:
                return r
            loc = u

    def prev(self):
        """
        Moves to the previous loc in the hierarchy, depth-first. Returns
        None at the root.
        """

        loc = self.left()
        if loc is not None:
            return loc.rightmost_descendant()
        return self.up()

    def preorder_iter(self):
        loc = self
        while not loc.at_end():
            yield loc
            loc = loc.next()

    def postorder_next(self):
        """
        Steps to the next loc of a post-order walk, children before their
        parent. The walk of

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        runs c, d, b, f, g, e, a and returns None after the root. A walk
        over a whole tree has to start from leftmost_descendant(), which
        postorder_iter does.
        """

        r = self.right()
        if r is not None:
            return r.leftmost_descendant()
        else:
            return self.up()

    def postorder_iter(self):
        loc = self.leftmost_descendant()

        while loc is not None:
            yield loc
            loc = loc.postorder_next()

    ## Editing
    def replace(self, value):
        """Replaces the node at this loc, without moving"""
        return self._replace(current=value, path=paths.touch(self.path))

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.current, *args))

    def insert_left(self, item):
        """Insert item as left sibling of node without moving"""
        path = self.path
        if not path:
            raise TopLevelError("Can't insert at top")

        new = path._replace(l=(item, path.l), changed=True)
        return self._replace(path=new)

    def insert_right(self, item):
        """Insert item as right sibling of node without moving"""
        path = self.path
        if not path:
            raise TopLevelError("Can't insert at top")

        new = path._replace(r=(item, path.r), changed=True)
        return self._replace(path=new)

    def insert_child(self, item):
        """
        Inserts the item as the leftmost child of the node at this loc,
        without moving.
        """
        children = (item,) + tuple(self.children())
        return self.replace(self.shape.make_node(self.current, children))

    def append_child(self, item):
        """
        Inserts the item as the rightmost child of the node at this loc,
        without moving.
        """
        children = tuple(self.children()) + (item,)
        return self.replace(self.shape.make_node(self.current, children))

    def remove(self):
        """
        Drops the focused node and its subtree. The returned loc is the
        one a depth-first walk would have reached just before it, either
        the deepest last descendant of the left sibling or the rebuilt
        parent. In

                a
              /   \\
             b     e
             ^     ^
            c d   f g
            ^
          c1 c2

        removing c returns b and removing d returns c2.
        """
        path = self.path
        if not path:
            raise TopLevelError('Remove at top')

        l, r, pnodes, ppath, changed = path

        if l:
            current, ls = l
            return self._replace(current=current, path=path._replace(
                l=ls,
                changed=True,
            )).rightmost_descendant()

        else:
            return self._replace(
                current=self.shape.make_node(pnodes[0], paths.forward(r)),
                path=paths.touch(ppath),
            )


del _Loc


class End(namedtuple('End', ['current', 'shape'])):
    """
    The location past the last node of a depth-first walk. current holds
    the root the walk finished on.
    """

    def __repr__(self):
        return '<seqzip.End({0!r}) object at {1}>'.format(
            self.current, id(self),
        )

    def node(self):
        return self.current

    def at_end(self):
        return True

    def next(self):
        return self

    def root(self):
        return self.current

    def top(self):
        return self

    def _absent(self):
        return None

    up = down = left = right = prev = _absent

    def _self(self):
        return self

    leftmost = rightmost = _self

    def _empty(self):
        return ()

    ancestors = lefts = rights = _empty

    def _finished(self, *args):
        raise EndOfTraversal('Traversal is complete, no location to edit')

    replace = edit = insert_left = insert_right = _finished
    insert_child = append_child = remove = _finished
