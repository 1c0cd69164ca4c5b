# Function forms of the Loc methods. Each returns whatever the method
# does: a new location, None when the move is impossible, or raises on
# misuse.

from operator import methodcaller

from ._lib.zipper import seq_zip as create

__all__ = [
    'create', 'node', 'is_branch', 'children', 'path', 'lefts', 'rights',
    'is_end', 'down', 'up', 'left', 'right', 'leftmost', 'rightmost',
    'next', 'prev', 'root', 'replace', 'edit', 'insert_left',
    'insert_right', 'insert_child', 'append_child', 'remove',
]

node = methodcaller('node')
is_branch = methodcaller('branch')
children = methodcaller('children')
path = methodcaller('ancestors')
lefts = methodcaller('lefts')
rights = methodcaller('rights')
is_end = methodcaller('at_end')

down = methodcaller('down')
up = methodcaller('up')
left = methodcaller('left')
right = methodcaller('right')
leftmost = methodcaller('leftmost')
rightmost = methodcaller('rightmost')
next = methodcaller('next')
prev = methodcaller('prev')
root = methodcaller('root')
remove = methodcaller('remove')


def replace(loc, node):
    return loc.replace(node)


def edit(loc, f, *args):
    return loc.edit(f, *args)


def insert_left(loc, item):
    return loc.insert_left(item)


def insert_right(loc, item):
    return loc.insert_right(item)


def insert_child(loc, item):
    return loc.insert_child(item)


def append_child(loc, item):
    return loc.append_child(item)
