# -*- coding: utf-8 -*-
"""
Environment Variables:

  SEQZIP_INDENT : JSON indentation used when printing trees, 0 or empty
    prints compact JSON. Ignored when a .seqzip.json file is present.

  SEQZIP_SORT_KEYS : Set to 1 to sort object keys in printed JSON.

Trees are read as JSON, arrays are branches and everything else is a
leaf.

Moves:

  d down, u up, l left, r right, L leftmost, R rightmost,
  n next (depth-first), p prev (depth-first)

Examples:

  Given tree.json containing [1, [2, 3], 4]

  List every node depth-first:

    $ seqzip walk tree.json

  Look at the node 2:

    $ seqzip show tree.json -m drd

  Insert 3.5 after 2 and print the new tree:

    $ seqzip edit tree.json -m drd --insert-right 3.5

  Remove 4:

    $ seqzip edit tree.json -m drr --remove

"""
import argparse
import json
import os
import sys

from .exceptions import MoveError, ZipperError
from .zipper import seq_zip

MOVES = {
    'd': 'down',
    'u': 'up',
    'l': 'left',
    'r': 'right',
    'L': 'leftmost',
    'R': 'rightmost',
    'n': 'next',
    'p': 'prev',
}

EDITS = [
    'replace', 'insert_left', 'insert_right', 'insert_child',
    'append_child',
]


def argparser():
    desc = 'Navigate and edit nested JSON arrays with a zipper'
    parser = argparse.ArgumentParser(
        description=desc,
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--dump-file',
        help='Save raw events to json to FILE, Useful for debugging',
        type=argparse.FileType('w'),
    )
    parser.add_argument(
        '--indent',
        type=int,
        help="Override SEQZIP_INDENT if it's set in the environment.",
    )

    subparsers = parser.add_subparsers(help='sub-command help', dest='command')
    subparsers.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        'file',
        help='JSON file holding the tree, - reads stdin',
        type=argparse.FileType('r'),
    )

    moving = argparse.ArgumentParser(add_help=False)
    moving.add_argument(
        '-m', '--moves',
        default='',
        help='Moves to replay from the root before acting, eg. drd',
    )

    subparsers.add_parser(
        'walk', help='lists nodes depth-first', parents=[common],
    )

    subparsers.add_parser(
        'show', help='shows the location reached by MOVES',
        parents=[common, moving],
    )

    edit = subparsers.add_parser(
        'edit', help='edits the location reached by MOVES',
        parents=[common, moving],
    )
    action = edit.add_mutually_exclusive_group(required=True)
    for name in EDITS:
        action.add_argument(
            '--' + name.replace('_', '-'),
            dest=name,
            metavar='JSON',
            type=json_value,
            default=argparse.SUPPRESS,
        )
    action.add_argument('--remove', action='store_true')

    return parser


def json_value(text):
    try:
        return json.loads(text)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid JSON: {0!r}'.format(text))


def main():
    arguments = argparser().parse_args()
    return run(
        path=os.getcwd(),
        arguments=arguments,
        environ=os.environ,
    )


def load_config(path, arguments, environ):
    config_path = os.path.join(path, '.seqzip.json')
    try:
        with open(config_path) as f:
            config = json.load(f)
    except ValueError as e:
        return exit('Invalid JSON in {0}: {1}'.format(config_path, e))
    except IOError:
        config = {
            'indent': environ.get('SEQZIP_INDENT', '2'),
            'sort_keys': environ.get('SEQZIP_SORT_KEYS', '') == '1',
        }

    if not isinstance(config, dict):
        return exit('{0} must hold a JSON object.'.format(config_path))

    if arguments.indent is not None:
        config['indent'] = arguments.indent

    indent = config.get('indent', 2) or None
    if indent is not None:
        try:
            indent = int(indent)
        except (TypeError, ValueError):
            exit('Invalid indent {0!r}, expected a number.'.format(indent))

    return {
        'indent': indent or None,
        'sort_keys': bool(config.get('sort_keys', False)),
    }


def replay(loc, moves):
    """
    Applies each move in turn, raising MoveError as soon as one of them
    has nowhere to go.

    >>> replay(seq_zip([1, [2, 3]]), 'drd').node()
    2
    >>> replay(seq_zip([1]), 'dr')
    Traceback (most recent call last):
        ...
    seqzip._lib.exceptions.MoveError: Can't move 'r' at step 2
    """
    for i, move in enumerate(moves, 1):
        try:
            method = MOVES[move]
        except KeyError:
            raise MoveError(move, i)
        loc = getattr(loc, method)()
        if loc is None:
            raise MoveError(move, i)
    return loc


def walk(tree):
    for loc in seq_zip(tree).preorder_iter():
        yield {
            'event': 'visit',
            'depth': loc.depth(),
            'branch': loc.branch(),
            'node': loc.node(),
        }


def show(tree, moves):
    loc = replay(seq_zip(tree), moves)
    if loc.at_end():
        yield {'event': 'end', 'node': loc.node()}
        return
    yield {
        'event': 'location',
        'node': loc.node(),
        'lefts': list(loc.lefts()),
        'rights': list(loc.rights()),
        'ancestors': list(loc.ancestors()),
    }


def edit(tree, moves, arguments):
    loc = replay(seq_zip(tree), moves)
    if arguments.remove:
        loc = loc.remove()
        yield {'event': 'focus', 'node': loc.node()}
    else:
        for name in EDITS:
            if hasattr(arguments, name):
                loc = getattr(loc, name)(getattr(arguments, name))
                break
    yield {'event': 'root', 'node': loc.root()}


def events(command, tree, arguments):
    try:
        if command == 'walk':
            for evt in walk(tree):
                yield evt
        elif command == 'show':
            for evt in show(tree, arguments.moves):
                yield evt
        else:
            for evt in edit(tree, arguments.moves, arguments):
                yield evt
    except ZipperError as e:
        yield {
            'event': 'error',
            'error': type(e).__name__,
            'errorDetail': {'message': str(e)},
        }


def run(path, arguments, environ):
    config = load_config(path, arguments, environ)

    try:
        tree = json.load(arguments.file)
    except ValueError as e:
        return exit('Invalid JSON in {0}: {1}'.format(arguments.file.name, e))

    dump_file = arguments.dump_file
    errors = []

    for event in events(arguments.command, tree, arguments):
        if dump_file:
            json.dump(event, dump_file)
            dump_file.write('\n')
        if 'error' in event:
            errors.append(event)
            continue
        msg = switch(event, config)
        if msg is not None:
            print(msg)

    if errors:
        print('The following errors occurred:', file=sys.stdout)
        for error in errors:
            print(switch(error, config), file=sys.stdout)
        sys.exit(1)


def exit(msg):
    print(msg)
    sys.exit(1)


def dumps(node, config):
    return json.dumps(
        node, indent=config['indent'], sort_keys=config['sort_keys'],
    )


def switch(rec, config):

    if 'error' in rec:
        return '[ERROR] {0}'.format(rec['errorDetail']['message'])
    elif rec['event'] == 'visit':
        node = '[...]' if rec['branch'] else json.dumps(rec['node'])
        return '  ' * rec['depth'] + node
    elif rec['event'] == 'location':
        lines = ['node: ' + json.dumps(rec['node'])]
        for key in ('lefts', 'rights', 'ancestors'):
            lines.append('{0}: {1}'.format(key, json.dumps(rec[key])))
        return '\n'.join(lines)
    elif rec['event'] == 'focus':
        return '[FOCUS] ' + json.dumps(rec['node'])
    elif rec['event'] in ('root', 'end'):
        return dumps(rec['node'], config)
    else:
        return json.dumps(rec)
