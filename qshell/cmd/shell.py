import argparse
import sys

from qshell import __version__
from qshell.client.interactive import InteractiveClient
from qshell.client.line_source import StreamLineSource
from qshell.entrance import BuiltinCommandHandler
from qshell.initializer import init_all_components
from qshell.errno.errors import FatalError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='qshell',
        description='Interactive client reading semicolon-terminated statements.')
    parser.add_argument('-c', '--config', metavar='FILE',
                        help='ini file with a [qshell] section of property values')
    parser.add_argument('-f', '--file', metavar='FILE',
                        help='read statements from FILE instead of standard input')
    parser.add_argument('--save-config', metavar='FILE',
                        help='write the property values to FILE when the session ends')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        registry = init_all_components(args.config)
    except FatalError as e:
        print(f'qshell: {e.msg}', file=sys.stderr)
        return 1
    handler = BuiltinCommandHandler(registry)

    if args.file:
        with open(args.file, 'r') as fp:
            InteractiveClient(handler, StreamLineSource(fp), properties=registry).run()
    else:
        InteractiveClient(handler, StreamLineSource(sys.stdin), properties=registry).run()
    if args.save_config:
        registry.save_file(args.save_config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
