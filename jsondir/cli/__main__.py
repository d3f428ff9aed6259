import logging
import sys
from jsondir.cli.parser import get_parent_parser
from jsondir.cli.write import get_parser as get_write_parser, run_write
from jsondir.cli.read import (get_parser as get_read_parser,
                              get_read_all_parser,
                              run_read,
                              run_read_all)
from jsondir.cli.delete import get_parser as get_delete_parser, run_delete
from jsondir.config import load_config, ConfigError
from jsondir.storeapi import StoreException

parser = get_parent_parser('jsondir', 'jsondir CLI')

subparsers = parser.add_subparsers(dest='command', title='command', help='CLI commands')
get_write_parser(subparsers)
get_read_parser(subparsers)
get_read_all_parser(subparsers)
get_delete_parser(subparsers)

args = parser.parse_args()

if args.version:
    from jsondir.metadata import version
    print('jsondir', version)
    sys.exit(0)

commands = {
    'write': run_write,
    'read': run_read,
    'read-all': run_read_all,
    'delete': run_delete,
}

try:
    level = 'DEBUG' if args.verbose else load_config(args.config)['log_level']
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.command in commands:
        commands[args.command](args)
    else:
        parser.print_help()
except (StoreException, ConfigError) as e:
    print('jsondir: error:', e, file=sys.stderr)
    sys.exit(1)
