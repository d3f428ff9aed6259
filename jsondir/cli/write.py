"""
-----------------
jsondir.cli.write
-----------------

Command that writes a record.
"""
import json
import sys
from jsondir.storeapi import InvalidArgument
from jsondir.cli.parser import get_store


def get_parser(subparsers):
    """Configures the subparser for the ``write`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``write`` command.
    """
    parser = subparsers.add_parser('write', help='Write a record')

    parser.add_argument('collection', help='Collection name')
    parser.add_argument('resource', help='Record name')
    parser.add_argument('value', nargs='?', default=None,
                        help='Record value as JSON text. Read from stdin if omitted.')

    return parser


def run_write(args):
    """Writes the record given on the command line.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    text = args.value if args.value is not None else sys.stdin.read()
    try:
        value = json.loads(text)
    except ValueError as e:
        raise InvalidArgument('The value is not valid JSON: %s' % e) from e

    store = get_store(args)
    store.write(args.collection, args.resource, value)
