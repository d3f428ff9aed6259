"""
----------------
jsondir.cli.read
----------------

Commands that read records: ``read`` and ``read-all``.
"""
import json
import sys
from jsondir.cli.parser import get_store


def get_parser(subparsers):
    """Configures the subparser for the ``read`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``read`` command.
    """
    parser = subparsers.add_parser('read', help='Read a record')

    parser.add_argument('collection', help='Collection name')
    parser.add_argument('resource', help='Record name')

    return parser


def get_read_all_parser(subparsers):
    """Configures the subparser for the ``read-all`` command.
    """
    parser = subparsers.add_parser('read-all', help='Read all records in a collection')

    parser.add_argument('collection', help='Collection name')

    return parser


def run_read(args):
    """Prints a single record as indented JSON.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    store = get_store(args)
    value = store.read(args.collection, args.resource)
    print(json.dumps(value, indent=2, ensure_ascii=False))


def run_read_all(args):
    """Prints the raw JSON text of every record in a collection.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    store = get_store(args)
    for record in store.read_all(args.collection):
        sys.stdout.write(record)
