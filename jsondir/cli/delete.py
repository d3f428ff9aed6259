"""
------------------
jsondir.cli.delete
------------------

Command that deletes a record.
"""
from jsondir.cli.parser import get_store


def get_parser(subparsers):
    """Configures the subparser for the ``delete`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``delete`` command.
    """
    parser = subparsers.add_parser('delete', help='Delete a record')

    parser.add_argument('collection', help='Collection name')
    parser.add_argument('resource', help='Record name')

    return parser


def run_delete(args):
    """Deletes the record.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    store = get_store(args)
    store.delete(args.collection, args.resource)
