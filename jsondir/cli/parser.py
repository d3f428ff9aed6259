"""
------------------
jsondir.cli.parser
------------------


jsondir CLI main :mod:`argparse` parser.
"""
import argparse
from logging import getLogger
from jsondir.config import load_config
from jsondir.filestore import open_store


def get_parent_parser(name, desc=''):
    """Creates the main (parent) :class:`argparse.ArgumentParser` for jsondir CLI.

    Defines the main argument options such as the config file, the data directory,
    verbosity level etc.

    :param str name: the name of the program.
    :param str desc: program description.

    Returns the configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(prog=name, description=desc)

    parser.add_argument('-v', '--version',
                        help='Print program version and exit', action='store_true')
    parser.add_argument('-c', '--config', dest='config', default=None,
                        help='YAML configuration file')
    parser.add_argument('-d', '--data-dir', dest='data_dir', default=None,
                        help='Database root directory (overrides the config file)')

    parser.add_argument('--verbose', dest='verbose', action='store_true',
                        help='Verbose output.')

    return parser


def get_store(args):
    """Opens the :class:`jsondir.filestore.FileStore` configured by the arguments.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    config = load_config(args.config)
    data_dir = args.data_dir or config['data_dir']
    return open_store(data_dir, logger=getLogger('jsondir.filestore'))
