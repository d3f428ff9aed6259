from jsondir.cli.parser import get_parent_parser, get_store
from jsondir.filestore import FileStore
from argparse import Namespace
import os


def test_get_parent_parser():
    parser = get_parent_parser(name='test', desc='unit test parser')

    args = parser.parse_args(args=['-v'])
    assert args.version is True

    args = parser.parse_args(args=['--version'])
    assert args.version is True

    assert args.config is None
    assert args.data_dir is None
    assert args.verbose is False

    args = parser.parse_args(args=['-c', '/etc/jsondir.yml'])
    assert args.config == '/etc/jsondir.yml'

    args = parser.parse_args(args=['--config', '/etc/jsondir.yml'])
    assert args.config == '/etc/jsondir.yml'

    args = parser.parse_args(args=['-d', '/data'])
    assert args.data_dir == '/data'

    args = parser.parse_args(args=['--data-dir', '/data', '--verbose'])
    assert args.data_dir == '/data'
    assert args.verbose is True


def test_get_store_from_data_dir(tmp_path):
    store = get_store(Namespace(config=None, data_dir=str(tmp_path / 'db')))

    assert isinstance(store, FileStore)
    assert store.root_dir == str(tmp_path / 'db')
    assert os.path.isdir(store.root_dir)


def test_get_store_from_config(tmp_path):
    config = tmp_path / 'jsondir.yml'
    config.write_text('data_dir: %s\n' % (tmp_path / 'configured'))

    store = get_store(Namespace(config=str(config), data_dir=None))
    assert store.root_dir == str(tmp_path / 'configured')

    # command line wins over the config file
    store = get_store(Namespace(config=str(config), data_dir=str(tmp_path / 'cli')))
    assert store.root_dir == str(tmp_path / 'cli')
