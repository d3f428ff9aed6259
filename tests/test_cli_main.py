from unittest import mock
import jsondir.cli.write
import jsondir.cli.read
import jsondir.cli.delete
import sys
import io
from jsondir.metadata import version
from jsondir.storeapi import RecordNotFound
import logging
import importlib


def _run_main(argv):
    if 'jsondir.cli.__main__' in sys.modules:
        del sys.modules['jsondir.cli.__main__']
    with mock.patch.object(sys, 'argv', argv):
        importlib.import_module('jsondir.cli.__main__')


@mock.patch.object(sys, 'exit')
@mock.patch('sys.stdout', new_callable=io.StringIO)
def test_cli_main_version(fake_out, m_exit):
    m_exit.side_effect = Exception('EXIT')
    try:
        _run_main(['jsondir', '-v'])
    except Exception as e:
        assert str(e) == 'EXIT'

    assert fake_out.getvalue() == 'jsondir %s\n' % version
    m_exit.assert_called_once_with(0)


@mock.patch('sys.stdout', new_callable=io.StringIO)
@mock.patch.object(logging, 'basicConfig')
def test_cli_main_verbose(m_basicConfig, fake_out):
    _run_main(['jsondir', '--verbose'])

    assert m_basicConfig.call_count == 1
    assert m_basicConfig.call_args[1]['level'] == 'DEBUG'
    assert 'usage' in fake_out.getvalue()


@mock.patch.object(logging, 'basicConfig')
@mock.patch.object(jsondir.cli.write, 'run_write')
def test_cli_main_command_write(m_run_write, m_basicConfig):
    _run_main(['jsondir', 'write', 'users', 'john', '{}'])

    assert m_run_write.call_count == 1
    args = m_run_write.call_args[0][0]
    assert args.collection == 'users'
    assert args.resource == 'john'
    assert m_basicConfig.call_args[1]['level'] == 'INFO'


@mock.patch.object(logging, 'basicConfig')
@mock.patch.object(jsondir.cli.read, 'run_read')
@mock.patch.object(jsondir.cli.read, 'run_read_all')
def test_cli_main_command_read(m_run_read_all, m_run_read, m_basicConfig):
    _run_main(['jsondir', 'read', 'users', 'john'])
    assert m_run_read.call_count == 1

    _run_main(['jsondir', 'read-all', 'users'])
    assert m_run_read_all.call_count == 1


@mock.patch.object(logging, 'basicConfig')
@mock.patch.object(jsondir.cli.delete, 'run_delete')
def test_cli_main_command_delete(m_run_delete, m_basicConfig):
    _run_main(['jsondir', 'delete', 'users', 'john'])

    assert m_run_delete.call_count == 1


@mock.patch.object(sys, 'exit')
@mock.patch('sys.stderr', new_callable=io.StringIO)
@mock.patch.object(logging, 'basicConfig')
@mock.patch.object(jsondir.cli.delete, 'run_delete')
def test_cli_main_store_error(m_run_delete, m_basicConfig, fake_err, m_exit):
    m_run_delete.side_effect = RecordNotFound('Unable to find record users/john')

    _run_main(['jsondir', 'delete', 'users', 'john'])

    m_exit.assert_called_once_with(1)
    assert 'Unable to find record users/john' in fake_err.getvalue()
