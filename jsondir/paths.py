"""
-------------
jsondir.paths
-------------

Maps (collection, resource) pairs to files under the store root.

The layout is ``<root>/<collection>/<resource>.json``.
"""
import os
from os.path import join as join_paths
from jsondir.storeapi import InvalidArgument


RECORD_SUFFIX = '.json'
TMP_SUFFIX = '.tmp'


def check_name(name, kind):
    """Validates a collection or resource name.

    The name must be a non-empty string that names a single directory entry, so
    it cannot be ``.`` or ``..`` and cannot contain a path separator or a NUL byte.

    :param name: ``str``, the name to check.
    :param kind: ``str``, what the name is for (``'collection'`` or ``'resource'``), used
        in the error message.

    Raises :class:`jsondir.storeapi.InvalidArgument` if the name is not valid.
    """
    if not name:
        raise InvalidArgument('Missing %s name' % kind)
    if not isinstance(name, str):
        raise InvalidArgument('The %s name must be a string, got %s' % (kind, type(name).__name__))
    if name in ('.', '..'):
        raise InvalidArgument('Invalid %s name: %r' % (kind, name))
    separators = {'/', os.sep, os.altsep, '\0'} - {None}
    for sep in separators:
        if sep in name:
            raise InvalidArgument('Invalid %s name %r: must not contain %r' % (kind, name, sep))


def collection_dir(root, collection):
    """Returns the directory that holds the records of the collection."""
    return join_paths(root, collection)


def resolve(root, collection, resource):
    """Resolves the path of the record file for ``resource`` in ``collection``.

    The ``.json`` suffix is always appended to the resource name.
    """
    return join_paths(root, collection, resource + RECORD_SUFFIX)


def tmp_path(record_path):
    """Returns the path of the temporary file used while writing ``record_path``."""
    return record_path + TMP_SUFFIX


def stat_with_fallback(path):
    """Stats ``path``, retrying with a ``.json`` suffix if it does not exist.

    Returns a tuple ``(path, stat_result)`` with the path that was found.

    Raises :class:`FileNotFoundError` if neither path exists.
    """
    try:
        return path, os.stat(path)
    except FileNotFoundError:
        path = path + RECORD_SUFFIX
        return path, os.stat(path)
