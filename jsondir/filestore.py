"""
-----------------
jsondir.filestore
-----------------

File-system implementation of the Record Store.

This module provides an implementation of the :class:`jsondir.storeapi.RecordStore` that keeps every record in
its own JSON file. Each collection is a directory under the store root and each record is a file named
``<resource>.json`` inside that directory.

The store writes the records atomically, so a record file is never left half-written. The new content is first
written to a temporary file next to the record (``<resource>.json.tmp``) which is then renamed over the record
file. Writes and deletes within the same collection are serialized by a per-collection lock, while operations on
different collections run in parallel. Reads take no lock; thanks to the atomic rename they see either the old or
the new content of a record.

Here is an example of usage of the store:

.. code-block:: python

    from jsondir.filestore import open_store

    store = open_store('./db')

    store.write('users', 'john', {'name': 'John', 'age': '25'})
    store.write('users', 'jane', {'name': 'Jane', 'age': '35'})

    print(store.read('users', 'john'))

    for record in store.read_all('users'):
        print(record)

    store.delete('users', 'jane')

"""

import os
import stat
import logging
from logging import getLogger
from os.path import abspath, normpath, isdir
from jsondir.storeapi import (RecordStore,
                              RecordNotFound,
                              DecodingError,
                              StoreIOError)
from jsondir.codec import RecordCodec
from jsondir.locks import CollectionLocks
from jsondir.paths import (check_name,
                           collection_dir,
                           resolve,
                           stat_with_fallback,
                           tmp_path,
                           TMP_SUFFIX)


DIR_MODE = 0o755
FILE_MODE = 0o644


def default_logger():
    """Returns the default console logger of the store.

    This is the ``jsondir`` logger. If it has no handlers yet, a :class:`logging.StreamHandler` is attached and the
    level is set to ``INFO``.
    """
    logger = getLogger('jsondir')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


class FileStore(RecordStore):
    """An implementation of the :class:`jsondir.storeapi.RecordStore` that keeps each record in a JSON file.

    Use :func:`open_store` to create an instance; it also makes sure the root directory exists.

    The instances of this class are thread-safe and can be shared between threads.

    :param root_dir: ``str``, the root directory of the store.
    :param logger: the logger used for diagnostic messages. Any object with the methods of
        :class:`logging.Logger` will do. Defaults to :func:`default_logger`.
    :param codec: :class:`jsondir.codec.RecordCodec`, the codec used to encode and decode the records.
    """
    def __init__(self, root_dir, logger=None, codec=None):
        self.root_dir = root_dir
        self.log = logger or default_logger()
        self.codec = codec or RecordCodec()
        self.locks = CollectionLocks()
        self.existed = False

    def write(self, collection, resource, value):
        check_name(collection, 'collection')
        check_name(resource, 'resource')

        # nothing touches the disk if the value cannot be encoded
        data = self.codec.encode(value)

        with self.locks.lock_for(collection):
            coll_dir = collection_dir(self.root_dir, collection)
            record_path = resolve(self.root_dir, collection, resource)
            record_tmp = tmp_path(record_path)
            try:
                os.makedirs(coll_dir, mode=DIR_MODE, exist_ok=True)
                self._write_file(record_tmp, data)
                os.replace(record_tmp, record_path)
            except OSError as e:
                self.log.error('Failed to write %s/%s. Error: %s', collection, resource, e)
                raise StoreIOError('Unable to write record %s/%s: %s' % (collection, resource, e)) from e
            self.log.debug('Wrote %d bytes to %s', len(data), record_path)

    def _write_file(self, path, data):
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

    def read(self, collection, resource):
        check_name(collection, 'collection')
        check_name(resource, 'resource')

        record_path = resolve(self.root_dir, collection, resource)
        try:
            record_path, _ = stat_with_fallback(record_path)
        except FileNotFoundError as e:
            raise RecordNotFound('Record %s/%s not found' % (collection, resource)) from e
        except OSError as e:
            raise StoreIOError('Unable to stat record %s/%s: %s' % (collection, resource, e)) from e

        try:
            with open(record_path, 'rb') as f:
                data = f.read()
        except FileNotFoundError as e:
            # deleted after the stat
            raise RecordNotFound('Record %s/%s not found' % (collection, resource)) from e
        except OSError as e:
            raise StoreIOError('Unable to read record %s/%s: %s' % (collection, resource, e)) from e

        return self.codec.decode(data)

    def read_all(self, collection):
        """Reads all records in a collection as raw JSON text.

        The records are returned in the order of their file names. Temporary files left by writes in progress
        (or by failed writes) are skipped, as are entries that are not regular files.

        This method does not lock the collection. A record written or deleted while the collection is being
        read may or may not be included, and a record that disappears between listing the directory and
        reading it fails the whole call with :class:`jsondir.storeapi.StoreIOError`.

        :param collection: ``str``, the name of the collection.

        Returns a ``list`` of ``str``, empty if the collection does not exist.
        """
        check_name(collection, 'collection')

        coll_dir = collection_dir(self.root_dir, collection)
        if not isdir(coll_dir):
            return []

        records = []
        try:
            with os.scandir(coll_dir) as entries:
                entries = sorted(entries, key=lambda e: e.name)
            for entry in entries:
                if entry.name.endswith(TMP_SUFFIX) or not entry.is_file():
                    continue
                with open(entry.path, 'rb') as f:
                    data = f.read()
                try:
                    records.append(data.decode(self.codec.encoding))
                except UnicodeDecodeError as e:
                    raise DecodingError('Record %s in %s is not valid %s text' %
                                        (entry.name, collection, self.codec.encoding)) from e
        except OSError as e:
            self.log.error('Failed to read collection %s. Error: %s', collection, e)
            raise StoreIOError('Unable to read collection %s: %s' % (collection, e)) from e
        return records

    def delete(self, collection, resource):
        check_name(collection, 'collection')
        check_name(resource, 'resource')

        record_path = resolve(self.root_dir, collection, resource)
        with self.locks.lock_for(collection):
            try:
                mode = os.stat(record_path).st_mode
            except FileNotFoundError as e:
                raise RecordNotFound('Unable to find record %s/%s' % (collection, resource)) from e
            except OSError as e:
                raise StoreIOError('Unable to stat record %s/%s: %s' % (collection, resource, e)) from e
            if not stat.S_ISREG(mode):
                raise RecordNotFound('Unable to find record %s/%s' % (collection, resource))
            try:
                os.remove(record_path)
            except OSError as e:
                self.log.error('Failed to delete %s. Error: %s', record_path, e)
                raise StoreIOError('Unable to delete record %s/%s: %s' % (collection, resource, e)) from e
            self.log.debug('Deleted %s', record_path)

    def __repr__(self):
        return 'FileStore<%s>' % self.root_dir


def open_store(root_dir, logger=None, codec=None):
    """Opens (and creates if needed) a :class:`FileStore` rooted at ``root_dir``.

    The path is made absolute and normalized. If the directory already exists it is reused, otherwise it is
    created together with any missing parent directories.

    :param root_dir: ``str``, the root directory of the store.
    :param logger: the logger for diagnostic messages. If not given, :func:`default_logger` is used.
    :param codec: :class:`jsondir.codec.RecordCodec`, optional custom codec for the records.

    Returns the :class:`FileStore`. The ``existed`` attribute of the store tells whether the directory was
    already there. Raises :class:`jsondir.storeapi.StoreIOError` if the directory cannot be created.
    """
    root_dir = normpath(abspath(root_dir))
    store = FileStore(root_dir, logger=logger, codec=codec)

    if isdir(root_dir):
        store.log.debug("Using '%s' (database already exists)", root_dir)
        store.existed = True
        return store

    store.log.debug("Creating the database at '%s'", root_dir)
    try:
        os.makedirs(root_dir, mode=DIR_MODE)
    except OSError as e:
        raise StoreIOError('Unable to create the database at %s: %s' % (root_dir, e)) from e
    return store
