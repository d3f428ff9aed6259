"""
----------------
jsondir.storeapi
----------------

Record Store API
^^^^^^^^^^^^^^^^

Defines classes, methods and exceptions to be used when implementing a Record Store.
"""
from abc import abstractmethod


class RecordStore:
    """RecordStore is the basic interface for interaction with stored records.

    Records are grouped in named collections. Each record is addressed by the pair
    (``collection``, ``resource``) and holds an opaque, JSON-serializable value.
    An instance of this class is thread-safe.
    """
    @abstractmethod
    def write(self, collection, resource, value):
        """Saves a record in the underlying storage.

        This method is guaranteed to be atomic in the sense that the storage will
        either succeed to write the whole record, or it will fail completely. In
        either case the previously stored record (if any) stays readable.

        :param collection: ``str``, the name of the collection.
        :param resource: ``str``, the name of the record within the collection.
        :param value: the value to store. Must be serializable by the store codec.

        This method does not return any value.
        """
        pass

    @abstractmethod
    def read(self, collection, resource):
        """Looks up a record by its collection and resource name.

        * if the record is found, returns the decoded value
        * if the record is not found, raises :class:`RecordNotFound`.

        :param collection: ``str``, the name of the collection.
        :param resource: ``str``, the name of the record within the collection.
        """
        pass

    @abstractmethod
    def read_all(self, collection):
        """Reads all records in a collection as raw JSON text.

        :param collection: ``str``, the name of the collection.

        Returns a ``list`` of ``str``. A collection that does not exist yields an
        empty list.
        """
        pass

    @abstractmethod
    def delete(self, collection, resource):
        """Deletes a record from the storage.

        :param collection: ``str``, the name of the collection.
        :param resource: ``str``, the name of the record to remove.

        Raises :class:`RecordNotFound` if there is no such record.
        """
        pass


class StoreException(Exception):
    """General store error.
    """
    pass


class InvalidArgument(StoreException, ValueError):
    """Raised when a collection or resource name is empty or not usable as a file name.
    """
    pass


class RecordNotFound(StoreException):
    """Raised if there is no record found in the underlying storage.
    """
    pass


class EncodingError(StoreException):
    """Raised when a value cannot be serialized to JSON.
    """
    pass


class DecodingError(StoreException):
    """Raised when a stored record does not contain valid JSON.
    """
    pass


class StoreIOError(StoreException):
    """Represents a file-system error while reading or writing the underlying storage.
    """
    pass
