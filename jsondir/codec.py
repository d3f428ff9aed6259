"""
-------------
jsondir.codec
-------------

Serialization of record values to and from the on-disk JSON form.
"""
import json
from jsondir.storeapi import EncodingError, DecodingError


class RecordCodec:
    """Encodes values as indented JSON and decodes them back.

    The encoded form is human readable: every nesting level is indented with a space and a tab, and the
    document ends with a newline. Text is kept as-is (non-ASCII characters are not escaped) and encoded
    with ``encoding``.

    :param encoding: ``str``, the text encoding of the record files. Default is ``utf-8``.
    :param indent: ``str``, the indentation string for each nesting level.
    :param default: ``function``, optional, called for values that are not natively JSON serializable.
        Same meaning as the ``default`` argument of :func:`json.dumps`.
    """

    def __init__(self, encoding='utf-8', indent=' \t', default=None):
        self.encoding = encoding
        self.indent = indent
        self.default = default

    def encode(self, value):
        """Serializes the value to ``bytes``.

        Raises :class:`jsondir.storeapi.EncodingError` if the value cannot be serialized. ``NaN`` and
        infinite floats are not valid JSON and are rejected as well.
        """
        try:
            text = json.dumps(value, indent=self.indent, ensure_ascii=False,
                              allow_nan=False, default=self.default)
        except (TypeError, ValueError) as e:
            raise EncodingError('Unable to encode value: %s' % e) from e
        return (text + '\n').encode(self.encoding)

    def decode(self, data):
        """Deserializes the value from ``bytes`` (or ``str``).

        Raises :class:`jsondir.storeapi.DecodingError` on malformed input.
        """
        try:
            if isinstance(data, bytes):
                data = data.decode(self.encoding)
            return json.loads(data)
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodingError('Unable to decode record: %s' % e) from e
