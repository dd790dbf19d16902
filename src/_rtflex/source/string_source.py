from _rtflex.source.abstract_source import AbstractSource
from _rtflex.source.common import ENCODING, first_of


class StringSource(AbstractSource):
    """
    Source for rtf content held in memory.

    >>> source = StringSource("{\\\\rtf1 Hello}")
    >>> source.find_first_of("}", 0)
    12
    """

    def __init__(self, contents):
        """
        :param contents: The rtf content, either as bytes or as a str
            containing only characters in the latin-1 range.
        """
        if isinstance(contents, str):
            try:
                contents = contents.encode(ENCODING)
            except UnicodeEncodeError as err:
                raise ValueError(
                    f"rtf content must be {ENCODING} encodable, got {err}"
                ) from err
        self._buffer = bytes(contents)

    def length(self):
        return len(self._buffer)

    def at(self, index):
        if 0 <= index < len(self._buffer):
            return chr(self._buffer[index])
        return None

    def slice(self, start, length):
        if start < 0 or length <= 0:
            return b""
        return self._buffer[start : start + length]

    def find_first_of(self, charset, start):
        return first_of(self._buffer, charset, max(start, 0))

    def __repr__(self):
        return f"StringSource(<{len(self._buffer)} bytes>)"
