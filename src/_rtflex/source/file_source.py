import io

from _rtflex.source.abstract_source import AbstractSource
from _rtflex.source.common import first_of
from _rtflex.tokenizer.errors import SourceError, WrongStreamModeError

DEFAULT_CHUNK_SIZE = 65536


class FileSource(AbstractSource):
    """
    Source for rtf content in a seekable binary file.

    Only a window of chunk_size bytes is kept in memory. The window is
    refilled from the stream whenever an index outside of it is queried.
    Errors from the stream are raised as SourceError.
    """

    def __init__(self, stream, chunk_size=DEFAULT_CHUNK_SIZE):
        """
        :param stream: A seekable byte stream containing rtf data.
        :param chunk_size: The number of bytes read into the window at a time.
        """
        if isinstance(stream, io.TextIOBase):
            raise WrongStreamModeError(
                "rtf content has to be read from a stream opened in binary mode"
            )
        if chunk_size < 1:
            raise ValueError(f"chunk_size has to be positive, got {chunk_size}")
        self._stream = stream
        self.chunk_size = chunk_size
        self._window = b""
        self._window_start = 0
        self._length = self._measure()

    @property
    def stream(self):
        return self._stream

    def length(self):
        return self._length

    def at(self, index):
        if not 0 <= index < self._length:
            return None
        self._load(index)
        return chr(self._window[index - self._window_start])

    def slice(self, start, length):
        if start < 0 or length <= 0 or start >= self._length:
            return b""
        length = min(length, self._length - start)
        if length > self.chunk_size:
            return self._read(start, length)
        if not (self._in_window(start) and self._in_window(start + length - 1)):
            self._load(start, force=True)
        offset = start - self._window_start
        return self._window[offset : offset + length]

    def find_first_of(self, charset, start):
        position = max(start, 0)
        while position < self._length:
            self._load(position)
            hit = first_of(self._window, charset, position - self._window_start)
            if hit is not None:
                return self._window_start + hit
            position = self._window_start + len(self._window)
        return None

    def _in_window(self, index):
        return self._window_start <= index < self._window_start + len(self._window)

    def _load(self, index, force=False):
        """
        Make sure the window contains index by reading a chunk
        starting at index.
        """
        if not force and self._in_window(index):
            return
        window = self._read(index, self.chunk_size)
        if not window:
            raise SourceError(f"Unexpected end of rtf content at {index}")
        self._window = window
        self._window_start = index

    def _read(self, start, length):
        try:
            self._stream.seek(start)
            return self._stream.read(length)
        except (OSError, ValueError) as err:
            raise SourceError(f"Could not read rtf content at {start}: {err}") from err

    def _measure(self):
        try:
            length = self._stream.seek(0, io.SEEK_END)
            self._stream.seek(0)
        except (OSError, ValueError) as err:
            raise SourceError(
                f"Could not determine length of rtf content: {err}"
            ) from err
        return length

    def __repr__(self):
        return f"FileSource({self._stream!r}, chunk_size={self.chunk_size})"
