import pathlib
from contextlib import contextmanager

from _rtflex.source import FileSource, StringSource
from _rtflex.source.file_source import DEFAULT_CHUNK_SIZE
from _rtflex.tokenizer import RtfTokenizer


def configure(tokenizer, ignore=(), track=None):
    """
    Apply the ignore list and tracked control words to a tokenizer.

    :param ignore: Control words whose groups are skipped, ie. ["fonttbl"].
    :param track: Mapping from control word name to a tuple of
        (stackable, default), ie. {"uc": (True, 1)}.
    :returns: The given tokenizer.
    """
    tokenizer.ignore_compounds(ignore)
    if track is not None:
        for word, (stackable, default) in track.items():
            tokenizer.track_control_word(word, stackable, default)
    return tokenizer


@contextmanager
def lazy_tokenize(filelike, ignore=(), track=None, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Tokenize an rtf file lazily, ie.

    >>> with lazy_tokenize("/my/file.rtf", ignore=["fonttbl"]) as tokens:
    ...     for token in tokens:
    ...         print(token.kind, token.value)

    :param filelike: Either the path to an rtf file or a seekable
        stream opened in binary mode.
    :param ignore: See configure.
    :param track: See configure.
    :param chunk_size: The number of bytes held in memory at a time.
    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        tokenizer = configure(
            RtfTokenizer(FileSource(file_stream, chunk_size=chunk_size)),
            ignore,
            track,
        )
        yield iter(tokenizer)
    finally:
        if did_open:
            file_stream.close()


def tokenize(filelike, ignore=(), track=None, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Reads an rtf file and returns the list of all its tokens,
    see lazy_tokenize.
    """
    with lazy_tokenize(filelike, ignore, track, chunk_size) as tokens:
        return list(tokens)


def tokenize_string(contents, ignore=(), track=None):
    """
    Returns the list of tokens for rtf content given as str or bytes,
    ie. tokenize_string("{\\\\rtf1 Hello}").
    """
    tokenizer = configure(RtfTokenizer(StringSource(contents)), ignore, track)
    return list(tokenizer)
