import io

import pytest

from _rtflex.source import FileSource, StringSource
from _rtflex.tokenizer import RtfTokenizer
from _rtflex.tokenizer.errors import SourceError, WrongStreamModeError


@pytest.fixture(params=["string", "file", "file_small_chunks"])
def make_source(request):
    def make_string_source(contents):
        return StringSource(contents)

    def make_file_source(contents):
        return FileSource(io.BytesIO(contents))

    def make_chunked_file_source(contents):
        return FileSource(io.BytesIO(contents), chunk_size=2)

    return {
        "string": make_string_source,
        "file": make_file_source,
        "file_small_chunks": make_chunked_file_source,
    }[request.param]


def test_length(make_source):
    assert make_source(b"{\\rtf1}").length() == 7
    assert len(make_source(b"")) == 0


def test_at(make_source):
    source = make_source(b"ab\xe9")
    assert source.at(0) == "a"
    assert source.at(2) == "\xe9"
    assert source.at(3) is None
    assert source.at(100) is None
    assert source.at(-1) is None


def test_slice(make_source):
    source = make_source(b"0123456789")
    assert source.slice(2, 3) == b"234"
    assert source.slice(8, 5) == b"89"
    assert source.slice(0, 10) == b"0123456789"
    assert source.slice(10, 1) == b""
    assert source.slice(3, 0) == b""
    assert source.slice(-1, 2) == b""


def test_text(make_source):
    assert make_source(b"caf\xe9!").text(0, 4) == "café"


def test_find_first_of(make_source):
    source = make_source(b"Hello {world}")
    assert source.find_first_of("{}", 0) == 6
    assert source.find_first_of("{}", 7) == 12
    assert source.find_first_of(b"}", 0) == 12
    assert source.find_first_of("\\", 0) is None
    assert source.find_first_of("{}", 13) is None
    assert source.find_first_of("{}", 100) is None
    assert source.find_first_of("H", -5) == 0


def test_find_first_of_far_ahead(make_source):
    source = make_source(b"a" * 10000 + b";")
    assert source.find_first_of(";", 0) == 10000


def test_find_first_of_pattern_characters(make_source):
    source = make_source(b"ab-c^d]e\\f")
    assert source.find_first_of("^]", 0) == 4
    assert source.find_first_of("-", 0) == 2
    assert source.find_first_of("]-", 3) == 6
    assert source.find_first_of("\\", 0) == 8
    assert source.find_first_of("^", 5) is None


def test_find_first_of_reads_window_once():
    class CountingStream(io.BytesIO):
        reads = 0

        def read(self, size=-1):
            self.reads += 1
            return super().read(size)

    stream = CountingStream(b"{\\b bold} plain \\par\n" * 100)
    source = FileSource(stream, chunk_size=4096)
    index = source.find_first_of("\\", 0)
    while index is not None:
        index = source.find_first_of("\\", index + 1)
    assert stream.reads == 1


def test_tokenize_large_file():
    contents = b"{\\b bold} plain \\par\n" * 20000
    tokens = list(RtfTokenizer(FileSource(io.BytesIO(contents))))
    assert len(tokens) == 140000
    assert tokens[-1].end == len(contents)


@pytest.mark.parametrize(
    "contents, start, expected",
    [
        (b"abc}", 0, 3),
        (b"a{b}c}d", 0, 5),
        (b"a{b{c}}}", 0, 7),
        (b"a\\}b}", 0, 4),
        (b"a\\{b}", 0, 4),
        (b"a\\\\}", 0, 3),
        (b"{\\fonttbl{\\f0 Arial;}}x", 9, 21),
        (b"a{b}", 0, None),
        (b"abc", 0, None),
        (b"a\\", 0, None),
    ],
)
def test_find_matching_close_delimiter(make_source, contents, start, expected):
    assert make_source(contents).find_matching_close_delimiter(start) == expected


def test_string_source_from_str():
    source = StringSource("{\\rtf1 café}")
    assert source.slice(7, 4) == "café".encode("latin-1")


def test_string_source_rejects_non_latin1():
    with pytest.raises(ValueError, match="latin-1"):
        StringSource("☃")


def test_file_source_rejects_text_stream():
    with pytest.raises(WrongStreamModeError):
        FileSource(io.StringIO("{\\rtf1}"))


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_file_source_rejects_chunk_size(chunk_size):
    with pytest.raises(ValueError, match="chunk_size"):
        FileSource(io.BytesIO(b""), chunk_size=chunk_size)


def test_file_source_large_slice():
    source = FileSource(io.BytesIO(bytes(range(256))), chunk_size=16)
    assert source.slice(10, 100) == bytes(range(10, 110))
    assert source.at(200) == chr(200)


def test_file_source_closed_stream():
    stream = io.BytesIO(b"{\\rtf1}")
    source = FileSource(stream, chunk_size=2)
    stream.close()
    with pytest.raises(SourceError, match="Could not read"):
        source.at(5)


def test_file_source_unmeasurable_stream():
    stream = io.BytesIO(b"")
    stream.close()
    with pytest.raises(SourceError, match="length"):
        FileSource(stream)


def test_file_source_truncated_stream():
    class ShrinkingStream(io.BytesIO):
        def read(self, size=-1):
            return b""

    source = FileSource(ShrinkingStream(b"{\\rtf1}"))
    with pytest.raises(SourceError, match="Unexpected end"):
        source.find_first_of("}", 0)


def test_source_error_propagates_from_tokenizer():
    stream = io.BytesIO(b"{\\b bold text}")
    tokenizer = RtfTokenizer(FileSource(stream, chunk_size=2))
    assert tokenizer.next_token().text == "{"
    stream.close()
    with pytest.raises(SourceError):
        tokenizer.next_token()
