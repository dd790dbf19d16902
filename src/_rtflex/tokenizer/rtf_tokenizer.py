import warnings

from _rtflex.tokenizer.control_word_table import ControlWordTable
from _rtflex.tokenizer.position import PositionTracker
from _rtflex.tokenizer.token import Token
from _rtflex.tokenizer.token_kind import TokenKind

# Tracked by default, switch data extraction to hex
# and binary mode respectively.
PICTURE_WORD = "pict"
BINARY_WORD = "bin"

# Characters ending the name and parameter of a control word
CONTROL_WORD_DELIMITERS = "{}\\ \r\n;"

# Characters ending a run of text or hex data
DATA_DELIMITERS = "{}\\"

# Returned by _raw_next when an ignored compound was skipped
_SKIPPED = object()


def is_control_word_start(char):
    return char.isascii() and char.isalpha()


class RtfTokenizer:
    """
    Tokenizer for rtf content given by a source (see _rtflex.source).

    Tokens are pulled one at a time with next_token(), or by iterating
    over the tokenizer:

    >>> tokenizer = RtfTokenizer(StringSource("{\\\\b bold}"))
    >>> [t.kind.name for t in tokenizer]
    ['LEFT_BRACE', 'CONTROL_WORD', 'PCDATA', 'RIGHT_BRACE']

    Data between control words is extracted as text (PCDATA), unless a
    tracked control word is live at the current nesting level: after
    "\\pict" data is extracted as hex (SDATA) and after "\\binN" exactly N
    bytes are extracted as binary data (BDATA).

    The tokenizer keeps mutable state and is not safe to share between
    threads.
    """

    def __init__(self, source):
        """
        :param source: The AbstractSource with the rtf content.
        """
        self._source = source
        self._position = PositionTracker()
        self._table = ControlWordTable(self._position)
        self._ignored = frozenset()
        self.reset()

    @property
    def source(self):
        return self._source

    @property
    def offset(self):
        return self._position.offset

    @property
    def line(self):
        return self._position.line

    @property
    def column(self):
        return self._position.column

    @property
    def nesting_level(self):
        return self._position.nesting_level

    @property
    def ignored_compounds(self):
        return self._ignored

    @property
    def tracked_control_words(self):
        return self._table

    def reset(self):
        """
        Move back to the start of the content and forget all tracked
        control words except the default "pict" and "bin" words.
        """
        self._position.reset()
        self._table.clear()
        self._table.track(PICTURE_WORD, stackable=False)
        self._table.track(BINARY_WORD, stackable=False)

    def track_control_word(self, word, stackable, default=None):
        """
        Track the values of the given control word, see ControlWordTable.track.

        :param word: The name of the control word, without backslash.
        :param stackable: Whether the value is scoped by nesting level.
        :param default: The value at the current nesting level, or None.
        """
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"control word names are alphabetic, got {word!r}")
        self._table.track(word, stackable, default)

    def ignore_compounds(self, words):
        """
        Set the control words whose groups are skipped without generating
        tokens, ie. ignore_compounds(["fonttbl"]) skips the font table.
        """
        if isinstance(words, str):
            words = [words]
        self._ignored = frozenset(words)

    def control_word_value(self, word, default=None):
        """
        :returns: The value of the tracked control word in the current scope,
            or default. See ControlWordTable.value_of.
        """
        return self._table.value_of(word, default)

    def skip_compound(self):
        """
        Skip to after the closing brace of the group that is currently open.
        The skipped content is counted for line and column, and the nesting
        level is decremented by one.

        Note: this must be called once for a group, directly after reading
        the opening brace and control word of the group, and before any
        other token of the group has been read. The nesting level is
        decremented by exactly one regardless of how the group was entered.
        """
        start = self._position.offset
        end = self._source.find_matching_close_delimiter(start)
        if end is None:
            end = self._source.length()
            warnings.warn(
                f"Skipped group starting at {start} is not closed before "
                "the end of the content."
            )
            self._position.offset = end
        else:
            self._position.offset = end + 1
        self._position.advance_by_literal(self._source.text(start, end - start))
        self._position.leave_brace()

    def next_token(self):
        """
        :returns: The next token, or None at the end of the content.
        """
        token = self._raw_next()
        while token is _SKIPPED:
            token = self._raw_next()
        return token

    def __iter__(self):
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def _raw_next(self):
        start = self._position.offset
        if start >= self._source.length():
            return None
        char = self._source.at(start)
        line, column = self._position.line, self._position.column
        self._position.offset = start + 1

        if char == "{":
            self._position.enter_brace()
            token = self._tokenize_brace(TokenKind.LEFT_BRACE, start, line, column)
        elif char == "}":
            self._table.leave()
            self._position.leave_brace()
            token = self._tokenize_brace(TokenKind.RIGHT_BRACE, start, line, column)
        elif char == "\\":
            token = self._tokenize_escape(start, line, column)
        elif char == "\r":
            # Assumed to be followed by "\n"
            self._position.offset = start + 2
            self._position.new_line()
            token = Token(TokenKind.NEWLINE, start, start + 2, line, column, "\r\n")
        elif char == "\n":
            self._position.new_line()
            token = Token(TokenKind.NEWLINE, start, start + 1, line, column, "\n")
        else:
            token = self._tokenize_data(start, line, column)

        if token is not _SKIPPED:
            entry = self._table.current()
            if entry is not None:
                token.related_control_word = entry.snapshot()
        return token

    def _consume_space(self):
        if self._source.at(self._position.offset) == " ":
            self._position.offset += 1
            return True
        return False

    def _tokenize_brace(self, kind, start, line, column):
        brace = self._source.text(start, 1)
        trailing_space = self._consume_space()
        self._position.advance_by_literal(brace)
        return Token(
            kind,
            start,
            self._position.offset,
            line,
            column,
            brace,
            trailing_space=trailing_space,
        )

    def _simple_token(self, kind, start, line, column, text):
        self._position.advance_by_literal(
            self._source.text(start, self._position.offset - start)
        )
        return Token(kind, start, self._position.offset, line, column, text)

    def _tokenize_escape(self, start, line, column):
        """
        Tokenize everything starting with a backslash, the backslash at start
        has been read.
        """
        position = self._position
        char = self._source.at(position.offset)
        if char is None:
            return self._simple_token(TokenKind.INVALID, start, line, column, "\\")

        if char in TokenKind.control_symbols():
            position.offset += 1
            return self._simple_token(
                TokenKind.CONTROL_SYMBOL, start, line, column, char
            )
        if char in TokenKind.escaped_expressions():
            position.offset += 1
            return self._simple_token(
                TokenKind.ESCAPED_EXPRESSION, start, line, column, char
            )
        if char == "'":
            position.offset += 1
            if self._source.length() - position.offset < 2:
                return self._simple_token(
                    TokenKind.INVALID, start, line, column, "\\'"
                )
            hex_digits = self._source.text(position.offset, 2)
            position.offset += 2
            return self._simple_token(
                TokenKind.ESCAPED_CHARACTER, start, line, column, hex_digits
            )
        if char == "*":
            position.offset += 1
            if (
                self._source.at(position.offset) != "\\"
                or self._source.at(position.offset + 1) is None
            ):
                # A dangling backslash after "\*" is left for the next token
                return self._simple_token(
                    TokenKind.CONTROL_SYMBOL, start, line, column, "*"
                )
            position.offset += 1
            return self._tokenize_control_word(start, line, column, is_special=True)
        if is_control_word_start(char):
            return self._tokenize_control_word(start, line, column)

        position.offset += 1
        return self._simple_token(TokenKind.INVALID, start, line, column, "\\" + char)

    def _tokenize_control_word(self, start, line, column, is_special=False):
        """
        Tokenize the name and parameter of a control word, starting at the
        current offset. A single space following the control word is part of
        it, any other delimiter is left for the next token.
        """
        position = self._position
        word_start = position.offset
        end = self._source.find_first_of(CONTROL_WORD_DELIMITERS, word_start)
        if end is None:
            end = self._source.length()
        trailing_space = self._source.at(end) == " "
        position.offset = end + 1 if trailing_space else end
        # The column is not advanced for the trailing space
        position.advance_by_literal(self._source.text(start, end - start))

        token = Token(
            TokenKind.CONTROL_WORD,
            start,
            position.offset,
            line,
            column,
            self._source.text(word_start, end - word_start),
            trailing_space=trailing_space,
            is_special=is_special,
        )
        if token.name in self._ignored:
            self.skip_compound()
            return _SKIPPED
        if token.name in self._table:
            self._table.enter(token)
        return token

    def _tokenize_data(self, start, line, column):
        """
        Tokenize data starting at start, as text, hex or binary depending
        on the control word that is live at the current nesting level.
        """
        entry = self._table.current()
        word = entry.word if entry is not None else None
        if word == BINARY_WORD:
            length = self._table.value_of(BINARY_WORD, 0)
            if length is not None and length > 0:
                return self._tokenize_binary(start, line, column, length)

        kind = TokenKind.SDATA if word == PICTURE_WORD else TokenKind.PCDATA
        end = self._source.find_first_of(DATA_DELIMITERS, start)
        if end is None:
            end = self._source.length()
        text = self._source.text(start, end - start)
        self._position.offset = end
        self._position.advance_by_literal(text)
        return Token(kind, start, end, line, column, text)

    def _tokenize_binary(self, start, line, column, length):
        """
        Take exactly length bytes from start as binary data. Braces and
        backslashes are part of the data, and line and column are not updated.
        """
        data = self._source.slice(start, length)
        if len(data) < length:
            warnings.warn(
                f"Expected {length} bytes of binary data at {start}, "
                f"content ends after {len(data)} bytes."
            )
        self._position.offset = start + length
        return Token(
            TokenKind.BDATA, start, start + len(data), line, column, data=data
        )
