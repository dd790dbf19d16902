import re
from dataclasses import dataclass, field

from _rtflex.tokenizer.token_kind import TokenKind

# A control word is an alphabetic name optionally followed by
# a signed decimal parameter, e.g. "uc2" or "li-120".
_CONTROL_WORD = re.compile(r"([A-Za-z]*)(-?[0-9]+)?")


def split_control_word(text):
    """
    Split the raw text of a control word into name and parameter.

    >>> split_control_word("uc2")
    ('uc', 2)
    >>> split_control_word("par")
    ('par', None)

    :param text: The text of the control word without the leading backslash.
    :returns: Tuple of the name and the parameter, the parameter is None when
        the control word has none.
    """
    match = _CONTROL_WORD.match(text)
    name, parameter = match.group(1), match.group(2)
    if parameter is None:
        return name, None
    return name, int(parameter)


@dataclass
class Token:
    """
    A token in an rtf document.

    start and end delimit the raw span of the token in the source (end is
    exclusive), line and column are the tracked position at which the token
    was produced. text holds the payload of every kind except BDATA, whose
    payload is the raw bytes in data.
    """

    kind: TokenKind
    start: int
    end: int
    line: int = 1
    column: int = 0
    text: str = ""
    data: bytes = b""
    trailing_space: bool = False
    is_special: bool = False
    related_control_word: object = field(default=None, compare=False, repr=False)

    @property
    def name(self):
        """
        The name of a control word token, ie. "uc" for the
        control word "\\uc2", or None for other kinds.
        """
        if self.kind != TokenKind.CONTROL_WORD:
            return None
        return split_control_word(self.text)[0]

    @property
    def parameter(self):
        """
        The numeric parameter of a control word token, ie. 2 for
        "\\uc2", or None if the control word has no parameter.
        """
        if self.kind != TokenKind.CONTROL_WORD:
            return None
        return split_control_word(self.text)[1]

    @property
    def value(self):
        """
        The payload of the token, bytes for BDATA and the text for
        all other kinds.
        """
        if self.kind == TokenKind.BDATA:
            return self.data
        return self.text

    def get_value(self, source):
        """
        :returns: The raw bytes of the token as found in the given source,
            including delimiters such as the leading backslash of a control
            word or the space consumed after it.
        """
        return source.slice(self.start, self.end - self.start)
