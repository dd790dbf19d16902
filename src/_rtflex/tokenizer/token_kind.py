from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    CONTROL_WORD = auto()
    CONTROL_SYMBOL = auto()
    ESCAPED_EXPRESSION = auto()
    ESCAPED_CHARACTER = auto()
    NEWLINE = auto()
    PCDATA = auto()
    SDATA = auto()
    BDATA = auto()
    INVALID = auto()

    @classmethod
    def control_symbols(cls):
        return "~-_:|"

    @classmethod
    def escaped_expressions(cls):
        return ",{}\\"

    @classmethod
    def data_kinds(cls):
        return (
            cls.PCDATA,
            cls.SDATA,
            cls.BDATA,
        )
