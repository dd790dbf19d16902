import rtflex.version
from _rtflex.reading import lazy_tokenize, tokenize, tokenize_string
from _rtflex.source import AbstractSource, FileSource, StringSource
from _rtflex.tokenizer import RtfTokenizer
from _rtflex.tokenizer.control_word_table import TrackedControlWordEntry
from _rtflex.tokenizer.errors import SourceError, WrongStreamModeError
from _rtflex.tokenizer.token import Token
from _rtflex.tokenizer.token_kind import TokenKind

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = rtflex.version.version

__all__ = [
    "AbstractSource",
    "FileSource",
    "RtfTokenizer",
    "SourceError",
    "StringSource",
    "Token",
    "TokenKind",
    "TrackedControlWordEntry",
    "WrongStreamModeError",
    "lazy_tokenize",
    "tokenize",
    "tokenize_string",
]
