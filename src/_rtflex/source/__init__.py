"""
A source gives the tokenizer random access to rtf content. StringSource holds
the content in memory while FileSource reads it lazily from a binary stream.
Both implement AbstractSource, which the tokenizer is written against.
"""

from .abstract_source import AbstractSource
from .file_source import FileSource
from .string_source import StringSource

__all__ = ["AbstractSource", "FileSource", "StringSource"]
