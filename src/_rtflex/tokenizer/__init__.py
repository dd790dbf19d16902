"""
In this module, a tokenizer pulls tokens one at a time from rtf content given
by a source (see _rtflex.source). Tokenization never fails on malformed
content, instead INVALID tokens are generated and it is up to the caller
whether to skip them or give up.

Rtf is mostly delimited by braces and backslashes, except for data following
some control words: after "\\pict" data is hex encoded and after "\\binN"
exactly N bytes of raw binary data follow. The tokenizer therefore tracks the
values of control words, scoped by brace nesting level, see
_rtflex.tokenizer.control_word_table. Which words are tracked, and which
groups are skipped entirely, is configured on RtfTokenizer.
"""

from .rtf_tokenizer import RtfTokenizer

__all__ = ["RtfTokenizer"]
