import re
from functools import lru_cache

# Encoding used to map between source bytes and token text. Every byte
# decodes to exactly one character, so character offsets are byte offsets.
ENCODING = "latin-1"


@lru_cache(maxsize=None)
def charset_pattern(charset):
    """
    :param charset: A str or bytes of characters to look for.
    :returns: Compiled bytes pattern matching any single character
        in charset.
    """
    if isinstance(charset, str):
        charset = charset.encode(ENCODING)
    return re.compile(b"[" + re.escape(charset) + b"]")


def first_of(buffer, charset, start=0):
    """
    Find the first byte in buffer[start:] which is one of charset. The
    search stops at the first hit.

    :param buffer: A bytes like object to search.
    :param charset: A str or bytes of characters to look for.
    :returns: The index into buffer of the first hit, or None.
    """
    match = charset_pattern(charset).search(buffer, start)
    if match is None:
        return None
    return match.start()
