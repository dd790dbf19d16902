from abc import ABC, abstractmethod

from _rtflex.source.common import ENCODING

# The delimiters that affect brace matching, a backslash
# escapes the character following it.
BRACE_DELIMITERS = "{}\\"


class AbstractSource(ABC):
    """
    Random access view of rtf content as consumed by the tokenizer.

    Indices are byte offsets. Queries at or past the end of the content
    return None (or an empty/shortened slice) instead of raising, so that
    the tokenizer can look ahead at the end of the stream.
    """

    @abstractmethod
    def length(self):
        """
        :returns: The total length of the content.
        """
        pass

    @abstractmethod
    def slice(self, start, length):
        """
        :returns: The bytes from start and at most length bytes ahead.
        """
        pass

    @abstractmethod
    def find_first_of(self, charset, start):
        """
        :param charset: The characters to look for.
        :param start: The index to start searching from.
        :returns: The index of the first character at or after start which is
            in charset, or None if there is no such character.
        """
        pass

    def at(self, index):
        """
        :returns: The character at index, or None if index is out of range.
        """
        if index < 0:
            return None
        char = self.slice(index, 1)
        if not char:
            return None
        return char.decode(ENCODING)

    def text(self, start, length):
        """
        :returns: slice(start, length) decoded as text.
        """
        return self.slice(start, length).decode(ENCODING)

    def find_matching_close_delimiter(self, start):
        """
        Find the closing brace of the group which is open at start,
        skipping nested groups and escaped braces such as "\\}".

        >>> StringSource("a{b\\}}c}d").find_matching_close_delimiter(0)
        7

        :returns: The index of the matching "}", or None if the group
            is not closed.
        """
        depth = 0
        index = self.find_first_of(BRACE_DELIMITERS, start)
        while index is not None:
            char = self.at(index)
            if char == "\\":
                index = self.find_first_of(BRACE_DELIMITERS, index + 2)
                continue
            if char == "{":
                depth += 1
            elif depth == 0:
                return index
            else:
                depth -= 1
            index = self.find_first_of(BRACE_DELIMITERS, index + 1)
        return None

    def __len__(self):
        return self.length()
