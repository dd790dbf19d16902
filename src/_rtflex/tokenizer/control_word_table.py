"""
The control word table keeps the values of tracked control words scoped by
brace nesting level.

In rtf, the parameter of some control words is only valid inside the group
(brace pair) in which it was given, for instance the number of bytes following
a unicode escape given by "\\uc". Such words are stackable: each nesting level
has its own value, and closing the brace discards the value set at that level
so that the enclosing value is visible again.

Non-stackable words, such as "\\pict" and "\\bin", act as a flag which is
only live in the exact group that declared it: there is a single slot
(key 0) which also remembers the nesting level it was set at.
"""

from dataclasses import dataclass, field

from _rtflex.tokenizer.token import Token
from _rtflex.tokenizer.token_kind import TokenKind


@dataclass
class ScopedValue:
    """
    The value of a tracked control word at one nesting level.
    """

    token: Token
    nesting_level: int
    value: object
    serial: int = field(default=0, compare=False, repr=False)


@dataclass
class TrackedControlWordEntry:
    word: str
    stackable: bool
    stack: dict = field(default_factory=dict)

    def slot(self, nesting_level):
        """
        :returns: The key in stack used for a value set at the given level.
        """
        if self.stackable:
            return nesting_level
        return 0

    def live_value(self, nesting_level):
        """
        :returns: The ScopedValue set at exactly the given nesting level,
            or None.
        """
        scoped = self.stack.get(self.slot(nesting_level))
        if scoped is None or scoped.nesting_level != nesting_level:
            return None
        return scoped

    def snapshot(self):
        """
        :returns: A copy of the entry with the values set so far, which is
            not changed by later values or by leaving their groups.
        """
        return TrackedControlWordEntry(self.word, self.stackable, dict(self.stack))


class ControlWordTable:
    """
    Table of tracked control words, keyed by the name of the word.

    The current nesting level is read from the given position tracker, which
    the tokenizer shares with the table.

    >>> position = PositionTracker()
    >>> table = ControlWordTable(position)
    >>> table.track("uc", stackable=True, default=1)
    >>> table.value_of("uc")
    1
    """

    def __init__(self, position):
        """
        :param position: The PositionTracker holding the current
            nesting level.
        """
        self.position = position
        self._entries = {}
        self._serial = 0

    def clear(self):
        self._entries = {}
        self._serial = 0

    def track(self, word, stackable, default=None):
        """
        Start tracking the given control word, replacing any existing entry.

        :param word: The name of the control word, ie. "uc".
        :param stackable: Whether values are scoped per nesting level.
        :param default: If not None, the value of the word at the current
            nesting level, set as if the control word with that parameter had
            been read at the current position.
        """
        entry = TrackedControlWordEntry(word, stackable)
        self._entries[word] = entry
        if default is not None:
            offset, line, column = self.position.snapshot()
            token = Token(
                TokenKind.CONTROL_WORD,
                offset,
                offset,
                line,
                column,
                text=f"{word}{default}",
            )
            self._write(entry, token, default)

    def enter(self, token):
        """
        Record the value of a tracked control word token at the
        current nesting level.
        """
        self._write(self._entries[token.name], token, token.parameter)

    def leave(self):
        """
        Discard all values set at the current nesting level. Called when a
        closing brace is read, before the nesting level is decremented.
        """
        level = self.position.nesting_level
        for entry in self._entries.values():
            if entry.live_value(level) is not None:
                del entry.stack[entry.slot(level)]

    def current(self):
        """
        :returns: The entry with a value set at the current nesting level,
            the one most recently set if there are several, or None.
        """
        level = self.position.nesting_level
        current_entry = None
        current_serial = -1
        for entry in self._entries.values():
            scoped = entry.live_value(level)
            if scoped is not None and scoped.serial > current_serial:
                current_entry = entry
                current_serial = scoped.serial
        return current_entry

    def value_of(self, word, default=None):
        """
        :returns: For stackable words the value set at the current nesting
            level or else the value at level 0. For non-stackable words the
            last value set. The default is returned if there is no such
            value or the word is not tracked.
        """
        entry = self._entries.get(word)
        if entry is None:
            return default
        scoped = None
        if entry.stackable:
            scoped = entry.stack.get(self.position.nesting_level)
        if scoped is None:
            scoped = entry.stack.get(0)
        if scoped is None:
            return default
        return scoped.value

    def _write(self, entry, token, value):
        level = self.position.nesting_level
        self._serial += 1
        entry.stack[entry.slot(level)] = ScopedValue(token, level, value, self._serial)

    def __contains__(self, word):
        return word in self._entries

    def __getitem__(self, word):
        return self._entries[word]

    def __iter__(self):
        return iter(self._entries.values())

    def __len__(self):
        return len(self._entries)
