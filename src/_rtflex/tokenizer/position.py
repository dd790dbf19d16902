class PositionTracker:
    """
    Bookkeeping of offset, line, column and brace nesting level
    while tokenizing. Line counting starts at 1, the column starts
    at 0 and is set to 1 after each newline.
    """

    def __init__(self):
        self.offset = 0
        self.line = 1
        self.column = 0
        self.nesting_level = 0

    def reset(self):
        self.offset = 0
        self.line = 1
        self.column = 0
        self.nesting_level = 0

    def advance_by_literal(self, text):
        """
        Update line and column after reading the given text.

        If text contains newlines, the line is incremented by the number
        of newlines and the column becomes the number of characters
        following the last newline plus one. Otherwise the column is
        incremented by the length of text.

        Note: the offset is not touched, the tokenizer moves the offset
        itself as raw binary data is skipped without updating line
        and column.
        """
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rindex("\n")
        else:
            self.column += len(text)

    def new_line(self):
        self.line += 1
        self.column = 1

    def enter_brace(self):
        self.nesting_level += 1

    def leave_brace(self):
        if self.nesting_level > 0:
            self.nesting_level -= 1

    def snapshot(self):
        return (self.offset, self.line, self.column)

    def __repr__(self):
        return (
            f"PositionTracker(offset={self.offset}, line={self.line}, "
            f"column={self.column}, nesting_level={self.nesting_level})"
        )
