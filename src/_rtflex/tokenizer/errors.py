class SourceError(Exception):
    """
    Raised by a source when the underlying content can not be read, for
    instance when the file backing a FileSource fails. A SourceError
    propagates out of RtfTokenizer.next_token() and leaves the tokenizer in an
    undefined state, call RtfTokenizer.reset() before reusing it.
    """

    pass


class WrongStreamModeError(Exception):
    """
    Thrown when a stream opened in text mode is given where a
    byte stream is expected.
    """

    pass
