class CompileError(Exception):
    """
    Raised when a lexicon cannot be compiled into a combined matcher, ie.
    the lexicon is empty, a fragment is not a valid regular expression or
    two kinds would share the same group name.

    A Tokenizer that fails with CompileError is never usable, retrying
    with the same lexicon gives the same error.
    """

    def __init__(self, message, kind=None):
        super().__init__(message)
        self.kind = kind


class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if no token can be
    produced at the given offset of the input text.
    """

    def __init__(self, message, offset):
        super().__init__(message)
        self.offset = offset


class UnrecognizedInputError(TokenizationError):
    """
    Thrown when no fragment of the lexicon matches at the offset. The
    tokenizer never skips characters it does not recognize.
    """

    preview_length = 20

    def __init__(self, offset, line, column, preview):
        super().__init__(
            f"Unrecognized input at {offset} (line {line}, column {column}): "
            f"{preview!r}",
            offset,
        )
        self.line = line
        self.column = column
        self.preview = preview

    @classmethod
    def at(cls, text, offset, line, column):
        """
        :returns: An UnrecognizedInputError for text[offset:], with a
            preview of the unmatched input cut at the first newline.
        """
        preview = text[offset : offset + cls.preview_length].split("\n", 1)[0]
        return cls(offset, line, column, preview)


class ZeroLengthMatchError(TokenizationError):
    """
    Thrown when the winning fragment matched the empty string, which
    would make the tokenizer loop forever at that offset.
    """

    def __init__(self, offset, kind):
        super().__init__(
            f"Fragment for {kind} matched the empty string at {offset}", offset
        )
        self.kind = kind


class UnexpectedTokenError(Exception):
    """
    Raised by Stream.expect if the next token is not of any of the
    expected kinds, or if the stream is exhausted.
    """

    def __init__(self, expected, token):
        if token is None:
            message = f"Expected one of {expected}, got end of stream"
        else:
            message = (
                f"Expected one of {expected}, got {token.kind} {token.text!r} "
                f"at {token.position}"
            )
        super().__init__(message)
        self.expected = expected
        self.token = token
