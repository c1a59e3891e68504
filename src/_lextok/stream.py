from _lextok.errors import UnexpectedTokenError


class Stream:
    """
    The tokens of one tokenized text together with a cursor, for a parser
    to consume one token at a time:

    >>> from _lextok.token import Token
    >>> stream = Stream([Token("T_STRING", "a", 0), Token("T_DOT", ".", 1)])
    >>> stream.next().text
    'a'
    >>> stream.peek().text
    '.'

    The tokens themselves never change, only the cursor does. Indexing,
    len() and iteration work on all tokens regardless of the cursor. A
    slice is a new Stream with its cursor at the start of the slice.
    """

    def __init__(self, tokens=()):
        self._tokens = tuple(tokens)
        self._cursor = 0

    @property
    def cursor(self):
        """
        Index of the token returned by the next call to next(), between
        0 and len(self).
        """
        return self._cursor

    @property
    def tokens(self):
        return self._tokens

    def length(self):
        return len(self._tokens)

    def is_empty(self):
        return not self._tokens

    def at(self, index):
        """
        :returns: The token at the absolute index, or None if there is no
            such token. Negative indices do not count from the end.
        """
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def peek(self):
        """
        :returns: The token at the cursor without advancing, None at the end.
        """
        return self.at(self._cursor)

    def next(self):
        """
        :returns: The token at the cursor and advance the cursor, None at
            the end in which case the cursor stays put.
        """
        token = self.peek()
        if token is not None:
            self._cursor += 1
        return token

    def rewind(self, n=1):
        """
        Move the cursor n tokens back, stopping at the first token.
        """
        if n < 0:
            raise ValueError(f"Can not rewind a negative number of tokens, got {n}")
        self._cursor = max(0, self._cursor - n)

    def expect(self, *kinds):
        """
        Like next(), but the token has to be of one of the given kinds.

        :raises UnexpectedTokenError: If at the end of the stream or the
            token is of some other kind. The cursor is not moved.
        """
        token = self.peek()
        if token is None or token.kind not in kinds:
            raise UnexpectedTokenError(kinds, token)
        self._cursor += 1
        return token

    def skip(self, *kinds):
        """
        Advance the cursor past consecutive tokens of the given kinds.

        :returns: The number of tokens skipped.
        """
        start = self._cursor
        token = self.peek()
        while token is not None and token.kind in kinds:
            self._cursor += 1
            token = self.peek()
        return self._cursor - start

    def without(self, *kinds):
        """
        :returns: A new stream of the tokens that are not of the given
            kinds, eg. to drop whitespace and comments before parsing.
        """
        return Stream(token for token in self._tokens if token.kind not in kinds)

    def text(self):
        """
        :returns: The text the tokens were matched from.
        """
        return "".join(token.text for token in self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Stream(self._tokens[index])
        return self._tokens[index]

    def __iter__(self):
        return iter(self._tokens)

    def __eq__(self, other):
        if not isinstance(other, Stream):
            return NotImplemented
        return self._tokens == other._tokens

    def __repr__(self):
        return f"Stream({list(self._tokens)!r}, cursor={self._cursor})"
