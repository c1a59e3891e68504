from _lextok.compiler import compile_lexicon
from _lextok.errors import UnrecognizedInputError, ZeroLengthMatchError
from _lextok.line_index import LineIndex
from _lextok.stream import Stream
from _lextok.token import Token


def check_text(text):
    if not isinstance(text, str):
        raise TypeError(f"Can only tokenize str, got {type(text).__name__}")


class Tokenizer:
    """
    Splits text into tokens as classified by a lexicon.

    >>> tokenizer = Tokenizer({"T_DOT": r"\\.", "T_STRING": r"\\w+"})
    >>> [token.text for token in tokenizer.tokenize("a.b")]
    ['a', '.', 'b']

    The lexicon is compiled once, when the tokenizer is constructed, and
    the tokenizer holds no other state, so the same tokenizer can be used
    for any number of texts.
    """

    def __init__(self, lexicon, flags=0):
        """
        :param lexicon: Mapping from kind to fragment, see compile_lexicon.
        :param flags: Flags for the regular expressions, eg. re.IGNORECASE.
        :raises CompileError: If the lexicon can not be compiled.
        """
        self._matcher = compile_lexicon(lexicon, flags, stacklevel=3)

    @property
    def matcher(self):
        return self._matcher

    @property
    def kinds(self):
        return self._matcher.kinds

    def debug(self):
        """
        :returns: The combined pattern of the lexicon as a string.
        """
        return self._matcher.debug()

    def scan(self, text, line_index):
        """
        Generates (kind, matched text, offset) for consecutive matches
        starting at offset 0 until the end of text.

        :raises UnrecognizedInputError: When no fragment matches.
        :raises ZeroLengthMatchError: When the winning fragment matched the
            empty string.
        """
        offset = 0
        end = len(text)
        while offset < end:
            found = self._matcher.match(text, offset)
            if found is None:
                line, column = line_index.locate(offset)
                raise UnrecognizedInputError.at(text, offset, line, column)
            kind, matched = found
            if not matched:
                raise ZeroLengthMatchError(offset, kind)
            yield kind, matched, offset
            offset += len(matched)

    def iter_tokens(self, text):
        """
        Lazily tokenize text. Tokens before an unrecognized offset are
        generated before the error is raised.
        """
        check_text(text)
        line_index = LineIndex(text)
        for kind, matched, offset in self.scan(text, line_index):
            line, column = line_index.locate(offset)
            yield Token(kind, matched, offset, line, column)

    def tokenize(self, text):
        """
        Tokenize the whole of text.

        :param text: The str to tokenize.
        :returns: Stream of the tokens of text, with the cursor at the
            first token. Concatenating the text of the tokens gives back
            the input text.
        :raises TokenizationError: If text could not be tokenized up to
            the end. No stream is returned in that case.
        """
        check_text(text)
        line_index = LineIndex(text)
        matches = list(self.scan(text, line_index))
        lines, columns = line_index.locate_all([offset for _, _, offset in matches])
        return Stream(
            Token(kind, matched, offset, int(line), int(column))
            for (kind, matched, offset), line, column in zip(matches, lines, columns)
        )

    def __repr__(self):
        return f"Tokenizer({self._matcher.debug()!r})"
