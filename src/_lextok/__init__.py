"""
In this package, a lexicon is an ordered mapping from token kinds to
regular expression fragments. The Tokenizer compiles the lexicon once into
a single combined pattern and then splits texts into Streams of Tokens,
matching at each offset exactly where the previous token ended.

The order of the lexicon is the priority of the kinds: when several
fragments match at the same offset, the first declared kind wins. If no
fragment matches at some offset, tokenization stops with an
UnrecognizedInputError; characters are never skipped.

A Stream is consumed by a parser with next(), peek() and rewind(), and
supports random access with at() for lookahead.
"""

from .compiler import CompiledMatcher, compile_lexicon
from .errors import (
    CompileError,
    TokenizationError,
    UnexpectedTokenError,
    UnrecognizedInputError,
    ZeroLengthMatchError,
)
from .lexeme import Lexeme, Literal
from .stream import Stream
from .token import Token
from .tokenizer import Tokenizer

__all__ = [
    "CompileError",
    "CompiledMatcher",
    "Lexeme",
    "Literal",
    "Stream",
    "Token",
    "TokenizationError",
    "Tokenizer",
    "UnexpectedTokenError",
    "UnrecognizedInputError",
    "ZeroLengthMatchError",
    "compile_lexicon",
]
