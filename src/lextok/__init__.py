import lextok.version
from _lextok import (
    CompileError,
    CompiledMatcher,
    Lexeme,
    Literal,
    Stream,
    Token,
    TokenizationError,
    Tokenizer,
    UnexpectedTokenError,
    UnrecognizedInputError,
    ZeroLengthMatchError,
    compile_lexicon,
)

__author__ = """LexTok developers"""

__version__ = lextok.version.version

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
