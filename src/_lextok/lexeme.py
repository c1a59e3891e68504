import re
from enum import Enum, unique


class Literal(str):
    """
    A lexicon fragment that matches the given text literally, ie.
    Literal("(") is compiled as the pattern r"\\(".
    """

    @property
    def pattern(self):
        return re.escape(str(self))

    def __repr__(self):
        return f"Literal({str(self)!r})"


@unique
class Lexeme(Enum):
    """
    Common punctuation kinds together with their fragments.

    Members are declared in priority order: single characters with a
    meaning of their own come first and the catch-all word fragment
    T_STRING comes last, otherwise punctuation would never be reached.
    T_NEWLINE is declared before T_WHITESPACE, and T_WHITESPACE does not
    match newlines, so that line breaks stay separate tokens.
    """

    T_NEWLINE = r"\r?\n"
    T_WHITESPACE = r"[^\S\r\n]+"
    T_FORWARD_SLASH = r"/"
    T_ESCAPE = r"\\"
    T_DOT = r"\."
    T_HASH = r"#"
    T_COLON = r":"
    T_SEMICOLON = r";"
    T_EQUALS = r"="
    T_DOUBLE_QUOTE = r'"'
    T_SINGLE_QUOTE = r"'"
    T_EXCLAMATION_MARK = r"!"
    T_OPEN_PARENTHESIS = r"\("
    T_CLOSE_PARENTHESIS = r"\)"
    T_OPEN_CURLY = r"\{"
    T_CLOSE_CURLY = r"\}"
    T_STRING = r"\w+"

    @classmethod
    def lexicon(cls, *members):
        """
        :param members: Lexemes to include, all lexemes if none are given.
        :returns: A lexicon (dict of lexeme to fragment) of the given
            members in declaration order, regardless of the order they are
            given in.
        """
        wanted = set(members) if members else set(cls)
        return {member: member.value for member in cls if member in wanted}
