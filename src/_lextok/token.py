from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    """
    One classified span of the tokenized text.

    The kind is whatever identifier the lexicon used for the fragment that
    matched, eg. an Enum member or a string. position is the 0-based
    offset of the first character of text, line and column are 1-based.
    """

    kind: object
    text: str
    position: int
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __post_init__(self):
        if not self.text:
            raise ValueError(
                f"Token of kind {self.kind} at {self.position} has no text"
            )

    @property
    def end(self):
        """
        :returns: The offset just past the last character of the token.
        """
        return self.position + len(self.text)

    def __str__(self):
        kind = getattr(self.kind, "name", self.kind)
        return f"{kind}({self.text!r}) at {self.line}:{self.column}"
