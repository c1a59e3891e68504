"""
The pattern compiler turns a lexicon into one combined regular expression.

Every fragment is wrapped in a named group, named after its kind, and the
groups are joined by alternation in the order the lexicon declares them:

    {"T_DOT": r"\\.", "T_STRING": r"\\w+"}  ->  (?P<T_DOT>\\.)|(?P<T_STRING>\\w+)

Alternation in python regular expressions is ordered, so when more than
one fragment matches at an offset the first declared kind wins, even if a
later fragment would match a longer text. Broad fragments (such as \\w+)
therefore have to be declared after narrow ones. No conflict detection is
done beyond the warnings emitted by compile_lexicon for fragments that
match the empty string and for literals shadowed by an earlier fragment.
"""

import re
import warnings
from collections.abc import Mapping
from enum import Enum

from _lextok.errors import CompileError
from _lextok.lexeme import Literal


def group_name(kind):
    """
    :param kind: A kind identifier, either an Enum member or a string.
    :returns: The name of the group that captures matches of the kind.
    """
    if isinstance(kind, Enum):
        name = kind.name
    elif isinstance(kind, str):
        name = kind
    else:
        raise CompileError(
            f"Kind {kind!r} has to be an Enum member or a string, "
            f"got {type(kind).__name__}",
            kind,
        )
    if not name.isidentifier():
        raise CompileError(
            f"Kind {kind!r} can not be used as a group name, "
            "it has to be a valid identifier",
            kind,
        )
    return name


def fragment_source(kind, fragment):
    """
    :returns: The regular expression source of a lexicon fragment.
    """
    if isinstance(fragment, Literal):
        return fragment.pattern
    if isinstance(fragment, re.Pattern):
        return fragment.pattern
    if isinstance(fragment, str):
        return fragment
    raise CompileError(
        f"Fragment for {kind!r} has to be a string, Literal or compiled pattern, "
        f"got {type(fragment).__name__}",
        kind,
    )


GROUP_REFERENCE = re.compile(
    r"\\(?:[0-7]{3}|([1-9][0-9]?)|.)|\(\?\((\d+)\)", re.DOTALL
)
GLOBAL_FLAGS = re.compile(r"\(\?([aiLmsux]+)\)")


def check_group_references(kind, source):
    """
    Numbered group references (\\1, (?(1)...)) would refer to groups of
    the combined pattern rather than of the fragment, so they are rejected.
    Octal escapes such as \\101 and named references are allowed.

    :raises CompileError: If source refers to a group by number.
    """
    for match in GROUP_REFERENCE.finditer(source):
        number = match.group(1) or match.group(2)
        if number is not None:
            raise CompileError(
                f"Fragment for {kind!r} refers to group {number} by number, "
                "use a named group and (?P=name) instead",
                kind,
            )


def scope_global_flags(source):
    """
    Rewrite leading global inline flags as flags scoped to the fragment,
    ie. "(?i)select" becomes "(?i:select)", as global flags are only
    allowed at the start of the combined pattern.
    """
    flags = ""
    match = GLOBAL_FLAGS.match(source)
    while match:
        flags += match.group(1)
        source = source[match.end() :]
        match = GLOBAL_FLAGS.match(source)
    if not flags:
        return source
    flags = "".join(dict.fromkeys(flags))
    if "x" in flags:
        # end a trailing verbose comment before the closing paren
        source += "\n"
    return f"(?{flags}:{source})"


def lexicon_items(lexicon):
    if isinstance(lexicon, Mapping):
        return list(lexicon.items())
    try:
        items = [tuple(item) for item in lexicon]
    except TypeError as err:
        raise CompileError(
            "Lexicon has to be a mapping or an iterable of (kind, fragment) pairs"
        ) from err
    for item in items:
        if len(item) != 2:
            raise CompileError(f"Lexicon entry {item!r} is not a (kind, fragment) pair")
    return items


class CompiledMatcher:
    """
    The combined matcher of a lexicon. Immutable once constructed, see
    compile_lexicon.
    """

    def __init__(self, kinds, pattern, owners):
        """
        :param kinds: Tuple of kinds in priority order.
        :param pattern: The combined re.Pattern.
        :param owners: Mapping from group index of the combined pattern to
            the kind whose fragment contains that group.
        """
        self._kinds = kinds
        self._pattern = pattern
        self._owners = owners

    @property
    def kinds(self):
        return self._kinds

    @property
    def pattern(self):
        return self._pattern

    def match(self, text, offset):
        """
        Match the combined pattern exactly at offset, never searching ahead.

        :returns: Tuple of the winning kind and the matched text, or None
            if no fragment matches at offset.
        """
        match = self._pattern.match(text, offset)
        if match is None:
            return None
        # The wrapper group always closes after any group inside its
        # fragment, so lastindex is the wrapper of the winning alternative.
        return self._owners[match.lastindex], match.group()

    def debug(self):
        """
        :returns: The source of the combined pattern. For diagnostics only.
        """
        return self._pattern.pattern

    def __repr__(self):
        return f"CompiledMatcher({self.debug()!r})"


def warn_on_conflicts(kind, compiled, fragment, earlier, stacklevel):
    if compiled.match("") is not None:
        warnings.warn(
            f"Fragment for {kind!r} matches the empty string, "
            "tokenizing will fail wherever it wins",
            stacklevel=stacklevel + 1,
        )
    if isinstance(fragment, Literal):
        for earlier_kind, earlier_compiled in earlier:
            if earlier_compiled.match(str(fragment)):
                warnings.warn(
                    f"Literal {str(fragment)!r} for {kind!r} is shadowed by the "
                    f"earlier declared {earlier_kind!r}",
                    stacklevel=stacklevel + 1,
                )
                break


def compile_lexicon(lexicon, flags=0, stacklevel=2):
    """
    Compile a lexicon into a CompiledMatcher.

    :param lexicon: Mapping from kind to fragment, or an iterable of
        (kind, fragment) pairs. The order of the entries is the priority
        order of the kinds.
    :param flags: Flags given to re.compile, eg. re.IGNORECASE.
    :param stacklevel: Stack level of the warnings about the lexicon, as
        for warnings.warn, relative to the caller of compile_lexicon.
    :raises CompileError: If the lexicon is empty, a kind is not usable as
        a group name, two kinds share a group name, a fragment is not a
        valid regular expression or refers to a group by number.
    """
    items = lexicon_items(lexicon)
    if not items:
        raise CompileError("Lexicon is empty")

    names = {}
    alternatives = []
    owners = {}
    earlier = []
    group_index = 1
    for kind, fragment in items:
        name = group_name(kind)
        if name in names:
            raise CompileError(
                f"Kind {kind!r} has the same group name as {names[name]!r}", kind
            )
        names[name] = kind

        source = fragment_source(kind, fragment)
        check_group_references(kind, source)
        source = scope_global_flags(source)
        try:
            compiled = re.compile(source, flags)
        except re.error as err:
            raise CompileError(
                f"Invalid fragment for {kind!r}: {source!r}, {err}", kind
            ) from err
        warn_on_conflicts(kind, compiled, fragment, earlier, stacklevel)
        earlier.append((kind, compiled))

        alternatives.append(f"(?P<{name}>{source})")
        for index in range(group_index, group_index + compiled.groups + 1):
            owners[index] = kind
        group_index += compiled.groups + 1

    combined = "|".join(alternatives)
    try:
        pattern = re.compile(combined, flags)
    except re.error as err:
        raise CompileError(
            f"Could not compile combined lexicon pattern: {err}"
        ) from err

    return CompiledMatcher(tuple(kind for kind, _ in items), pattern, owners)
