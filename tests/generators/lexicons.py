import hypothesis.strategies as st

from _lextok.lexeme import Lexeme

# Characters covered by Lexeme.lexicon(), "\r" is left out as it is only
# recognized in front of "\n".
lexeme_characters = "abcXYZ019_ \t\n/\\.#:;=\"'!(){}"

lexeme_texts = st.text(alphabet=lexeme_characters)

unrecognized_characters = st.sampled_from("@$%&*+-<>?[]^`|~")


@st.composite
def texts_with_unrecognized(draw):
    """
    A text covered by Lexeme.lexicon() except for one character, returns
    the text and the offset of that character.
    """
    prefix = draw(lexeme_texts)
    suffix = draw(lexeme_texts)
    return prefix + draw(unrecognized_characters) + suffix, len(prefix)


lexeme_subsets = st.lists(st.sampled_from(list(Lexeme)), min_size=1, unique=True)
