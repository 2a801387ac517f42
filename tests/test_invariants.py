"""Property-based tests for lexer invariants using Hypothesis."""

import string

from hypothesis import given, settings
from hypothesis import strategies as st
from pytest import raises

from parenlex.errors import InvalidCharacterError
from parenlex.lexer import lex
from parenlex.lexer.chars import (
    WHITESPACE, is_letter, is_number, is_paren, is_quote, is_whitespace
)
from parenlex.lexer.tokens import (
    NumberToken, Paren, StringToken, WordToken, render
)

whitespace = st.text(alphabet=''.join(WHITESPACE))

tokens = st.lists(st.one_of(
    st.sampled_from(list(Paren)),
    st.integers(min_value=0, max_value=2**31 - 1).map(NumberToken),
    st.text(alphabet=string.ascii_letters, min_size=1).map(WordToken),
    st.text(alphabet=st.characters(exclude_characters='"')).map(StringToken),
))

valid_chars = set(string.ascii_letters + string.digits + '()"') | WHITESPACE
invalid_char = st.characters(exclude_characters=''.join(valid_chars))


class TestInvariants:

    @given(whitespace)
    def test_whitespace_only_is_empty(self, source: str) -> None:
        assert lex(source) == []

    @given(tokens)
    @settings(max_examples=200)
    def test_render_then_lex(self, toks: list) -> None:
        assert lex(render(toks)) == toks

    @given(tokens, tokens, whitespace)
    def test_ordering(self, left: list, right: list, gap: str) -> None:
        # Lexing two pieces side by side gives their tokens in the same order
        source = render(left) + ' ' + gap + render(right)
        assert lex(source) == left + right

    @given(tokens)
    def test_token_values(self, toks: list) -> None:
        for tok in lex(render(toks)):
            match tok:
                case WordToken(data):
                    assert data and all(map(is_letter, data))
                case NumberToken(data):
                    assert 0 <= data < 2**31
                case StringToken(data):
                    assert '"' not in data
                case _:
                    assert isinstance(tok, Paren)

    @given(tokens, invalid_char)
    def test_invalid_character(self, toks: list, char: str) -> None:
        prefix = render(toks) + ' '
        with raises(InvalidCharacterError) as info:
            lex(prefix + char + ' a')
        assert info.value.character == char
        assert info.value.context[0].offset == len(prefix)
        assert info.value.tokens == toks


class TestCharacterClasses:

    @given(st.characters())
    def test_at_most_one_category(self, char: str) -> None:
        categories = [is_paren, is_whitespace, is_number, is_letter, is_quote]
        assert sum(pred(char) for pred in categories) <= 1

    @given(st.characters())
    def test_ascii_only(self, char: str) -> None:
        if is_letter(char) or is_number(char) or is_whitespace(char):
            assert char.isascii()
