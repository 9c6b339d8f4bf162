"""Tests for MoneyTokenizer - engine parts to canonical tokens.

Covers run precedence (integer, currency, fraction), greedy optional
literals, pass-through of unclaimed parts, and iterator semantics.

Property-Based Tests:
    Joining token values reproduces the joined part values for arbitrary
    part sequences.
"""

from __future__ import annotations

from hypothesis import given

from moneyfmt.engine.protocol import Part
from moneyfmt.enums import PartType, TokenType
from moneyfmt.formatting.tokenizer import MoneyTokenizer, tokenize
from moneyfmt.formatting.tokens import Token, to_money_text
from tests.helpers.engines import pairs_of, parts
from tests.strategies import part_sequences

# ============================================================================
# Locale-shaped part sequences
# ============================================================================


class TestLocaleShapes:
    """Part sequences as real locales produce them."""

    def test_symbol_before_amount(self) -> None:
        """$35.87 (en-US): currency, integer with decimal point, fraction."""
        tokens = tokenize(
            parts(("currency", "$"), ("integer", "35"), ("decimal", "."), ("fraction", "87"))
        )
        assert pairs_of(tokens) == [
            ("currency", "$"),
            ("integer", "35."),
            ("fraction", "87"),
        ]

    def test_symbol_after_amount_with_space(self) -> None:
        """1.234,50 € (de-DE): spacing travels with the currency symbol."""
        tokens = tokenize(
            parts(
                ("integer", "1"),
                ("group", "."),
                ("integer", "234"),
                ("decimal", ","),
                ("fraction", "50"),
                ("literal", "\xa0"),
                ("currency", "€"),
            )
        )
        assert pairs_of(tokens) == [
            ("integer", "1.234,"),
            ("fraction", "50"),
            ("currency", "\xa0€"),
        ]

    def test_symbol_before_amount_with_space(self) -> None:
        """€ 35,87 (nl-NL): trailing literal joins the currency run."""
        tokens = tokenize(
            parts(
                ("currency", "€"),
                ("literal", " "),
                ("integer", "35"),
                ("decimal", ","),
                ("fraction", "87"),
            )
        )
        assert pairs_of(tokens) == [
            ("currency", "€ "),
            ("integer", "35,"),
            ("fraction", "87"),
        ]

    def test_zero_fraction_currency(self) -> None:
        """¥12,346 (JPY): no decimal or fraction parts at all."""
        tokens = tokenize(
            parts(("currency", "¥"), ("integer", "12"), ("group", ","), ("integer", "346"))
        )
        assert pairs_of(tokens) == [("currency", "¥"), ("integer", "12,346")]

    def test_negative_amount_keeps_sign(self) -> None:
        """-$35.87: the minus sign becomes a leading literal token."""
        tokens = tokenize(
            parts(
                ("minusSign", "-"),
                ("currency", "$"),
                ("integer", "35"),
                ("decimal", "."),
                ("fraction", "87"),
            )
        )
        assert pairs_of(tokens) == [
            ("literal", "-"),
            ("currency", "$"),
            ("integer", "35."),
            ("fraction", "87"),
        ]


# ============================================================================
# Run grammar
# ============================================================================


class TestIntegerRun:
    """integer-run: DIGIT+ LITERAL? DECIMAL? LITERAL?"""

    def test_integer_run_takes_literal_decimal_literal(self) -> None:
        tokens = tokenize(
            parts(
                ("integer", "1"),
                ("literal", "a"),
                ("decimal", "."),
                ("literal", "b"),
                ("fraction", "5"),
            )
        )
        assert pairs_of(tokens) == [("integer", "1a.b"), ("fraction", "5")]

    def test_integer_run_is_greedy_before_currency(self) -> None:
        """A literal between digits and symbol is claimed by the integer run first."""
        tokens = tokenize(parts(("integer", "35"), ("literal", " "), ("currency", "$")))
        assert pairs_of(tokens) == [("integer", "35 "), ("currency", "$")]

    def test_group_alone_starts_integer_run(self) -> None:
        tokens = tokenize(parts(("group", ","), ("integer", "000")))
        assert pairs_of(tokens) == [("integer", ",000")]

    def test_two_literals_without_decimal_are_claimed(self) -> None:
        tokens = tokenize(parts(("integer", "1"), ("literal", " "), ("literal", " ")))
        assert pairs_of(tokens) == [("integer", "1  ")]


class TestCurrencyRun:
    """currency-run: LITERAL? CURRENCY LITERAL?"""

    def test_leading_literal_only_with_following_currency(self) -> None:
        tokens = tokenize(parts(("literal", " "), ("currency", "$"), ("literal", " ")))
        assert pairs_of(tokens) == [("currency", " $ ")]

    def test_currency_alone(self) -> None:
        assert pairs_of(tokenize(parts(("currency", "CHF")))) == [("currency", "CHF")]


class TestFractionRun:
    """fraction-run: exactly one FRACTION part."""

    def test_consecutive_fractions_are_separate_tokens(self) -> None:
        tokens = tokenize(parts(("fraction", "1"), ("fraction", "2")))
        assert pairs_of(tokens) == [("fraction", "1"), ("fraction", "2")]


# ============================================================================
# Unclaimed parts
# ============================================================================


class TestPassThrough:
    """Parts no run claims."""

    def test_contiguous_unclaimed_parts_merge(self) -> None:
        tokens = tokenize(
            parts(("minusSign", "-"), ("literal", "("), ("integer", "5"))
        )
        assert pairs_of(tokens) == [("literal", "-("), ("integer", "5")]

    def test_trailing_literal_after_fraction(self) -> None:
        tokens = tokenize(
            parts(("integer", "5"), ("decimal", "."), ("fraction", "00"), ("literal", ")"))
        )
        assert pairs_of(tokens) == [("integer", "5."), ("fraction", "00"), ("literal", ")")]

    def test_unknown_part_type_is_literal(self) -> None:
        tokens = tokenize(parts(("integer", "5"), ("percentSign", "%")))
        assert pairs_of(tokens) == [("integer", "5"), ("literal", "%")]

    def test_drop_unclaimed_when_pass_through_disabled(self) -> None:
        tokens = tokenize(
            parts(("minusSign", "-"), ("currency", "$"), ("integer", "1"), ("plusSign", "+")),
            pass_through=False,
        )
        assert pairs_of(tokens) == [("currency", "$"), ("integer", "1")]

    def test_only_unclaimed_parts(self) -> None:
        assert tokenize(parts(("minusSign", "-")), pass_through=False) == ()
        assert pairs_of(tokenize(parts(("minusSign", "-")))) == [("literal", "-")]


# ============================================================================
# Iterator semantics
# ============================================================================


class TestIteratorSemantics:
    """MoneyTokenizer is a finite, single-use iterator."""

    def test_empty_parts_yield_nothing(self) -> None:
        assert list(MoneyTokenizer([])) == []

    def test_exhausted_tokenizer_stays_exhausted(self) -> None:
        tokenizer = MoneyTokenizer(parts(("currency", "$"), ("integer", "1")))
        assert len(list(tokenizer)) == 2
        assert list(tokenizer) == []

    def test_next_returns_tokens_one_at_a_time(self) -> None:
        tokenizer = MoneyTokenizer(parts(("currency", "$"), ("integer", "1")))
        assert iter(tokenizer) is tokenizer
        assert next(tokenizer) == Token(TokenType.CURRENCY, "$")
        assert next(tokenizer) == Token(TokenType.INTEGER, "1")
        assert next(tokenizer, None) is None

    def test_accepts_part_type_enum_members(self) -> None:
        tokens = tokenize([Part(PartType.CURRENCY, "$"), Part(PartType.INTEGER, "7")])
        assert [token.type for token in tokens] == [TokenType.CURRENCY, TokenType.INTEGER]

    def test_token_as_dict(self) -> None:
        assert Token(TokenType.FRACTION, "87").as_dict() == {"type": "fraction", "value": "87"}


# ============================================================================
# Properties
# ============================================================================


class TestTokenizerProperties:
    """Invariants over arbitrary part sequences."""

    @given(part_sequences())
    def test_tokens_reproduce_part_text(self, items: tuple[Part, ...]) -> None:
        tokens = tokenize(items)
        assert to_money_text(tokens) == "".join(part.value for part in items)

    @given(part_sequences())
    def test_only_canonical_types_emitted(self, items: tuple[Part, ...]) -> None:
        allowed = {TokenType.INTEGER, TokenType.CURRENCY, TokenType.FRACTION, TokenType.LITERAL}
        assert {token.type for token in tokenize(items)} <= allowed

    @given(part_sequences())
    def test_literal_tokens_never_adjacent(self, items: tuple[Part, ...]) -> None:
        types = [token.type for token in tokenize(items)]
        for left, right in zip(types, types[1:], strict=False):
            assert not (left is TokenType.LITERAL and right is TokenType.LITERAL)

    @given(part_sequences())
    def test_dropping_unclaimed_removes_only_literals(self, items: tuple[Part, ...]) -> None:
        kept = tokenize(items)
        dropped = tokenize(items, pass_through=False)
        assert dropped == tuple(token for token in kept if token.type is not TokenType.LITERAL)
