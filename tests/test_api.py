"""Tests for the public tokenize() and scan() API."""

import pytest

from parenlex import (
    ScanResult,
    StopReason,
    Token,
    TokenType,
    scan,
    tokenize,
)


class TestTokenizeScenarios:
    """Known inputs and their exact token streams."""

    def test_single_digit(self) -> None:
        assert tokenize("0") == [Token.number("0")]

    def test_identifier_with_dashes_and_digits(self) -> None:
        assert tokenize("an-identifier-123") == [Token.identifier("an-identifier-123")]

    def test_empty_sexpr(self) -> None:
        assert tokenize("()") == [Token.open_parens(), Token.close_parens()]

    def test_simple_sexpr(self) -> None:
        assert tokenize("(+ 1 1)") == [
            Token.open_parens(),
            Token.identifier("+"),
            Token.number("1"),
            Token.number("1"),
            Token.close_parens(),
        ]

    def test_generic_sexpr(self) -> None:
        assert tokenize("(operation operand0 0987654321 operand1)") == [
            Token.open_parens(),
            Token.identifier("operation"),
            Token.identifier("operand0"),
            Token.number("0987654321"),
            Token.identifier("operand1"),
            Token.close_parens(),
        ]

    def test_empty_input(self) -> None:
        assert tokenize("") == []

    def test_only_spaces(self) -> None:
        assert tokenize("     ") == []

    def test_nested_sexpr(self) -> None:
        types = [t.type for t in tokenize("(* (- 4 2) (/ 9 3))")]
        assert types == [
            TokenType.OPEN_PARENS,
            TokenType.IDENTIFIER,
            TokenType.OPEN_PARENS,
            TokenType.IDENTIFIER,
            TokenType.NUMBER,
            TokenType.NUMBER,
            TokenType.CLOSE_PARENS,
            TokenType.OPEN_PARENS,
            TokenType.IDENTIFIER,
            TokenType.NUMBER,
            TokenType.NUMBER,
            TokenType.CLOSE_PARENS,
            TokenType.CLOSE_PARENS,
        ]

    def test_returns_list(self) -> None:
        assert isinstance(tokenize("(a)"), list)


class TestClassificationEdges:
    """Boundaries between token categories."""

    def test_negative_number_is_identifier(self) -> None:
        assert tokenize("-1") == [Token.identifier("-1")]

    def test_number_then_letters_splits(self) -> None:
        # A number run ends at the first non-digit; letters start an identifier
        assert tokenize("123abc") == [Token.number("123"), Token.identifier("abc")]

    def test_leading_zeros_preserved(self) -> None:
        assert tokenize("000") == [Token.number("000")]

    def test_long_number_not_parsed(self) -> None:
        digits = "9" * 200
        [token] = tokenize(digits)
        assert token.value == digits
        assert isinstance(token.value, str)

    def test_parens_end_identifiers(self) -> None:
        assert tokenize("(abc)") == [
            Token.open_parens(),
            Token.identifier("abc"),
            Token.close_parens(),
        ]

    def test_adjacent_parens(self) -> None:
        assert tokenize("(())") == [
            Token.open_parens(),
            Token.open_parens(),
            Token.close_parens(),
            Token.close_parens(),
        ]

    def test_symbols_merge_into_one_identifier(self) -> None:
        assert tokenize("+-*/") == [Token.identifier("+-*/")]

    def test_unbalanced_parens_are_not_checked(self) -> None:
        assert tokenize(")(") == [Token.close_parens(), Token.open_parens()]


class TestEarlyTermination:
    """An unrecognized character silently ends the scan."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("(a\tb)", [Token.open_parens(), Token.identifier("a")]),
            ("(a\nb)", [Token.open_parens(), Token.identifier("a")]),
            ("(x 1.5)", [Token.open_parens(), Token.identifier("x"), Token.number("1")]),
            ('("str")', [Token.open_parens()]),
            ("; comment", []),
            ("(café)", [Token.open_parens(), Token.identifier("caf")]),
            ("(a_b)", [Token.open_parens(), Token.identifier("a")]),
        ],
    )
    def test_stops_on_unrecognized(self, source: str, expected: list[Token]) -> None:
        assert tokenize(source) == expected

    def test_non_ascii_digit_stops(self) -> None:
        assert tokenize("1٣") == [Token.number("1")]

    def test_recognized_text_after_stop_is_dropped(self) -> None:
        tokens = tokenize("(a) ! (b)")
        assert tokens == [Token.open_parens(), Token.identifier("a"), Token.close_parens()]

    def test_never_raises(self) -> None:
        assert tokenize("\x00\x01\x02") == []


class TestScan:
    """scan() reports the stop point alongside the tokens."""

    def test_complete_scan(self) -> None:
        result = scan("(+ 1 1)")
        assert isinstance(result, ScanResult)
        assert result.complete
        assert result.stop_reason is StopReason.END_OF_INPUT
        assert result.consumed == len("(+ 1 1)")
        assert result.stopped_at is None

    def test_truncated_scan(self) -> None:
        source = "(a\tb)"
        result = scan(source)
        assert not result.complete
        assert result.stop_reason is StopReason.UNRECOGNIZED_CHARACTER
        assert result.consumed == 2
        assert result.stopped_at == "\t"
        assert source[result.consumed :] == "\tb)"

    def test_tokens_match_tokenize(self) -> None:
        source = "(operation operand0 0987654321 operand1) ?"
        assert scan(source).tokens == tokenize(source)

    def test_empty_source(self) -> None:
        result = scan("")
        assert result.tokens == []
        assert result.consumed == 0
        assert result.complete

    def test_trailing_spaces_consumed(self) -> None:
        assert scan("a   ").consumed == 4

    def test_empty_complete_scan_is_truthy(self) -> None:
        result = scan("   ")
        assert result
        assert result.tokens == []
        assert result.complete

    def test_results_compare_by_value(self) -> None:
        assert scan("(a b)") == scan("(a b)")
        assert len(scan("(a b)").tokens) == 4

    def test_result_is_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(scan("(a)"))

    def test_stop_location(self) -> None:
        result = scan("ab#", source_file="expr.sx")
        loc = result.stop_location
        assert loc.offset == 2
        assert loc.end_offset == 3
        assert str(loc) == "expr.sx:3"

    def test_stop_location_at_end_is_zero_width(self) -> None:
        loc = scan("ab").stop_location
        assert loc.offset == loc.end_offset == 2

    def test_source_file_carried_to_tokens(self) -> None:
        result = scan("(a)", source_file="expr.sx")
        assert all(t.location.source_file == "expr.sx" for t in result.tokens)
