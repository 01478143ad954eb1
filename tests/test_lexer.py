"""Unit tests for the lexer / shunting-yard conversion."""

import unittest

from basekalk_pkg.lexer import clear_lex_cache, find_matching_bracket, tokenize
from basekalk_pkg.types import (
    FunctionToken,
    LiteralToken,
    OperatorToken,
    ParseError,
    SymbolToken,
    UnknownTokenError,
    UnmatchedBracketError,
)


def L(digits, negative=False):
    return LiteralToken(digits, negative)


def Op(op):
    return OperatorToken(op)


class TestPrecedence(unittest.TestCase):
    """Test postfix ordering produced by the shunting-yard rules."""

    def test_multiplication_binds_tighter(self):
        self.assertEqual(
            tokenize("2+3*4"), (L("2"), L("3"), L("4"), Op("*"), Op("+"))
        )

    def test_parentheses(self):
        self.assertEqual(
            tokenize("(2+3)*4"), (L("2"), L("3"), Op("+"), L("4"), Op("*"))
        )

    def test_power_is_left_associative(self):
        self.assertEqual(
            tokenize("2^3^2"), (L("2"), L("3"), Op("^"), L("2"), Op("^"))
        )

    def test_subtraction_is_left_associative(self):
        self.assertEqual(
            tokenize("8-3-1"), (L("8"), L("3"), Op("-"), L("1"), Op("-"))
        )

    def test_assignment_binds_loosest(self):
        self.assertEqual(
            tokenize("x = 2 + 3"),
            (SymbolToken("x"), L("2"), L("3"), Op("+"), Op("=")),
        )

    def test_whitespace_is_ignored(self):
        self.assertEqual(tokenize(" 2 \t+\n3 "), (L("2"), L("3"), Op("+")))

    def test_empty_input(self):
        self.assertEqual(tokenize(""), ())
        self.assertEqual(tokenize("   "), ())


class TestLiterals(unittest.TestCase):
    """Test literal scanning and the unary minus rule."""

    def test_literal_keeps_raw_digits(self):
        self.assertEqual(tokenize("1.5"), (L("1.5"),))
        self.assertEqual(tokenize("0ff"), (L("0ff"),))
        self.assertEqual(tokenize("1aZ"), (L("1aZ"),))

    def test_literal_is_not_validated(self):
        self.assertEqual(tokenize("1.2.3"), (L("1.2.3"),))

    def test_leading_minus(self):
        self.assertEqual(tokenize("-3+5"), (L("3", True), L("5"), Op("+")))

    def test_minus_after_operator(self):
        self.assertEqual(tokenize("3*-2"), (L("3"), L("2", True), Op("*")))

    def test_minus_after_open_paren(self):
        self.assertEqual(tokenize("(-2)"), (L("2", True),))

    def test_binary_minus_after_literal(self):
        self.assertEqual(tokenize("5-3"), (L("5"), L("3"), Op("-")))

    def test_binary_minus_after_symbol(self):
        self.assertEqual(tokenize("x-1"), (SymbolToken("x"), L("1"), Op("-")))

    def test_binary_minus_after_close_paren(self):
        self.assertEqual(tokenize("(1)-1"), (L("1"), L("1"), Op("-")))

    def test_minus_before_symbol_is_an_operator(self):
        self.assertEqual(tokenize("-x"), (SymbolToken("x"), Op("-")))


class TestSymbolsAndFunctions(unittest.TestCase):
    """Test names and function calls."""

    def test_symbol_names(self):
        self.assertEqual(tokenize("ff"), (SymbolToken("ff"),))
        self.assertEqual(tokenize("x1_$"), (SymbolToken("x1_$"),))
        self.assertEqual(tokenize("$a"), (SymbolToken("$a"),))

    def test_function_call(self):
        self.assertEqual(
            tokenize("sqrt(16)"), (FunctionToken("sqrt", ((L("16"),),)),)
        )

    def test_function_without_arguments(self):
        self.assertEqual(tokenize("sin()"), (FunctionToken("sin", ()),))

    def test_nested_calls(self):
        inner = FunctionToken("fac", ((L("3"),),))
        self.assertEqual(
            tokenize("sqrt(1+fac(3))"),
            (FunctionToken("sqrt", ((L("1"), inner, Op("+")),)),),
        )

    def test_call_inside_expression(self):
        self.assertEqual(
            tokenize("2*sqrt(4)"),
            (L("2"), FunctionToken("sqrt", ((L("4"),),)), Op("*")),
        )

    def test_space_before_paren_is_not_a_call(self):
        self.assertEqual(tokenize("f (2)"), (SymbolToken("f"), L("2")))


class TestErrors(unittest.TestCase):
    """Test lexer failures and tolerated input."""

    def test_unknown_token(self):
        with self.assertRaises(UnknownTokenError) as ctx:
            tokenize("2@3")
        self.assertEqual(str(ctx.exception), "Unknown token '@'")

    def test_comma_is_unknown(self):
        with self.assertRaises(UnknownTokenError):
            tokenize("pow(2,3)")

    def test_unmatched_call_bracket(self):
        with self.assertRaises(UnmatchedBracketError):
            tokenize("sqrt(2")

    def test_errors_share_base_class(self):
        with self.assertRaises(ParseError):
            tokenize("#")

    def test_stray_close_paren_is_tolerated(self):
        self.assertEqual(tokenize("2)"), (L("2"),))
        self.assertEqual(tokenize("2)+3"), (L("2"), L("3"), Op("+")))

    def test_unclosed_paren_reaches_output(self):
        self.assertEqual(tokenize("(1+2"), (L("1"), L("2"), Op("+"), Op("(")))


class TestCaching(unittest.TestCase):
    def test_same_text_returns_same_tuple(self):
        self.assertIs(tokenize("7*7"), tokenize("7*7"))

    def test_clear_cache(self):
        tokenize("6*7")
        clear_lex_cache()
        self.assertEqual(tokenize.cache_info().currsize, 0)


class TestMatchingBracket(unittest.TestCase):
    def test_nested(self):
        self.assertEqual(find_matching_bracket("f(a(b))c", 1), 6)

    def test_missing(self):
        self.assertEqual(find_matching_bracket("f(a(b)", 1), -1)


if __name__ == "__main__":
    unittest.main()
