import unittest

from chembalancer.errors import ArithmeticOverflowError, FormulaSyntaxError
from chembalancer.models import Element, Group, Term
from chembalancer.parser import MAX_NESTING, parse, parse_term
from chembalancer.tokenizer import Tokenizer


class TestParseStructure(unittest.TestCase):
    def test_simple_equation(self):
        eq = parse("H2 + O2 = H2O")
        self.assertEqual(
            eq.lhs,
            (Term((Element("H", 2),), 0), Term((Element("O", 2),), 0)),
        )
        self.assertEqual(eq.rhs, (Term((Element("H", 2), Element("O")), 0),))

    def test_groups(self):
        eq = parse("Ca(OH)2 = Ca + ((O)H)")
        self.assertEqual(
            eq.lhs[0].items,
            (Element("Ca"), Group((Element("O"), Element("H")), 2)),
        )
        self.assertEqual(eq.rhs[1].items, (Group((Group((Element("O"),), 1), Element("H")), 1),))

    def test_charges(self):
        eq = parse("SO4^2- + H^+ = Fe^3+ + OH^-")
        self.assertEqual([t.charge for t in eq.terms()], [-2, 1, 3, -1])

    def test_unicode_minus_charge(self):
        eq = parse("SO4^2− = S")
        self.assertEqual(eq.lhs[0].charge, -2)

    def test_electron(self):
        self.assertEqual(parse_term(Tokenizer("e^-")), Term.electron())
        self.assertEqual(parse_term(Tokenizer("e")), Term.electron())
        eq = parse("Fe^3+ + e = Fe^2+")
        self.assertTrue(eq.lhs[1].is_electron)


class TestParseErrors(unittest.TestCase):
    def assertSyntaxError(self, formula, message, start, end=None):
        with self.assertRaises(FormulaSyntaxError) as ctx:
            parse(formula)
        self.assertEqual(ctx.exception.message, message)
        self.assertEqual(ctx.exception.start, start)
        self.assertEqual(ctx.exception.end, start if end is None else end)
        return ctx.exception

    def test_trailing_plus(self):
        self.assertSyntaxError("H2 +", "Invalid term - empty", 4)

    def test_missing_equals(self):
        self.assertSyntaxError("H2 O2", "Plus or equal sign expected", 5)

    def test_unexpected_token_on_left(self):
        self.assertSyntaxError("H2 ) = O2", "Plus expected", 3)

    def test_unexpected_token_on_right(self):
        self.assertSyntaxError("H2 = O2 )", "Plus or end expected", 8)

    def test_charge_without_sign(self):
        self.assertSyntaxError("H^ = H", "Sign expected", 3)
        self.assertSyntaxError("H^", "Number or sign expected", 2)

    def test_empty_group(self):
        error = self.assertSyntaxError("() = H", "Empty group", 0, 3)
        self.assertEqual(error.span_in("() = H"), (0, 2))

    def test_unclosed_group(self):
        self.assertSyntaxError(
            "(H = H", "Element, group, or closing parenthesis expected", 3
        )
        self.assertSyntaxError("(H", "Element, group, or closing parenthesis expected", 2)

    def test_electron_with_bad_charge(self):
        error = self.assertSyntaxError(
            "e^2- = H", "Invalid term - invalid charge for electron", 0, 5
        )
        self.assertEqual(error.span_in("e^2- = H"), (0, 4))

    def test_electron_not_alone(self):
        self.assertSyntaxError("eH = H", "Invalid term - electron needs to stand alone", 0, 3)

    def test_lowercase_element(self):
        self.assertSyntaxError("H + abc = H", 'Invalid element name "abc"', 4, 8)

    def test_zero_count(self):
        self.assertSyntaxError("H0 = H", "Count must be a positive integer", 1, 3)

    def test_invalid_symbol(self):
        self.assertSyntaxError("H2 * O2 = H2O2", "Invalid symbol", 3)

    def test_nesting_limit(self):
        depth = MAX_NESTING + 1
        formula = "(" * depth + "H" + ")" * depth + " = H"
        self.assertSyntaxError(formula, "Nesting too deep", MAX_NESTING)
        self.assertSyntaxError("(" * 1200 + "H" + ")" * 1200 + " = H", "Nesting too deep", MAX_NESTING)

    def test_nesting_at_limit(self):
        formula = "(" * MAX_NESTING + "H" + ")" * MAX_NESTING + " = H"
        self.assertEqual(parse(formula).rhs, (Term((Element("H"),), 0),))

    def test_huge_count(self):
        with self.assertRaises(ArithmeticOverflowError):
            parse("H99999999999999999 = H")


if __name__ == '__main__':
    unittest.main()
