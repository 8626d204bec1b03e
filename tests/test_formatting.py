import unittest

from chembalancer.config import RenderOptions
from chembalancer.errors import FormulaSyntaxError
from chembalancer.formatting import (
    format_charge,
    format_equation,
    format_term,
    highlight_error,
)
from chembalancer.models import Term
from chembalancer.parser import parse

ASCII = RenderOptions(arrow="=", unicode_minus=False)


class TestFormatEquation(unittest.TestCase):
    def test_coefficients(self):
        eq = parse("H2 + O2 = H2O")
        self.assertEqual(format_equation(eq, (2, 1, 2)), "2H2 + O2 → 2H2O")

    def test_without_coefficients(self):
        eq = parse("Ca(OH)2 + ((O)H)3 = X")
        self.assertEqual(format_equation(eq, options=ASCII), "Ca(OH)2 + ((O)H)3 = X")

    def test_show_ones(self):
        eq = parse("H2 + O2 = H2O")
        options = RenderOptions(arrow="->", show_ones=True)
        self.assertEqual(format_equation(eq, (2, 1, 2), options), "2H2 + 1O2 -> 2H2O")

    def test_zero_coefficient_suppressed(self):
        eq = parse("A + B = A")
        self.assertEqual(format_equation(eq, (1, 0, 1), ASCII), "A = A")

    def test_charges(self):
        eq = parse("Zn + NO3^- + H^+ = Zn^2+ + NH4^+ + H2O")
        self.assertEqual(
            format_equation(eq, (4, 1, 10, 4, 1, 3), ASCII),
            "4Zn + NO3^- + 10H^+ = 4Zn^2+ + NH4^+ + 3H2O",
        )

    def test_mismatched_coefficients(self):
        with self.assertRaises(ValueError):
            format_equation(parse("H2 + O2 = H2O"), (1, 2))


class TestFormatParts(unittest.TestCase):
    def test_electron(self):
        self.assertEqual(format_term(Term.electron()), "e^−")
        self.assertEqual(format_term(Term.electron(), ASCII), "e^-")

    def test_charge(self):
        self.assertEqual(format_charge(0), "")
        self.assertEqual(format_charge(3), "^3+")
        self.assertEqual(format_charge(-2, ASCII), "^2-")


class TestHighlightError(unittest.TestCase):
    def test_point_error_at_end(self):
        error = FormulaSyntaxError("Invalid term - empty", start=4)
        self.assertEqual(highlight_error("H2 +", error), "H2 +\n    ^")

    def test_range_trims_trailing_whitespace(self):
        error = FormulaSyntaxError("Empty group", start=0, end=3)
        self.assertEqual(highlight_error("() = H", error), "() = H\n^^")


if __name__ == '__main__':
    unittest.main()
