"""Tests for body measurement parsing."""

import unittest

from nutrition_planner.units import cm_to_ft_in, format_height, parse_height_cm, parse_weight_kg


class TestWeight(unittest.TestCase):
    def test_metric(self):
        self.assertEqual(parse_weight_kg("80"), 80)
        self.assertEqual(parse_weight_kg("80.5 kg"), 80.5)

    def test_pounds(self):
        self.assertAlmostEqual(parse_weight_kg("176lbs"), 176 / 2.20462)
        self.assertAlmostEqual(parse_weight_kg("176 LB"), 176 / 2.20462)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            parse_weight_kg("heavy")


class TestHeight(unittest.TestCase):
    def test_metric(self):
        self.assertEqual(parse_height_cm("180"), 180)
        self.assertEqual(parse_height_cm("180cm"), 180)

    def test_feet_and_inches(self):
        self.assertAlmostEqual(parse_height_cm("5ft10in"), 177.8)
        self.assertAlmostEqual(parse_height_cm("5'10\""), 177.8)
        self.assertAlmostEqual(parse_height_cm("6'"), 182.88)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            parse_height_cm("tall")

    def test_cm_to_ft_in(self):
        self.assertEqual(cm_to_ft_in(177.8), (5, 10))
        self.assertEqual(cm_to_ft_in(182.8), (6, 0))
        self.assertEqual(format_height(180), "180 cm (5'11\")")


if __name__ == "__main__":
    unittest.main()
