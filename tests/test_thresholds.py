import math
import unittest

from thresholds import CEILINGS, ceilings_for, classify, or_worst_case


class TestClassify(unittest.TestCase):
    def test_ceiling_boundaries(self):
        """Each ceiling falls in the better band; anything above the upper one is poor."""
        for key, (good, acceptable) in CEILINGS.items():
            with self.subTest(metric=key):
                self.assertEqual(classify(good, good, acceptable), 100)
                self.assertEqual(classify(acceptable, good, acceptable), 50)
                self.assertEqual(classify(acceptable + 1e-6, good, acceptable), 0)
                self.assertEqual(classify(None, good, acceptable), 0)

    def test_between_ceilings(self):
        self.assertEqual(classify(2000, 1800, 3000), 50)
        self.assertEqual(classify(0.15, 0.10, 0.25), 50)
        self.assertEqual(classify(0, 1800, 3000), 100)

    def test_absent_is_worst_case(self):
        self.assertEqual(or_worst_case(None), math.inf)
        self.assertEqual(or_worst_case(0), 0)
        self.assertEqual(or_worst_case(1234.5), 1234.5)


class TestCeilingsFor(unittest.TestCase):
    def test_load_depends_on_mode(self):
        self.assertEqual(ceilings_for("load", "desktop"), (3000, 5000))
        self.assertEqual(ceilings_for("load", "mobile"), (5000, 8000))
        self.assertEqual(ceilings_for("load", "tablet"), (3000, 5000))
        self.assertEqual(ceilings_for("load", None), (3000, 5000))

    def test_overrides(self):
        overrides = {"fcp": (1000, 2000), "load_mobile": (4000, 6000)}
        self.assertEqual(ceilings_for("fcp", "desktop", overrides), (1000, 2000))
        self.assertEqual(ceilings_for("load", "mobile", overrides), (4000, 6000))
        self.assertEqual(ceilings_for("lcp", "mobile", overrides), (2500, 4000))

    def test_load_override_applies_to_both_modes(self):
        overrides = {"load": (2000, 4000)}
        self.assertEqual(ceilings_for("load", "desktop", overrides), (2000, 4000))
        self.assertEqual(ceilings_for("load", "mobile", overrides), (2000, 4000))
        overrides = {"load": (2000, 4000), "load_mobile": (6000, 9000)}
        self.assertEqual(ceilings_for("load", "mobile", overrides), (6000, 9000))
        self.assertEqual(ceilings_for("load", "desktop", overrides), (2000, 4000))

    def test_unknown_metric(self):
        with self.assertRaises(KeyError):
            ceilings_for("fid")


if __name__ == '__main__':
    unittest.main()
