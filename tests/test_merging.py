import unittest
from pymidas.composition import build_isotope_weights
from pymidas.enumeration import enumerate_element
from pymidas.merging import merge_terms, merge_thresholds
from pymidas.terms import Term


class TestMergeThresholds(unittest.TestCase):
    def test_thresholds(self):
        thresholds = merge_thresholds(1.)
        self.assertEqual(len(thresholds), 9)
        self.assertEqual(thresholds[:8], [k / 8. for k in range(1, 9)])
        self.assertAlmostEqual(thresholds[-1], 1.01)


class TestMergeTerms(unittest.TestCase):
    def test_pair(self):
        merged = merge_terms(
            [Term(10., 1.), Term(0.5, 0.5), Term(0., 0.5)],
            merge_resolution=1.,
            mass_resolution=1.,
        )
        self.assertEqual(len(merged), 2)
        self.assertAlmostEqual(merged[0].power, 0.25)
        self.assertAlmostEqual(merged[0].probability, 1.)
        self.assertEqual(merged[1], Term(10., 1.))

    def test_final_threshold(self):
        """terms slightly beyond the merge resolution are merged by the final pass"""
        self.assertEqual(
            len(merge_terms([Term(0., 1.), Term(1.005, 1.)], 1., 1.)),
            1,
        )
        self.assertEqual(
            len(merge_terms([Term(0., 1.), Term(1.02, 1.)], 1., 1.)),
            2,
        )

    def test_running_mean(self):
        """absorption is checked against the running weighted mean of the merged term"""
        merged = merge_terms(
            [Term(0., 1.), Term(0.9, 1.), Term(1.8, 1.)],
            merge_resolution=1.,
            mass_resolution=1.,
        )
        self.assertEqual(len(merged), 2)
        self.assertAlmostEqual(merged[0].power, 0.45)
        self.assertAlmostEqual(merged[0].probability, 2.)
        self.assertEqual(merged[1], Term(1.8, 1.))

    def test_tombstones_removed(self):
        merged = merge_terms(
            [Term(0., 1.), Term(5., 0.), Term(10., 1.)],
            merge_resolution=1.,
            mass_resolution=1.,
        )
        self.assertEqual(merged, [Term(0., 1.), Term(10., 1.)])

    def test_empty(self):
        self.assertEqual(merge_terms([], 0.01), [])

    def test_idempotent(self):
        terms = enumerate_element(build_isotope_weights({'S': 30})[0])
        merged = merge_terms(terms, 0.01)
        self.assertLess(len(merged), len(terms))
        self.assertEqual(merge_terms(merged, 0.01), merged)
        self.assertAlmostEqual(
            sum(term.probability for term in merged),
            sum(term.probability for term in terms),
            places=12,
        )

    def test_sorted(self):
        terms = enumerate_element(build_isotope_weights({'O': 10})[0])
        merged = merge_terms(terms, 0.01)
        powers = [term.power for term in merged]
        self.assertEqual(powers, sorted(powers))


if __name__ == '__main__':
    unittest.main()
