import itertools
import math
import unittest
from pymidas.budget import IterationBudget
from pymidas.composition import build_isotope_weights
from pymidas.enumeration import (
    enumerate_element,
    check_enumerable,
    isotope_windows,
    log_combination_estimate,
    MAX_LOG_COMBINATIONS,
)
from pymidas.exceptions import UnsupportedSizeError, IterationBudgetExceeded


def carbon_weights(n):
    return build_isotope_weights({'C': n})[0]


class TestWindows(unittest.TestCase):
    def test_carbon(self):
        means, stds = isotope_windows(carbon_weights(10))
        self.assertEqual(means, [9, 0])
        self.assertEqual(stds, [5, 5])

    def test_large_atom_count(self):
        _, small = isotope_windows(carbon_weights(199))
        _, large = isotope_windows(carbon_weights(200))
        self.assertGreater(large[1] - small[1], 5)  # the wider constant applies from 200 atoms

    def test_estimate(self):
        self.assertAlmostEqual(
            log_combination_estimate([9, 0], [5, 5]),
            2. * math.log(2.) + math.log(14.) + math.log(5.),
        )


class TestEnumerateElement(unittest.TestCase):
    def test_binomial(self):
        """the terms of 10 carbons are binomially distributed"""
        weights = carbon_weights(10)
        p = weights[1].probability
        terms = sorted(enumerate_element(weights), key=lambda term: term.power)
        self.assertEqual(len(terms), 6)
        for k in range(4):
            expected = math.comb(10, k) * p ** k * (1. - p) ** (10 - k)
            self.assertAlmostEqual(
                terms[k].probability / expected,
                1.,
                places=9,
            )
            self.assertEqual(
                terms[k].power,
                (10 - k) * weights[0].power + k * weights[1].power,
            )
        self.assertAlmostEqual(
            sum(term.probability for term in terms),
            1.,
            places=8,
        )

    def test_single_isotope(self):
        weights = build_isotope_weights({'F': 3})[0]
        terms = enumerate_element(weights)
        self.assertEqual(len(terms), 1)
        self.assertEqual(terms[0].probability, 1.)
        self.assertEqual(terms[0].power, 3 * weights[0].power)

    def test_min_probability(self):
        terms = enumerate_element(carbon_weights(10), min_probability=1e-2)
        self.assertEqual(len(terms), 2)
        self.assertTrue(all(term.probability >= 1e-2 for term in terms))
        self.assertEqual(
            enumerate_element(carbon_weights(10), min_probability=1.),
            [],
        )

    def test_three_isotopes(self):
        weights = build_isotope_weights({'O': 20})[0]
        terms = enumerate_element(weights)
        self.assertAlmostEqual(
            sum(term.probability for term in terms),
            1.,
            places=6,
        )
        most_probable = max(terms, key=lambda term: term.probability)
        self.assertEqual(most_probable.power, 20 * weights[0].power)
        self.assertAlmostEqual(
            most_probable.probability,
            weights[0].probability ** 20,
            places=12,
        )

    def test_budget(self):
        with self.assertRaises(IterationBudgetExceeded):
            enumerate_element(carbon_weights(10), budget=IterationBudget(2))
        budget = IterationBudget(100)
        enumerate_element(carbon_weights(10), budget=budget)
        self.assertEqual(budget.spent, 6)  # only combinations leaving 0-5 13C atoms are evaluated
        self.assertEqual(budget.remaining, 94)

    def test_feasible_combinations_only(self):
        weights = build_isotope_weights({'Sn': 8})[0]
        budget = IterationBudget()
        terms = enumerate_element(weights, budget=budget)
        self.assertGreaterEqual(budget.spent, len(terms))
        self.assertLessEqual(budget.spent, 2 * len(terms))
        self.assertAlmostEqual(
            sum(term.probability for term in terms),
            1.,
            places=6,
        )

    def test_matches_full_product(self):
        """the bounded walk yields the same combinations as filtering the full product of the windows"""
        atoms = 3
        weights = build_isotope_weights({'Sn': atoms})[0]
        means, stds = isotope_windows(weights)
        windows = [
            range(max(0, mean - std), min(mean + std, atoms) + 1) for mean, std in zip(means[:-1], stds[:-1])
        ]
        expected = []
        for counts in itertools.product(*windows):
            last = atoms - sum(counts)
            if not max(0, means[-1] - stds[-1]) <= last <= means[-1] + stds[-1]:
                continue
            probability = math.factorial(atoms)
            for weight, count in zip(weights, counts + (last,)):
                probability *= weight.probability ** count / math.factorial(count)
            expected.append(probability)

        terms = enumerate_element(weights)
        self.assertEqual(len(terms), len(expected))
        for calculated, value in zip(sorted(term.probability for term in terms), sorted(expected)):
            self.assertAlmostEqual(calculated / value, 1., places=9)


class TestUnsupportedSize(unittest.TestCase):
    def test_tin_cluster(self):
        weights = build_isotope_weights({'Sn': 20})[0]
        with self.assertRaises(UnsupportedSizeError) as context:
            check_enumerable(weights)
        self.assertEqual(context.exception.element, 'Sn')
        self.assertGreater(context.exception.log_size, MAX_LOG_COMBINATIONS)
        with self.assertRaises(UnsupportedSizeError):
            enumerate_element(weights)

    def test_too_many_isotopes(self):
        mass_data = {
            'Xx': {
                0: (100., 1.),
                **{100 + i: (100. + i, 1. / 11.) for i in range(11)},
            },
        }
        weights = build_isotope_weights({'Xx': 2}, mass_data=mass_data)[0]
        self.assertEqual(len(weights), 11)
        with self.assertRaises(UnsupportedSizeError) as context:
            check_enumerable(weights)
        self.assertEqual(context.exception.element, 'Xx')
        self.assertIsInstance(context.exception, ValueError)

    def test_enumerable(self):
        means, stds = check_enumerable(carbon_weights(100))
        self.assertEqual(means, [98, 1])


if __name__ == '__main__':
    unittest.main()
