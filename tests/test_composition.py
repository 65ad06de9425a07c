import unittest
from pymidas.mass_dictionaries import nist_mass
from pymidas.composition import (
    string_to_isotope,
    check_in_mass_dict,
    element_intensity_list,
    monoisotopic_mass,
    molecular_weight,
    select_resolution,
    build_isotope_weights,
)


class TestIsotopeStrings(unittest.TestCase):
    def test_formats(self):
        for string in ['13C', 'C13', 'C{13}']:
            self.assertEqual(
                string_to_isotope(string),
                ('C', 13),
            )
        self.assertEqual(
            string_to_isotope('81Br'),
            ('Br', 81),
        )

    def test_invalid(self):
        for string in ['Carbon', '13', 'c13', '']:
            with self.assertRaises(ValueError):
                string_to_isotope(string)


class TestCheckInMassDict(unittest.TestCase):
    def test_valid(self):
        check_in_mass_dict({'C': 2, 'H': 3, 'N': 1, 'O': 1})
        check_in_mass_dict({'13C': 1, 'H': 0})

    def test_unknown_element(self):
        with self.assertRaisesRegex(ValueError, 'not defined in the mass dictionary'):
            check_in_mass_dict({'Xx': 1})
        with self.assertRaisesRegex(ValueError, 'not defined in the mass dictionary'):
            check_in_mass_dict({'Pt': 1}, mass_data={'C': nist_mass['C']})

    def test_unknown_isotope(self):
        with self.assertRaises(ValueError):
            check_in_mass_dict({'99C': 1})

    def test_negative_count(self):
        with self.assertRaises(ValueError):
            check_in_mass_dict({'C': -1})

    def test_non_integer_count(self):
        with self.assertRaises(TypeError):
            check_in_mass_dict({'C': 1.5})


class TestMasses(unittest.TestCase):
    def test_element_intensity_list(self):
        isotopes, masses, abundances = element_intensity_list('H')
        self.assertEqual(isotopes, [1, 2])  # tritium has no natural abundance
        self.assertEqual(masses, sorted(masses))
        with self.assertRaises(KeyError):
            element_intensity_list('Xx')

    def test_monoisotopic_mass(self):
        self.assertAlmostEqual(
            monoisotopic_mass({'C': 2, 'H': 3, 'N': 1, 'O': 1}),
            57.021464,
            places=6,
        )
        self.assertAlmostEqual(
            monoisotopic_mass({'13C': 1}),
            13.00335483507,
        )

    def test_molecular_weight(self):
        self.assertAlmostEqual(
            molecular_weight({'C': 1}),
            12. * 0.9893 + 13.00335483507 * 0.0107,
        )
        self.assertAlmostEqual(
            molecular_weight({'C12': 2}),
            24.,
        )


class TestResolutionTiers(unittest.TestCase):
    def assertResolution(self, actual, expected):
        for a, e in zip(actual, expected):
            self.assertAlmostEqual(a, e, places=12)

    def test_tiers(self):
        self.assertResolution(select_resolution(1e-2, 57.), (5e-3, 1e-2))
        self.assertResolution(select_resolution(1e-3, 57.), (5e-4, 1e-3))
        self.assertResolution(select_resolution(1e-4, 57.), (5e-5, 1e-4))
        self.assertResolution(select_resolution(1e-5, 57.), (5e-5, 1e-4))

    def test_mass_ceilings(self):
        self.assertResolution(select_resolution(1e-4, 5e5), (5e-4, 1e-3))
        self.assertResolution(select_resolution(1e-4, 1.5e6), (5e-3, 1e-2))
        self.assertResolution(select_resolution(1e-4, 3e6), (5e-3, 1e-4))

    def test_coarse(self):
        self.assertResolution(select_resolution(0.5, 57.), (5e-3, 0.5))
        self.assertResolution(select_resolution(1., 57.), (0.45, 0.978))
        self.assertResolution(select_resolution(5., 57.), (0.45, 0.978))


class TestIsotopeWeights(unittest.TestCase):
    def test_normalized(self):
        elemental = build_isotope_weights({'C': 2, 'H': 3, 'N': 1, 'O': 1})
        self.assertEqual(
            [len(weights) for weights in elemental],
            [2, 2, 2, 3],
        )
        for weights in elemental:
            self.assertAlmostEqual(
                sum(weight.probability for weight in weights),
                1.,
                places=12,
            )
            self.assertEqual(
                [weight.mass for weight in weights],
                sorted(weight.mass for weight in weights),
            )

    def test_power(self):
        carbon = build_isotope_weights({'C': 10})[0]
        self.assertEqual(carbon[0].power, 12e12)
        self.assertEqual(carbon[0].atoms, 10)
        coarse = build_isotope_weights({'C': 10}, mass_resolution=1e-3)[0]
        self.assertEqual(coarse[1].power, 13003.)

    def test_isotope_label(self):
        elemental = build_isotope_weights({'13C': 2})
        self.assertEqual(len(elemental), 1)
        self.assertEqual(len(elemental[0]), 1)
        self.assertEqual(elemental[0][0].probability, 1.)
        self.assertEqual(elemental[0][0].log_probability, 0.)

    def test_zero_count_skipped(self):
        self.assertEqual(
            len(build_isotope_weights({'C': 1, 'H': 0})),
            1,
        )

    def test_no_abundant_isotope(self):
        mass_data = {'Xx': {0: (10., 1.), 10: (10., 0.)}}
        with self.assertRaises(ValueError):
            build_isotope_weights({'Xx': 1}, mass_data=mass_data)


class TestMassDictionary(unittest.TestCase):
    def test_elements(self):
        for element in ['Al', 'Co', 'Cr', 'Mn', 'Ru', 'Rh', 'Pt', 'Ir', 'Au', 'Hg', 'U']:
            self.assertIn(element, nist_mass)
        self.assertNotIn('Tc', nist_mass)  # no naturally occurring isotope

    def test_principal_isotope(self):
        for element, isotopes in nist_mass.items():
            principal = max(
                (abundance, mass) for isotope, (mass, abundance) in isotopes.items() if isotope != 0
            )
            self.assertEqual(isotopes[0], (principal[1], 1.), element)

    def test_abundances(self):
        for element in nist_mass:
            _, _, abundances = element_intensity_list(element)
            self.assertAlmostEqual(sum(abundances), 1., places=3, msg=element)


if __name__ == '__main__':
    unittest.main()
