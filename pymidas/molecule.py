"""
Molecule class: a composition with its masses and (cached) isotopic distributions.
"""
import sys
import copy
from .composition import (
    check_in_mass_dict,
    molecular_weight,
    monoisotopic_mass,
    string_to_isotope,
)
from .config import Configuration, VERBOSE
from .distribution import compute_distribution, molecular_weight_error, pattern_molecular_weight
from .mass_dictionaries import nist_mass


class Molecule(object):
    def __init__(self,
                 composition: dict,
                 mass_data: dict = nist_mass,
                 verbose: bool = VERBOSE,
                 ):
        """
        Calculates the masses and isotopic distribution of a molecule.

        :param composition: A dictionary where each key is an element or isotope with its value being the number of
            each of the elements or isotopes. e.g. the molecule CH4 would have the composition
            ``{'C': 1, 'H': 4}``. Isotopes may be specified in isotope-element format (e.g. ``'13C'``).
        :param mass_data: The mass dictionary to use for calculations.
        :param verbose: chatty mode
        """
        self.mass_data = mass_data
        self.verbose = verbose
        self._distributions = {}
        self.composition = composition
        if self.verbose is True:
            self.print_details()

    def __repr__(self):
        return f'{self.__class__.__name__}({self.molecular_formula})'

    def __str__(self):
        return self.__repr__()

    def __contains__(self, item):
        if type(item) == str:
            return item in self._comp
        elif type(item) == dict:
            return all([
                element in self._comp and self._comp[element] >= num for element, num in item.items()
            ])
        elif isinstance(item, Molecule):
            return self.__contains__(item.composition)
        raise TypeError(f'The item {item} is not a recognized type for containment checks. Type: {type(item)}')

    def __iter__(self):
        for element in self._comp:
            yield element

    def __eq__(self, other):
        if isinstance(other, Molecule):
            other = other.composition
        if type(other) != dict:
            return NotImplemented
        return {k: v for k, v in self._comp.items() if v != 0} == {k: v for k, v in other.items() if v != 0}

    def __hash__(self):
        return hash(self.molecular_formula)

    def __reduce__(self):
        """pickle support"""
        return (
            self.__class__,
            (self.composition, self.mass_data, self.verbose),
        )

    def _other_composition(self, other):
        if isinstance(other, Molecule):
            return other.composition
        elif type(other) == dict:
            return other
        raise ValueError(f'Combination of {other} with {self} is invalid')

    def __add__(self, other):
        """Adds the composition of another Molecule instance or composition dictionary."""
        new = copy.copy(self._comp)
        for key, number in self._other_composition(other).items():
            new[key] = new.get(key, 0) + number
        return self.__class__(new, self.mass_data)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """
        Subtracts the composition of another Molecule instance or composition dictionary. The number of any element
        may not fall below zero.
        """
        new = copy.copy(self._comp)
        for key, number in self._other_composition(other).items():
            if key not in new or new[key] - number < 0:
                raise ValueError(
                    f'Subtraction of {number} {key} from {self} would yield a negative number of that element.'
                )
            new[key] -= number
        return self.__class__(new, self.mass_data)

    def __mul__(self, other):
        """allows integer multiplication of the composition"""
        if type(other) != int:
            raise ValueError(f'Non-integer multiplication of a {self.__class__.__name__} object is unsupported')
        return self.__class__(
            {key: number * other for key, number in self._comp.items()},
            self.mass_data,
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    @property
    def composition(self):
        """Composition dictionary"""
        return self._comp

    @composition.setter
    def composition(self, dct):
        if type(dct) != dict:
            raise TypeError('The composition must be a dictionary')
        check_in_mass_dict(dct, self.mass_data)
        self._comp = copy.copy(dct)
        self._distributions = {}

    @property
    def molecular_formula(self):
        """Molecular formula of the molecule (Hill order, isotopes in bracketed isotope-element format)"""
        out = ''
        for key in ['C', 'H']:  # carbon and hydrogen first according to hill formula
            number = self._comp.get(key, 0)
            if number > 0:
                out += f'{key}{number}' if number > 1 else key
        for key, number in sorted(self._comp.items()):  # alphabetically otherwise
            if key in ['C', 'H'] or number == 0:
                continue
            if key in self.mass_data:
                out += f'{key}{number}' if number > 1 else key
            else:
                ele, iso = string_to_isotope(key)
                out += f'({iso}{ele})'
                out += f'{number}' if number > 1 else ''
        return out

    @property
    def molecular_weight(self):
        """Molecular weight (average mass) of the molecule"""
        return molecular_weight(self._comp, self.mass_data)

    @property
    def monoisotopic_mass(self):
        """The mass of the molecule composed of the principal isotope of each element"""
        return monoisotopic_mass(self._comp, self.mass_data)

    def isotopic_distribution(self, config: Configuration = None):
        """
        The fine-grained isotopic distribution of the molecule. Distributions are cached per configuration.

        :param config: calculation settings
        :rtype: Spectrum
        """
        if config is None:
            config = Configuration(verbose=self.verbose)
        if config not in self._distributions:
            self._distributions[config] = compute_distribution(self._comp, config, mass_data=self.mass_data)
        return copy.copy(self._distributions[config])

    def distribution_error(self, config: Configuration = None):
        """
        The relative error between the molecular weight implied by the isotopic distribution and the molecular weight
        calculated from the average element masses.

        :param config: calculation settings
        :rtype: float
        """
        return molecular_weight_error(
            pattern_molecular_weight(self.isotopic_distribution(config)),
            self.molecular_weight,
        )

    def print_details(self):
        """prints the details of the molecule"""
        sys.stdout.write(f'{self}\n')
        sys.stdout.write(f'formula: {self.molecular_formula}\n')
        sys.stdout.write(f'molecular weight: {round(self.molecular_weight, 6)}\n')
        sys.stdout.write(f'monoisotopic mass: {round(self.monoisotopic_mass, 6)}\n')
