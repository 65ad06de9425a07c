"""
Interpretation of elemental compositions and construction of the per-element isotope weights.

A composition is a dictionary of the form ``{'C': 2, 'H': 3, 'N': 1, 'O': 1}``. Keys are either element symbols
(natural isotope abundances are used) or isotope labels (``'13C'``, ``'C13'`` or ``'C{13}'``) designating a single
isotope with 100% abundance.
"""
import re
import math
import logging
from .config import MASS_RESOLUTION
from .mass_dictionaries import nist_mass

logger = logging.getLogger(__name__)

# isotope-element (13C) and element-isotope (C13, C{13}) label formats
_ISOTOPE_ELEMENT = re.compile(r'(?P<isotope>\d+)(?P<element>[A-Z][a-z]*)')
_ELEMENT_ISOTOPE = re.compile(r'(?P<element>[A-Z][a-z]*)\{?(?P<isotope>\d+)\}?')

# mass ceilings (Da) below which each finer resolution tier is permitted
TIER_CEILINGS = {
    1e-4: 1e5,
    1e-3: 1e6,
    1e-2: 2e6,
}
# merge resolution used when nominal (>= 1 Da) resolution is requested
NOMINAL_MERGE_RESOLUTION = 1. - 0.022


def string_to_isotope(string: str):
    """
    Interprets an isotope label as an element, isotope combination (e.g. "13C" or "C13" becomes 'C', 13). Raises a
    ValueError if the string cannot be interpreted as such.

    :param string: string to interpret
    :return: element, isotope
    :rtype: (str, int)
    """
    for pattern in [_ISOTOPE_ELEMENT, _ELEMENT_ISOTOPE]:
        match = pattern.fullmatch(string)
        if match is not None:
            return match.group('element'), int(match.group('isotope'))
    raise ValueError(
        f'The string "{string}" could not be interpreted as an element, isotope combination. Use isotope/element '
        f'format e.g. "13C"'
    )


def check_in_mass_dict(comp: dict, mass_data: dict = nist_mass):
    """
    Checks for the presence of the composition keys in the mass dictionary and validates the atom counts. Raises a
    ValueError if a key is not found or a count is negative.

    :param comp: composition dictionary
    :param mass_data: mass dictionary
    """
    for key, number in comp.items():
        if isinstance(number, bool) or not isinstance(number, int):
            try:
                number = number.__index__()  # numpy integers
            except AttributeError:
                raise TypeError(f'The number of "{key}" must be an integer (got {type(number)}).')
        if number < 0:
            raise ValueError(f'The composition may not contain a negative number of "{key}" ({number}).')
        if key in mass_data:
            continue
        if not any(char.isdigit() for char in key):  # an element symbol rather than an isotope label
            raise ValueError(f'The element {key} is not defined in the mass dictionary. Please check your input.')
        ele, iso = string_to_isotope(key)
        if ele not in mass_data:
            raise ValueError(f'The element {ele} is not defined in the mass dictionary. Please check your input.')
        elif iso not in mass_data[ele] or iso == 0:
            raise ValueError(
                f'The element "{ele}" does not have a defined isotope "{iso}" in the mass dictionary. '
                f'Please check your input.'
            )


def element_intensity_list(element: str, mass_data: dict = nist_mass):
    """
    Returns the isotopes of the specified element with non-zero abundance, ordered by ascending mass.

    :param element: element key
    :param mass_data: mass dictionary
    :return: isotope numbers, masses, abundances
    :rtype: list
    """
    if element not in mass_data:
        raise KeyError(f'The element {element} is not defined in the mass dictionary.')
    ele_dict = mass_data[element]
    isotopes = sorted(
        (mass, isotope, abundance)
        for isotope, (mass, abundance) in ele_dict.items()
        if isotope != 0 and abundance > 0.
    )
    return [
        [isotope for _, isotope, _ in isotopes],
        [mass for mass, _, _ in isotopes],
        [abundance for _, _, abundance in isotopes],
    ]


def total_atoms(comp: dict):
    """The total number of atoms in the composition"""
    return sum(comp.values())


def monoisotopic_mass(comp: dict, mass_data: dict = nist_mass):
    """
    The mass of the molecule when every atom is its principal isotope (isotope labels use their own mass).

    :param comp: composition dictionary
    :param mass_data: mass dictionary
    :rtype: float
    """
    em = 0.
    for element, number in comp.items():
        if element in mass_data:
            em += mass_data[element][0][0] * number
        else:
            ele, iso = string_to_isotope(element)
            em += mass_data[ele][iso][0] * number
    return em


def molecular_weight(comp: dict, mass_data: dict = nist_mass):
    """
    The abundance-weighted (average) molecular weight of the composition. Abundances of each element are normalized
    to sum to 1.

    :param comp: composition dictionary
    :param mass_data: mass dictionary
    :rtype: float
    """
    mwout = 0.
    for element, number in comp.items():
        if element in mass_data:
            _, masses, abundances = element_intensity_list(element, mass_data)
            mwout += sum(m * a for m, a in zip(masses, abundances)) / sum(abundances) * number
        else:  # if isotope, assumes 100% abundance
            ele, iso = string_to_isotope(element)
            mwout += mass_data[ele][iso][0] * number
    return mwout


class IsotopeWeight(object):
    def __init__(self,
                 element: str,
                 isotope: int,
                 atoms: int,
                 mass: float,
                 probability: float,
                 mass_resolution: float = MASS_RESOLUTION,
                 ):
        """
        The weight of a single isotope within an element of a composition.

        :param element: element (or isotope label) the isotope belongs to
        :param isotope: isotope number
        :param atoms: number of atoms of the element in the composition
        :param mass: atomic mass of the isotope
        :param probability: normalized abundance of the isotope within its element
        :param mass_resolution: quantization granularity for the power of the isotope
        """
        self.element = element
        self.isotope = isotope
        self.atoms = atoms
        self.mass = mass
        self.probability = probability
        self.log_probability = math.log(probability)
        self.power = float(math.floor(mass / mass_resolution + 0.5))

    def __repr__(self):
        return f'{self.__class__.__name__}({self.isotope}{self.element}, n={self.atoms}, p={self.probability})'


def select_resolution(fine_resolution: float, mono_mass: float):
    """
    Snaps the requested fine resolution to one of the resolution tiers permitted for a molecule of the given mass.

    :param fine_resolution: requested resolution (Da)
    :param mono_mass: approximate monoisotopic mass of the molecule
    :return: bucket resolution (half of the tier resolution, used for convolution), merge resolution
    :rtype: tuple of float
    """
    if fine_resolution >= 1.:
        merge_resolution = NOMINAL_MERGE_RESOLUTION
        fine_resolution = 0.9
    else:
        for tier, ceiling in sorted(TIER_CEILINGS.items()):
            if fine_resolution <= tier and mono_mass < ceiling:
                fine_resolution = tier
                merge_resolution = tier
                break
        else:  # coarse request or very large molecule
            merge_resolution = fine_resolution
            fine_resolution = 1e-2
    logger.info(f'resolution tier {fine_resolution} (merge {merge_resolution}) for mass {mono_mass:.4f}')
    return fine_resolution / 2., merge_resolution


def build_isotope_weights(comp: dict,
                          mass_resolution: float = MASS_RESOLUTION,
                          mass_data: dict = nist_mass,
                          ):
    """
    Generates the normalized isotope weights of each element in the composition. Keys with a count of zero are
    skipped.

    :param comp: composition dictionary
    :param mass_resolution: quantization granularity for the isotope powers
    :param mass_data: mass dictionary
    :return: one list of isotope weights (ordered by mass) per element
    :rtype: list of list of IsotopeWeight
    """
    check_in_mass_dict(comp, mass_data)
    elemental = []
    for element, number in comp.items():
        if number == 0:
            continue
        if element in mass_data:
            isotopes, masses, abundances = element_intensity_list(element, mass_data)
            if len(isotopes) == 0:
                raise ValueError(f'The element {element} has no isotope with a non-zero abundance.')
            total = sum(abundances)
            elemental.append([
                IsotopeWeight(element, isotope, number, mass, abundance / total, mass_resolution)
                for isotope, mass, abundance in zip(isotopes, masses, abundances)
            ])
        else:
            ele, iso = string_to_isotope(element)
            elemental.append([
                IsotopeWeight(element, iso, number, mass_data[ele][iso][0], 1., mass_resolution)
            ])
    return elemental
