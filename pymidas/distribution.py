"""
Fine-grained isotopic distribution calculation.

The calculation follows the polynomial method of MIDAs:

    Molecular Isotopic Distribution Analysis (MIDAs) with Adjustable Mass Accuracy.
    Gelio Alves, Aleksy Y. Ogurtsov, and Yi-Kuo Yu
    J. Am. Soc. Mass Spectrom. (2014) 25:57-70
    DOI: 10.1007/s13361-013-0733-7

1. The isotopes of every element are weighted by their normalized natural abundance.
2. The significant isotope combinations of each element are enumerated with exact multinomial probabilities.
3. Combinations of each element closer in mass than the merge resolution are merged.
4. The element polynomials are multiplied together, accumulating terms into buckets of half the fine resolution.
5. The combined polynomial is merged once more and converted to a normalized spectrum.
"""
import logging
from tqdm import tqdm
from .budget import IterationBudget
from .composition import (
    build_isotope_weights,
    check_in_mass_dict,
    monoisotopic_mass,
    select_resolution,
    total_atoms,
)
from .config import Configuration, Normalization, MASS_RESOLUTION
from .convolution import fold_terms
from .enumeration import check_enumerable, enumerate_element
from .factorial import LOG_FACTORIAL
from .mass_dictionaries import nist_mass
from .merging import merge_terms
from .spectrum import Spectrum

logger = logging.getLogger(__name__)


def normalize_terms(terms: list,
                    mass_resolution: float = MASS_RESOLUTION,
                    normalization: (str, Normalization) = Normalization.SUM,
                    top_n_peaks: int = None,
                    ):
    """
    Converts terms to a spectrum sorted by mass with normalized intensities.

    :param terms: terms of the molecule
    :param mass_resolution: mass resolution of the term powers (Da)
    :param normalization: 'sum' (intensities sum to 1) or 'base_peak' (maximum intensity of 1)
    :param top_n_peaks: if specified, only the n most probable terms are kept
    :return: normalized spectrum
    :rtype: Spectrum
    """
    normalization = Normalization(normalization)
    terms = [term for term in terms if term.probability != 0.]
    if len(terms) == 0:
        return Spectrum()
    if top_n_peaks is not None and len(terms) > top_n_peaks:
        terms = sorted(terms, key=lambda term: term.probability, reverse=True)[:top_n_peaks]

    total_probability = sum(term.probability for term in terms)
    base_peak = max(term.probability for term in terms)
    if normalization is Normalization.SUM:
        divisor = total_probability
    else:
        divisor = base_peak
    logger.debug(f'{len(terms)} peaks, total probability {total_probability}, base peak {base_peak}')
    return Spectrum(
        [term.power * mass_resolution for term in terms],
        [term.probability / divisor for term in terms],
    )


def fine_grained_terms(composition: dict,
                       config: Configuration = None,
                       mass_data: dict = nist_mass,
                       log_factorial=LOG_FACTORIAL,
                       ):
    """
    Calculates the merged (unnormalized) terms of the isotopic distribution of a composition.

    :param composition: composition dictionary
    :param config: calculation settings (defaults are used if not specified)
    :param mass_data: mass dictionary
    :param log_factorial: log(n!) table
    :return: terms sorted by power
    :rtype: list of Term
    """
    if config is None:
        config = Configuration()
    if not isinstance(composition, dict):
        raise TypeError(f'The composition must be a dictionary (got {type(composition)})')
    check_in_mass_dict(composition, mass_data)
    if total_atoms(composition) == 0:
        return []

    resolution, merge_resolution = select_resolution(
        config.fine_resolution,
        monoisotopic_mass(composition, mass_data),
    )
    elemental = build_isotope_weights(composition, config.mass_resolution, mass_data)
    for weights in elemental:  # fail before any enumeration is performed
        if len(weights) > 1:
            check_enumerable(weights)

    budget = IterationBudget(config.max_iterations)
    term_lists = []
    for weights in tqdm(elemental, desc='enumerating elements', disable=not config.verbose):
        terms = enumerate_element(
            weights,
            min_probability=config.min_probability,
            log_factorial=log_factorial,
            budget=budget,
            verbose=config.verbose,
        )
        term_lists.append(merge_terms(terms, merge_resolution, config.mass_resolution))

    combined = fold_terms(
        term_lists,
        resolution,
        mass_resolution=config.mass_resolution,
        min_probability=config.min_probability,
        budget=budget,
        verbose=config.verbose,
    )
    return merge_terms(combined, merge_resolution, config.mass_resolution)


def compute_distribution(composition: dict,
                         config: Configuration = None,
                         mass_data: dict = nist_mass,
                         log_factorial=LOG_FACTORIAL,
                         ):
    """
    Calculates the fine-grained isotopic distribution of a composition.

    :param composition: composition dictionary, e.g. ``{'C': 2, 'H': 3, 'N': 1, 'O': 1}``. Isotope labels such as
        ``'13C'`` designate a single isotope.
    :param config: calculation settings (defaults are used if not specified)
    :param mass_data: mass dictionary
    :param log_factorial: log(n!) table
    :return: the isotopic distribution (empty if the composition contains no atoms)
    :rtype: Spectrum
    :raises UnsupportedSizeError: if an element has too many isotope combinations to enumerate at the requested
        resolution
    :raises IterationBudgetExceeded: if the configured iteration budget is exhausted

    >>> spectrum = compute_distribution({'C': 2, 'H': 3, 'N': 1, 'O': 1})
    >>> round(spectrum.max()[0], 6)
    57.021464
    """
    if config is None:
        config = Configuration()
    terms = fine_grained_terms(composition, config, mass_data=mass_data, log_factorial=log_factorial)
    return normalize_terms(
        terms,
        mass_resolution=config.mass_resolution,
        normalization=config.normalization,
        top_n_peaks=config.top_n_peaks,
    )


def pattern_molecular_weight(spectrum: Spectrum, charge: int = 1):
    """
    Calculates the molecular weight given by an isotope pattern.

    :param spectrum: isotope pattern
    :param charge: charge for the molecule
    :return: molecular weight
    :rtype: float
    """
    return spectrum.average_mass() * charge


def molecular_weight_error(calculated: float, expected: float):
    """
    Calculate the error between a calculated and expected molecular weight. This method may be used as a validation
    tool for calculated isotope patterns.

    :param calculated: calculated molecular weight (derived from an isotope pattern)
    :param expected: expected (true) molecular weight (derived from the molecular weights of the constituent elements)
    :return: Calculated error. Typically a difference of 3 parts per million (3*10^-6) is deemed an acceptable
        error.
    :rtype: float
    """
    return (calculated - expected) / expected
