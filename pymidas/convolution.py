"""
Convolution of the term lists of different elements.
"""
import logging
import numpy as np
from tqdm import tqdm
from .budget import IterationBudget
from .config import MASS_RESOLUTION, MIN_PROBABILITY, VERBOSE
from .scripttime import st
from .terms import arrays_to_terms, terms_to_arrays

logger = logging.getLogger(__name__)

# number of left-hand terms multiplied at once
BLOCK_SIZE = 256


@st.profilefn
def convolve_terms(left: list,
                   right: list,
                   resolution: float,
                   mass_resolution: float = MASS_RESOLUTION,
                   min_probability: float = MIN_PROBABILITY,
                   budget: IterationBudget = None,
                   ):
    """
    Multiplies two term lists. Every pair of terms yields a term with the summed power and the product of the
    probabilities; products are accumulated into buckets spaced by *resolution* (probability-weighted mean power,
    summed probability).

    :param left: terms
    :param right: terms
    :param resolution: bucket spacing (Da)
    :param mass_resolution: mass resolution of the term powers (Da)
    :param min_probability: products less probable than this are discarded
    :param budget: optional iteration budget
    :return: combined terms sorted by power
    :rtype: list of Term
    """
    if len(left) == 0 or len(right) == 0:
        return []
    if budget is not None:
        budget.spend(len(left) * len(right), 'convolution')

    left_powers, left_probabilities = terms_to_arrays(left)
    right_powers, right_probabilities = terms_to_arrays(right)

    delta = resolution / mass_resolution  # bucket spacing in power units
    min_power = left_powers.min() + right_powers.min()
    # powers are accumulated relative to the minimum to preserve precision
    left_offsets = left_powers - left_powers.min()
    right_offsets = right_powers - right_powers.min()
    n_buckets = int(np.floor((left_offsets.max() + right_offsets.max()) / delta + 0.5)) + 1

    weighted = np.zeros(n_buckets)
    totals = np.zeros(n_buckets)
    for start in range(0, len(left_powers), BLOCK_SIZE):
        stop = start + BLOCK_SIZE
        probabilities = np.multiply.outer(left_probabilities[start:stop], right_probabilities).ravel()
        offsets = np.add.outer(left_offsets[start:stop], right_offsets).ravel()
        keep = (probabilities >= min_probability) & (probabilities > 0.)
        probabilities = probabilities[keep]
        offsets = offsets[keep]
        indices = np.floor(offsets / delta + 0.5).astype(np.int64)
        weighted += np.bincount(indices, weights=offsets * probabilities, minlength=n_buckets)
        totals += np.bincount(indices, weights=probabilities, minlength=n_buckets)

    occupied = totals > 0.
    return arrays_to_terms(
        min_power + weighted[occupied] / totals[occupied],
        totals[occupied],
    )


def fold_terms(term_lists: list,
               resolution: float,
               mass_resolution: float = MASS_RESOLUTION,
               min_probability: float = MIN_PROBABILITY,
               budget: IterationBudget = None,
               verbose: bool = VERBOSE,
               ):
    """
    Convolves the term lists of several elements together, left to right.

    :param term_lists: one term list per element
    :param resolution: bucket spacing (Da)
    :param mass_resolution: mass resolution of the term powers (Da)
    :param min_probability: products less probable than this are discarded
    :param budget: optional iteration budget
    :param verbose: chatty mode
    :return: terms of the whole molecule
    :rtype: list of Term
    """
    if len(term_lists) == 0:
        return []
    combined = term_lists[0]
    for terms in tqdm(term_lists[1:], desc='convolving elements', disable=not verbose):
        combined = convolve_terms(
            combined,
            terms,
            resolution,
            mass_resolution=mass_resolution,
            min_probability=min_probability,
            budget=budget,
        )
        logger.debug(f'{len(combined)} terms after convolution')
    return combined
