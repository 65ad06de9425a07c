"""
Enumeration of the statistically significant isotope combinations of a single element.

For an element with n atoms and isotopes of probability p_i, the number of atoms of each isotope follows a multinomial
distribution. Only the counts within a window of a few standard deviations around the expected count n * p_i are
enumerated; the probability of every combination in the window is calculated exactly.
"""
import math
import logging
from tqdm import tqdm
from .budget import IterationBudget
from .config import MIN_PROBABILITY, VERBOSE
from .exceptions import UnsupportedSizeError
from .factorial import LOG_FACTORIAL
from .scripttime import st
from .terms import Term

logger = logging.getLogger(__name__)

# number of standard deviations spanned on either side of the mean count
SPREAD_FACTOR = 10
# constant widening of each window
ADD_CONSTANT = 1
# widening used for elements with at least LARGE_ATOM_COUNT atoms
LARGE_ADD_CONSTANT = 10
LARGE_ATOM_COUNT = 200
# ceiling on the (log) number of combinations that may be enumerated for an element
MAX_LOG_COMBINATIONS = math.log(1e13)
# elements with more isotopes than this are not supported
MAX_ISOTOPES = 10


def isotope_windows(weights: list):
    """
    Determines the expected count and the window half-width of each isotope of an element.

    :param weights: isotope weights of the element
    :return: means, half-widths
    :rtype: tuple of list
    """
    atoms = weights[0].atoms
    add = LARGE_ADD_CONSTANT if atoms >= LARGE_ATOM_COUNT else ADD_CONSTANT
    means = []
    stds = []
    for weight in weights:
        p = weight.probability
        means.append(int(atoms * p))
        stds.append(int(math.ceil(add + SPREAD_FACTOR * math.sqrt(atoms * p * (1. - p)))))
    return means, stds


def log_combination_estimate(means: list, stds: list):
    """
    Estimates the natural logarithm of the number of isotope combinations spanned by the windows.

    :param means: expected isotope counts
    :param stds: window half-widths
    :rtype: float
    """
    return len(means) * math.log(2.) + sum(math.log(mean + std) for mean, std in zip(means, stds))


def check_enumerable(weights: list):
    """
    Raises ``UnsupportedSizeError`` if the isotope combinations of the element cannot be enumerated.

    :param weights: isotope weights of the element
    :return: means and window half-widths of the isotopes
    """
    element = weights[0].element
    if len(weights) > MAX_ISOTOPES:
        raise UnsupportedSizeError(
            element,
            float(len(weights)),
            f'{len(weights)} isotopes exceeds the supported maximum of {MAX_ISOTOPES}',
        )
    means, stds = isotope_windows(weights)
    log_size = log_combination_estimate(means, stds)
    if log_size > MAX_LOG_COMBINATIONS:
        raise UnsupportedSizeError(
            element,
            log_size,
            f'an estimated {math.exp(log_size):.3g} isotope combinations exceeds the limit of '
            f'{math.exp(MAX_LOG_COMBINATIONS):.3g}',
        )
    return means, stds


@st.profilefn
def enumerate_element(weights: list,
                      min_probability: float = MIN_PROBABILITY,
                      log_factorial=LOG_FACTORIAL,
                      budget: IterationBudget = None,
                      verbose: bool = VERBOSE,
                      ):
    """
    Enumerates the significant isotope combinations of an element and calculates their exact multinomial
    probabilities.

    :param weights: isotope weights of the element (all with the same atom count)
    :param min_probability: combinations less probable than this are discarded
    :param log_factorial: log(n!) table
    :param budget: optional iteration budget
    :param verbose: chatty mode
    :return: unmerged terms of the element
    :rtype: list of Term
    """
    atoms = weights[0].atoms
    element = weights[0].element
    if len(weights) == 1:  # a single isotope can only be arranged one way
        return [Term(atoms * weights[0].power, 1.)]

    means, stds = check_enumerable(weights)

    # the count of the last isotope is implied by the others
    mins = [max(0, mean - std) for mean, std in zip(means[:-1], stds[:-1])]
    maxs = [min(mean + std, atoms) for mean, std in zip(means[:-1], stds[:-1])]
    last_min = max(0, means[-1] - stds[-1])
    last_max = means[-1] + stds[-1]
    last = weights[-1]

    # per-count contributions of each enumerated isotope to the log probability and the power
    log_contributions = []
    power_contributions = []
    for weight, low, high in zip(weights, mins, maxs):
        log_contributions.append([
            count * weight.log_probability - log_factorial[count] for count in range(low, high + 1)
        ])
        power_contributions.append([count * weight.power for count in range(low, high + 1)])

    dims = len(mins)
    # range of the number of atoms shared by the enumerated isotopes
    shared_min = atoms - last_max
    shared_max = atoms - last_min
    # least and most atoms the isotopes after each position can hold
    after_min = [sum(mins[i + 1:]) for i in range(dims)]
    after_max = [sum(maxs[i + 1:]) for i in range(dims)]

    stage = f'enumeration of {element}'
    log_atoms = log_factorial[atoms]
    indices = list(mins)
    highs = list(maxs)
    partial = [0] * (dims + 1)  # partial[i] is the number of atoms assigned before position i
    terms = []
    visited = 0
    pending = 0  # combinations evaluated since the last carry
    position = 0
    descend = True
    with tqdm(desc=f'enumerating {element} combinations', disable=not verbose) as progress:
        while position >= 0:
            if descend:
                # only counts that leave a feasible number of atoms for the remaining isotopes
                low = max(mins[position], shared_min - partial[position] - after_max[position])
                high = min(maxs[position], shared_max - partial[position] - after_min[position])
                if low > high:
                    position -= 1
                    descend = False
                    continue
                indices[position] = low
                highs[position] = high
            else:
                indices[position] += 1
                if indices[position] > highs[position]:  # carry
                    position -= 1
                    if pending > 0:
                        if budget is not None:
                            budget.spend(pending, stage)
                        progress.update(pending)
                        visited += pending
                        pending = 0
                    continue
            partial[position + 1] = partial[position] + indices[position]
            if position < dims - 1:
                position += 1
                descend = True
                continue

            pending += 1
            descend = False
            count = atoms - partial[dims]
            log_p = log_atoms - log_factorial[count] + count * last.log_probability
            power = count * last.power
            for i in range(dims):
                offset = indices[i] - mins[i]
                log_p += log_contributions[i][offset]
                power += power_contributions[i][offset]
            probability = math.exp(log_p)
            if probability > 0. and probability >= min_probability:
                terms.append(Term(power, probability))

    logger.debug(
        f'{element}{atoms}: means {means}, half-widths {stds}, {visited} combinations, {len(terms)} terms kept'
    )
    return terms
