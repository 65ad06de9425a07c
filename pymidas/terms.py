"""
The term: a (quantized mass, probability) pair, the unit manipulated by the fine-grained polynomial calculations.
"""
from collections import namedtuple
import numpy as np

Term = namedtuple('Term', ['power', 'probability'])
Term.__doc__ = """
A term of an isotope polynomial.

:param float power: probability-weighted mass expressed in units of the mass resolution
:param float probability: probability of the term (0 marks a discarded term)
"""


def terms_to_arrays(terms):
    """
    Converts a list of terms to power and probability arrays.

    :param list terms: terms
    :return: powers, probabilities
    :rtype: tuple of numpy.ndarray
    """
    if len(terms) == 0:
        return np.zeros(0), np.zeros(0)
    arr = np.asarray(terms, dtype=np.float64)
    return arr[:, 0], arr[:, 1]


def arrays_to_terms(powers, probabilities):
    """Converts paired power and probability arrays to a list of terms."""
    return [Term(power, probability) for power, probability in zip(powers.tolist(), probabilities.tolist())]
