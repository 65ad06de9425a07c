"""
Merging of terms whose masses are closer than the merge resolution.
"""
from .config import MASS_RESOLUTION
from .scripttime import st
from .terms import Term

# number of passes with thresholds k/8 of the merge resolution (the final pass uses 101% of it)
MERGE_PASSES = 9


def merge_thresholds(merge_resolution: float):
    """
    The mass thresholds (Da) of the successive merge passes.

    :param merge_resolution: merge resolution
    :rtype: list of float
    """
    return [
        k * merge_resolution / 8. if k <= 8 else merge_resolution + merge_resolution / 100.
        for k in range(1, MERGE_PASSES + 1)
    ]


@st.profilefn
def merge_terms(terms: list, merge_resolution: float, mass_resolution: float = MASS_RESOLUTION):
    """
    Combines terms whose masses are within the merge resolution of each other. Terms are sorted by power, then
    passes with increasing thresholds are performed. In each pass, every remaining term absorbs the following terms
    within the threshold of its (running, probability-weighted) mass; absorbed terms are marked with a probability
    of zero and removed at the end.

    A merged list is a fixed point of this function.

    :param terms: terms to merge
    :param merge_resolution: merge resolution (Da)
    :param mass_resolution: mass resolution of the term powers (Da)
    :return: merged terms sorted by power
    :rtype: list of Term
    """
    terms = sorted(
        (term for term in terms if term.probability != 0.),
        key=lambda term: term.power,
    )
    powers = [term.power for term in terms]
    probabilities = [term.probability for term in terms]
    count = len(terms)

    for threshold in merge_thresholds(merge_resolution):
        for i in range(count):
            if probabilities[i] == 0.:
                continue
            power = powers[i]
            weighted = power * probabilities[i]
            total = probabilities[i]
            absorbed = False
            for j in range(i + 1, count):
                if probabilities[j] == 0.:
                    continue
                if abs(power - powers[j]) * mass_resolution > threshold:
                    break
                weighted += powers[j] * probabilities[j]
                total += probabilities[j]
                power = weighted / total
                probabilities[j] = 0.
                absorbed = True
            if absorbed is True:
                powers[i] = power
                probabilities[i] = total

    return [
        Term(power, probability)
        for power, probability in zip(powers, probabilities)
        if probability != 0.
    ]
