"""Exceptions raised by the isotopic distribution calculators."""


class UnsupportedSizeError(ValueError):
    """
    Raised when the isotope combinations of an element are too numerous to enumerate at fine resolution.

    :param str element: the element (or isotope label) responsible
    :param float log_size: the estimated natural logarithm of the number of combinations (or the number of isotopes
        when the element has too many isotopes to be handled)
    :param str reason: explanation of the limit that was hit
    """

    def __init__(self, element: str, log_size: float, reason: str):
        self.element = element
        self.log_size = log_size
        super().__init__(
            f'The isotope distribution of element "{element}" cannot be calculated at fine resolution: {reason}. '
            f'Try a coarser fine_resolution.'
        )


class IterationBudgetExceeded(RuntimeError):
    """Raised when a calculation performs more iterations than its configured budget allows."""

    def __init__(self, budget: int, stage: str):
        self.budget = budget
        self.stage = stage
        super().__init__(f'The iteration budget of {budget} was exceeded during {stage}.')
