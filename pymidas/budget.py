"""
Iteration accounting for long-running calculations.
"""
from .exceptions import IterationBudgetExceeded


class IterationBudget(object):
    def __init__(self, limit: int = None):
        """
        Counts iterations spent by a calculation and raises ``IterationBudgetExceeded`` once *limit* is passed.

        :param limit: maximum number of iterations (None for unlimited)
        """
        self.limit = limit
        self.spent = 0

    def __repr__(self):
        return f'{self.__class__.__name__}({self.spent}/{self.limit})'

    @property
    def remaining(self):
        """Iterations left before the budget is exhausted (None if unlimited)"""
        if self.limit is None:
            return None
        return max(self.limit - self.spent, 0)

    def spend(self, iterations: int, stage: str):
        """
        Spends iterations from the budget.

        :param iterations: number of iterations about to be performed
        :param stage: description of the calculation stage (used in the error message)
        """
        self.spent += iterations
        if self.limit is not None and self.spent > self.limit:
            raise IterationBudgetExceeded(self.limit, stage)
