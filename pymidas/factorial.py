"""
Lazily grown table of log(n!) values.
"""
import threading
import numpy as np
from scipy.special import gammaln

# largest n held in the table, beyond which log(n!) is evaluated directly
TABLE_LIMIT = 50000


class LogFactorialTable(object):
    def __init__(self, limit: int = TABLE_LIMIT):
        """
        An append-only table of log(n!) values, extended up to the largest n requested so far. Growth is guarded by a
        lock so a single instance may be shared between threads. Values above *limit* are calculated with the log-gamma
        function instead of being stored.

        :param limit: maximum n to store in the table

        >>> lnf = LogFactorialTable()
        >>> lnf[0], lnf[1]
        (0.0, 0.0)
        >>> round(lnf[5], 6) == round(np.log(120), 6)
        True
        """
        self.limit = limit
        self._table = np.zeros(2)  # log(0!), log(1!)
        self._lock = threading.Lock()

    def __repr__(self):
        return f'{self.__class__.__name__}(top={self.top}, limit={self.limit})'

    def __len__(self):
        return len(self._table)

    def __getitem__(self, n):
        if n < 0:
            raise ValueError(f'log factorial is undefined for negative values ({n})')
        if n > self.limit:
            return float(gammaln(n + 1))
        table = self._table
        if n >= len(table):
            table = self.reserve(n)
        return float(table[n])

    @property
    def top(self):
        """The largest n currently held in the table"""
        return len(self._table) - 1

    def reserve(self, n: int):
        """
        Extends the table to hold log(n!) (capped at the table limit).

        :param n: largest value required
        :return: the table array
        """
        n = min(n, self.limit)
        with self._lock:
            table = self._table
            if n >= len(table):
                top = len(table) - 1
                extension = table[top] + np.cumsum(np.log(np.arange(top + 1, n + 1, dtype=np.float64)))
                # arrays already handed out are never mutated
                table = np.concatenate((table, extension))
                self._table = table
        return table


# process-wide table shared by calculations that are not handed their own
LOG_FACTORIAL = LogFactorialTable()
