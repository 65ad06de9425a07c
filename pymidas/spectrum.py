"""
The calculated isotopic distribution: an ordered list of mass and intensity pairs.

Once calculated, a ``Spectrum`` behaves like a sequence of ``(mass, intensity)`` pairs sorted by mass. Calling
``Spectrum.trim()`` returns the ``[[mass values], [intensity values]]`` paired-list format used throughout the package.
Other manipulations (normalization, thresholding, keeping the top peaks) are available, see below for details.
"""
import numbers
import numpy as np
from bisect import bisect_left as bl, bisect_right as br


def weighted_average(xvals, yvals):
    """
    The intensity-weighted mean of paired mass and intensity values.

    :param list xvals: masses
    :param list yvals: intensities
    :return: weighted mean mass, total intensity
    :rtype: tuple of float
    """
    total = sum(yvals)
    if total == 0:  # unweighted mean when there is no intensity
        return sum(xvals) / len(xvals), 0.
    return sum(x * y for x, y in zip(xvals, yvals)) / total, total


class Spectrum(object):
    def __init__(self, masses=None, intensities=None):
        """
        A mass spectrum of discrete peaks sorted by ascending mass.

        :param list masses: mass (*x*) values. These may be unsorted, but are assumed to be paired with *intensities*.
        :param list intensities: intensity (*y*) values paired with *masses*.

        **Basic Examples**

        >>> spec = Spectrum([13.00335, 12.], [0.0107, 0.9893])
        >>> spec.trim()
        [[12.0, 13.00335], [0.9893, 0.0107]]
        >>> len(spec)
        2
        >>> spec[0]
        [12.0, 0.9893]
        >>> spec.normalize(1.)
        >>> spec.max()
        (12.0, 1.0)
        """
        if masses is None:
            masses = []
        if intensities is None:
            intensities = []
        if len(masses) != len(intensities):
            raise ValueError(
                f'The dimensions of the supplied lists are not equal ({len(masses)} != {len(intensities)})'
            )
        pairs = sorted(zip(masses, intensities))
        self.x = [float(x) for x, _ in pairs]
        self.y = [float(y) for _, y in pairs]

    def __str__(self):
        if len(self) == 0:
            return f'Empty {self.__class__.__name__}'
        return f'{self.__class__.__name__} of {len(self)} peaks from {self.x[0]:.6f} to {self.x[-1]:.6f}'

    def __repr__(self):
        return f'{self.__class__.__name__}({len(self)} peaks)'

    def __getinitargs__(self):
        return (
            list(self.x),
            list(self.y),
        )

    def __reduce__(self):
        return (
            self.__class__,
            self.__getinitargs__()
        )

    def __copy__(self):
        return Spectrum(
            *self.__getinitargs__()
        )

    def __deepcopy__(self, memodict={}):
        return self.__copy__()

    def __len__(self):
        return len(self.x)

    def __iter__(self):
        for x, y in zip(self.x, self.y):
            yield x, y

    def __eq__(self, other):
        if not isinstance(other, Spectrum):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __getitem__(self, ind):
        """
        an integer index returns the [mass, intensity] pair at that position
        a float returns the intensity of the peak nearest to that mass
        """
        if isinstance(ind, numbers.Integral):
            return [self.x[ind], self.y[ind]]
        elif isinstance(ind, numbers.Real):
            if len(self) == 0:
                raise IndexError(f'The {self.__class__.__name__} instance is empty')
            return self.y[self.nearest_x_index(float(ind))]
        raise TypeError(f'{self.__class__.__name__} indices must be integers or floats, not {type(ind)}')

    @property
    def masses(self):
        """mass values as an array"""
        return np.asarray(self.x, dtype=np.float64)

    @property
    def intensities(self):
        """intensity values as an array"""
        return np.asarray(self.y, dtype=np.float64)

    def index(self, xval):
        """
        The position at which the mass would be inserted to keep the masses sorted.

        :param float xval: mass
        :rtype: int
        """
        return bl(self.x, xval)

    def nearest_x_index(self, xval):
        """
        The index of the peak whose mass is closest to *xval* (unlike ``index()``, which gives the insertion point).

        :param float xval: mass
        :rtype: int
        """
        right = self.index(xval)
        if right == len(self.x):
            return right - 1
        if right == 0:
            return 0
        left = right - 1
        return left if xval - self.x[left] <= self.x[right] - xval else right

    def keep_top_n(self, n=5000):
        """
        Drops all but the n most intense peaks. Peaks tied with the nth most intense peak are all kept.

        :param int n: number of peaks to keep
        """
        if n >= len(self.x):  # do nothing if number is longer than the number of values in the Spectrum object
            return
        self.threshold(
            sorted(
                self.y,
                reverse=True,
            )[n - 1],  # the nth largest value is the lowest kept
            'abs',
        )

    def max(self):
        """
        The base peak of the spectrum.

        :return: mass, intensity
        :rtype: tuple of float
        """
        if len(self.y) == 0:
            raise ValueError(f'The {self.__class__.__name__} instance is empty')
        index = int(np.argmax(self.y))
        return self.x[index], self.y[index]

    def normalize(self, new_top=1.):
        """
        Normalizes the y values so that the maximum y value is the specified value.

        :param float new_top: The new value for the maximum y value.
        """
        if len(self.y) == 0:
            return
        top = max(self.y)
        self.y = [inten / top * new_top for inten in self.y]

    def normalize_sum(self, new_sum=1.):
        """
        Normalizes the y values so that their sum is the specified value.

        :param float new_sum: The new value for the sum of the y values.
        """
        if len(self.y) == 0:
            return
        total = self.sum()
        self.y = [inten / total * new_sum for inten in self.y]

    def sum(self):
        """total intensity"""
        return sum(self.y)

    def average_mass(self):
        """
        The intensity-weighted average mass of the spectrum.

        :rtype: float
        """
        if len(self.y) == 0:
            raise ValueError(f'The {self.__class__.__name__} instance is empty')
        return weighted_average(self.x, self.y)[0]

    def threshold(self, thresh, method='abs'):
        """
        Drops peaks less intense than the threshold.

        :param float thresh: intensity threshold
        :param 'abs' or 'rel' method: whether *thresh* is an absolute intensity or a fraction of the base peak
        """
        if method not in ['abs', 'rel']:
            raise ValueError(f'The threshold method "{method}" is invalid. Choose from abs, rel')
        if len(self.y) == 0:
            return
        if method == 'rel':
            thresh *= max(self.y)
        kept = [(x, y) for x, y in zip(self.x, self.y) if y >= thresh]
        self.x = [x for x, _ in kept]
        self.y = [y for _, y in kept]

    def trim(self, xbounds=None):
        """
        Returns the spectrum as paired lists.

        :param list xbounds: This can specify a subsection of the x and y spectra to trim to. None will return the
            entire contents of the Spectrum object, and specifying ``[x1,x2]]`` will return the x and y lists between
            *x1* and *x2* (inclusive).
        :return: trimmed spectrum in the form ``[[x values], [y values]]``
        :rtype: list of lists
        """
        if xbounds is None:
            return [list(self.x), list(self.y)]
        start = 0 if xbounds[0] is None else self.index(xbounds[0])
        end = len(self.x) if xbounds[1] is None else br(self.x, xbounds[1])
        return [self.x[start:end], self.y[start:end]]
