"""
Default values and the configuration object for isotopic distribution calculations.
"""
import enum
import math

# target mass resolution (Da) of the fine-grained distribution
FINE_RESOLUTION = 0.01
# terms less probable than this are discarded
MIN_PROBABILITY = 1e-200
# quantization granularity (Da) of the integer mass "power" of a term
MASS_RESOLUTION = 1e-12
# toggle for tqdm progress bars
VERBOSE = False


class Normalization(str, enum.Enum):
    """Intensity normalization of a calculated spectrum."""

    SUM = 'sum'
    """Intensities sum to 1."""

    BASE_PEAK = 'base_peak'
    """The most intense peak has an intensity of 1."""


VALID_NORMALIZATIONS = [mode.value for mode in Normalization]


class Configuration(object):
    def __init__(self,
                 fine_resolution: float = FINE_RESOLUTION,
                 min_probability: float = MIN_PROBABILITY,
                 mass_resolution: float = MASS_RESOLUTION,
                 normalization: (str, Normalization) = Normalization.SUM,
                 top_n_peaks: int = None,
                 max_iterations: int = None,
                 verbose: bool = VERBOSE,
                 ):
        """
        Settings for a fine-grained isotopic distribution calculation. Values are validated on assignment.

        :param fine_resolution: The target mass resolution of the distribution in daltons. Finer values are only
            honoured for molecules below the mass ceiling of their tier (1e-4 Da below 1e5 Da, 1e-3 Da below 1e6 Da,
            1e-2 Da below 2e6 Da); values of 1 Da or more collapse the distribution to nominal masses.
        :param min_probability: Isotope combinations (and products of combinations) less probable than this value
            are discarded.
        :param mass_resolution: The quantization granularity used to express masses as integer "powers".
        :param normalization: 'sum' (intensities sum to 1) or 'base_peak' (the largest intensity is 1).
        :param top_n_peaks: If specified, only the n most probable peaks are kept (before normalization).
        :param max_iterations: Optional budget on the number of isotope combinations enumerated plus the number of
            term pairs convolved. Exceeding it raises ``IterationBudgetExceeded``.
        :param verbose: chatty mode (progress bars)
        """
        self.fine_resolution = fine_resolution
        self.min_probability = min_probability
        self.mass_resolution = mass_resolution
        self.normalization = normalization
        self.top_n_peaks = top_n_peaks
        self.max_iterations = max_iterations
        self.verbose = verbose

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'fine_resolution={self.fine_resolution}, '
            f'min_probability={self.min_probability}, '
            f'mass_resolution={self.mass_resolution}, '
            f'normalization={self.normalization.value!r}, '
            f'top_n_peaks={self.top_n_peaks}, '
            f'max_iterations={self.max_iterations})'
        )

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.__getinitargs__() == other.__getinitargs__()

    def __hash__(self):
        return hash(self.__getinitargs__())

    def __getinitargs__(self):
        return (
            self.fine_resolution,
            self.min_probability,
            self.mass_resolution,
            self.normalization.value,
            self.top_n_peaks,
            self.max_iterations,
            self.verbose,
        )

    def __reduce__(self):
        """pickle support"""
        return (
            self.__class__,
            self.__getinitargs__(),
        )

    @property
    def fine_resolution(self):
        """Requested mass resolution (Da) of the distribution"""
        return self._fine_resolution

    @fine_resolution.setter
    def fine_resolution(self, value):
        if not math.isfinite(value) or value <= 0.:
            raise ValueError(f'The fine resolution must be a finite value greater than zero (got {value}).')
        self._fine_resolution = float(value)

    @property
    def min_probability(self):
        """Probability floor for isotope combinations"""
        return self._min_probability

    @min_probability.setter
    def min_probability(self, value):
        if not 0. <= value <= 1.:
            raise ValueError(f'The minimum probability must be within [0, 1] (got {value}).')
        self._min_probability = float(value)

    @property
    def mass_resolution(self):
        """Quantization granularity (Da) of term powers"""
        return self._mass_resolution

    @mass_resolution.setter
    def mass_resolution(self, value):
        if not math.isfinite(value) or value <= 0.:
            raise ValueError(f'The mass resolution must be a finite value greater than zero (got {value}).')
        self._mass_resolution = float(value)

    @property
    def normalization(self):
        """Normalization mode of the output spectrum"""
        return self._normalization

    @normalization.setter
    def normalization(self, value):
        if isinstance(value, Normalization):
            self._normalization = value
        elif value in VALID_NORMALIZATIONS:
            self._normalization = Normalization(value)
        else:
            raise ValueError(
                f'The normalization "{value}" is invalid. Choose from {", ".join(VALID_NORMALIZATIONS)}'
            )

    @property
    def top_n_peaks(self):
        """Number of most probable peaks to keep (None keeps all)"""
        return self._top_n_peaks

    @top_n_peaks.setter
    def top_n_peaks(self, value):
        if value is not None:
            if type(value) is not int:
                raise TypeError(f'top_n_peaks must be an integer or None (got {type(value)})')
            if value < 1:
                raise ValueError(f'top_n_peaks must be at least 1 (got {value}).')
        self._top_n_peaks = value

    @property
    def max_iterations(self):
        """Iteration budget (None for unlimited)"""
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value):
        if value is not None:
            if type(value) is not int:
                raise TypeError(f'max_iterations must be an integer or None (got {type(value)})')
            if value < 1:
                raise ValueError(f'max_iterations must be at least 1 (got {value}).')
        self._max_iterations = value
