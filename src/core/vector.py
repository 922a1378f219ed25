# core/vector.py
import logging
import math
import numbers

import numpy as np

logger = logging.getLogger(__name__)

# Color quantization: channel / samples is clamped to this range, then scaled.
COLOR_CLAMP_MIN = 0.0
COLOR_CLAMP_MAX = 0.999
COLOR_SCALE = 256.0


class Vec3:
    """
    A 3D vector of float64 components supporting arithmetic, dot and cross
    products, normalization and color formatting.

    Every non in-place operation returns a new vector; nothing shares the
    underlying component array.
    """
    # Make numpy defer to our reflected operators (np.float64(2) * v).
    __array_ufunc__ = None
    # Mutable value, so not hashable.
    __hash__ = None

    def __init__(self, e0: float, e1: float, e2: float):
        for c in (e0, e1, e2):
            if not isinstance(c, numbers.Real):
                raise TypeError(f"Vec3 components must be real numbers, not {type(c).__name__}")
        self.e = np.array([float(e0), float(e1), float(e2)], dtype=np.float64)

    @classmethod
    def _wrap(cls, e: np.ndarray) -> "Vec3":
        v = cls.__new__(cls)
        v.e = e
        return v

    @classmethod
    def from_array(cls, values) -> "Vec3":
        """
        Builds a vector from any 3-element sequence or array (copied).
        """
        e = np.array(values, dtype=np.float64)
        if e.shape != (3,):
            raise ValueError(f"Vec3 needs exactly 3 components, got shape {e.shape}")
        return cls._wrap(e)

    def to_array(self) -> np.ndarray:
        return self.e.copy()

    def copy(self) -> "Vec3":
        return Vec3._wrap(self.e.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Vec3":
        return self.copy()

    @property
    def x(self) -> float:
        return float(self.e[0])

    @property
    def y(self) -> float:
        return float(self.e[1])

    @property
    def z(self) -> float:
        return float(self.e[2])

    @staticmethod
    def _check_index(index) -> int:
        # bool would act as a numpy mask over all three components.
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"Vec3 indices must be integers, not {type(index).__name__}")
        # No wrap-around for negative indices.
        if not 0 <= index < 3:
            raise IndexError(f"Vec3 index out of range: {index}")
        return int(index)

    def __getitem__(self, index: int) -> float:
        return float(self.e[self._check_index(index)])

    def __setitem__(self, index: int, value: float):
        index = self._check_index(index)
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Vec3 components must be real numbers, not {type(value).__name__}")
        self.e[index] = float(value)

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool((self.e == other.e).all())

    def __neg__(self) -> "Vec3":
        return Vec3._wrap(-self.e)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3._wrap(self.e + other.e)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(all="ignore"):
            self.e += other.e
        return self

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3._wrap(self.e - other.e)

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(all="ignore"):
            self.e -= other.e
        return self

    def __mul__(self, t: float) -> "Vec3":
        # Scalars only; vector * vector is not defined.
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3._wrap(self.e * float(t))

    def __rmul__(self, t: float) -> "Vec3":
        return self.__mul__(t)

    def __imul__(self, t: float) -> "Vec3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            self.e *= float(t)
        return self

    def __truediv__(self, t: float) -> "Vec3":
        # IEEE semantics: dividing by zero gives inf/nan instead of raising.
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec3._wrap(self.e / float(t))

    def __itruediv__(self, t: float) -> "Vec3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            self.e /= float(t)
        return self

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec3":
        """
        Returns self / length(). A zero-length vector is not guarded against
        and comes back with nan components.
        """
        l = self.length()
        if l == 0:
            logger.debug("Normalizing zero-length vector %r", self)
        return self / l

    def format_color(self, samples_per_pixel: int) -> str:
        """
        Treats the vector as a color summed over samples_per_pixel samples and
        returns the averaged, clamped 8-bit channels as "R G B".
        """
        averaged = self / float(samples_per_pixel)
        return " ".join(str(_quantize_channel(c)) for c in averaged)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"


Point3 = Vec3
Color = Vec3


def _quantize_channel(value: float) -> int:
    # nan converts to 0, like a saturating float-to-int cast.
    if math.isnan(value):
        logger.debug("Quantizing nan color channel to 0")
        return 0
    clamped = min(max(value, COLOR_CLAMP_MIN), COLOR_CLAMP_MAX)
    return int(COLOR_SCALE * clamped)


def dot(u: Vec3, v: Vec3) -> float:
    return u.dot(v)


def cross(u: Vec3, v: Vec3) -> Vec3:
    return u.cross(v)


def format_color(color: Color, samples_per_pixel: int) -> str:
    return color.format_color(samples_per_pixel)
