# vecmath/vector.py
import math
import numbers
import sys
from typing import Iterator, Optional, Sequence, Union

import numpy as np

# Machine epsilon of a double; lengths and weights at or below it count as zero.
EPSILON = sys.float_info.epsilon


class Vector3:
    """
    A 3D vector supporting arithmetic, dot and cross products, spherical
    angles and length capping.

    Components live in a single list, ``values``. Every operation returns a
    new vector and leaves its receiver and arguments untouched; only the
    x, y and z setters write in place.
    """
    __slots__ = ("values",)

    def __init__(self, x: Union[float, Sequence[float]], y: Optional[float] = None,
                 z: Optional[float] = None):
        if y is None and z is None:
            # Sequence form. The length is trusted to be 3.
            self.values = x.tolist() if isinstance(x, np.ndarray) else list(x)
        elif y is None or z is None:
            raise ValueError("Vector3 takes either three components or one sequence of three.")
        else:
            self.values = [x, y, z]

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Vector3":
        """
        Checked variant of ``Vector3(values)``: raises ValueError unless
        ``values`` holds exactly three elements.
        """
        if len(values) != 3:
            raise ValueError(
                "Vector3 must be initialized with a sequence of three elements."
            )
        return cls(values)

    @property
    def x(self) -> float:
        return self.values[0]

    @x.setter
    def x(self, value: float):
        self.values[0] = value

    @property
    def y(self) -> float:
        return self.values[1]

    @y.setter
    def y(self, value: float):
        self.values[1] = value

    @property
    def z(self) -> float:
        return self.values[2]

    @z.setter
    def z(self, value: float):
        self.values[2] = value

    # Named constants. A fresh instance per call, since vectors are settable.
    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0, 0, 0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1, 1, 1)

    @classmethod
    def unit_x(cls) -> "Vector3":
        return cls(1, 0, 0)

    @classmethod
    def unit_y(cls) -> "Vector3":
        return cls(0, 1, 0)

    @classmethod
    def unit_z(cls) -> "Vector3":
        return cls(0, 0, 1)

    def add(self, other: "Vector3") -> "Vector3":
        a1, a2, a3 = self.values
        b1, b2, b3 = other.values
        return Vector3(a1 + b1, a2 + b2, a3 + b3)

    def sub(self, other: "Vector3") -> "Vector3":
        a1, a2, a3 = self.values
        b1, b2, b3 = other.values
        return Vector3(a1 - b1, a2 - b2, a3 - b3)

    def dot(self, other: "Vector3") -> float:
        a1, a2, a3 = self.values
        b1, b2, b3 = other.values
        return a1 * b1 + a2 * b2 + a3 * b3

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Right-handed cross product self x other.
        """
        a1, a2, a3 = self.values
        b1, b2, b3 = other.values
        return Vector3(
            a2 * b3 - a3 * b2,
            a3 * b1 - a1 * b3,
            a1 * b2 - a2 * b1
        )

    def times(self, k: float) -> "Vector3":
        a1, a2, a3 = self.values
        return Vector3(k * a1, k * a2, k * a3)

    def div(self, k: float) -> "Vector3":
        """
        Returns (1/k) * self. Dividing by zero gives inf or nan components
        rather than raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            quotient = np.asarray(self.values, dtype=np.float64) / np.float64(k)
        return Vector3(quotient.tolist())

    def negate(self) -> "Vector3":
        return self.times(-1)

    def mag_sqr(self) -> float:
        return self.dot(self)

    def mag(self) -> float:
        return math.sqrt(self.mag_sqr())

    def normalized(self) -> "Vector3":
        # The zero vector is not special-cased: 0/0 leaves nan components.
        return self.div(self.mag())

    def azimuth(self) -> float:
        """
        Angle within the XY-plane measured from the X-axis, in radians.
        """
        x, y, _ = self.values
        return math.atan2(y, x)

    def polar(self) -> float:
        """
        Angle measured from the Z-axis, in radians, in [0, pi].
        """
        x, y, z = self.values
        return math.atan2(math.sqrt(x * x + y * y), z)

    def clone(self) -> "Vector3":
        return Vector3(self.values)

    def cap(self, length: float) -> "Vector3":
        """
        Returns a copy scaled down, if needed, so its magnitude is at most
        ``length``.
        """
        if length <= EPSILON:
            return Vector3.zero()
        mag = self.mag()
        if length < mag:
            return self.times(length / mag)
        return self.clone()

    def to_array(self, dtype=np.float64) -> np.ndarray:
        return np.array(self.values, dtype=dtype)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, k: float) -> "Vector3":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return self.times(k)

    def __rmul__(self, k: float) -> "Vector3":
        return self.__mul__(k)

    def __truediv__(self, k: float) -> "Vector3":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return self.div(k)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        # Per component, so nan never equals nan.
        return (len(self.values) == len(other.values)
                and all(a == b for a, b in zip(self.values, other.values)))

    # Settable components make vectors unhashable.
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter(list(self.values))

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
