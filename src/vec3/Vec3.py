import math
import numbers
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

EPSILON = 1e-6

Real = Union[int, float, numbers.Real]


def _as_float(value: Real, name: str) -> float:
    """
    Convert a real number to a float, rejecting anything that is not a real number.

    Args:
        value: The value to convert.
        name: The axis name used in the error message.

    Returns:
        float: The converted value.

    Raises:
        TypeError: If value is a bool or not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# frozen=True so a Vec3 can never change once built
@dataclass(frozen=True, eq=False)
class Vec3:
    """
    An immutable 3D vector of 64 bit floats.

    Arithmetic is component-wise: a * b is the Hadamard product, not the dot or
    cross product. Use dot() and cross() for those.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        """Convert each component to float, validating the type as we go."""
        for component in ("x", "y", "z"):
            object.__setattr__(self, component, _as_float(getattr(self, component), component))

    @classmethod
    def zero(cls) -> "Vec3":
        """Return the zero vector (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Union[Sequence[Real], np.ndarray]) -> "Vec3":
        """
        Build a Vec3 from any 3 element sequence or 1D numpy array.

        Args:
            values: The x, y and z values in order.

        Returns:
            Vec3: The new vector.

        Raises:
            ValueError: If values does not hold exactly 3 elements.
        """
        if len(values) != 3:
            raise ValueError(f"Vec3 needs exactly 3 values, got {len(values)}")
        x, y, z = values
        return cls(x, y, z)

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        """
        Check if two Vec3 instances are exactly equal, component by component.

        This uses plain float comparison so -0.0 == 0.0 and NaN never equals
        anything. Use is_close for computed values.

        Args:
            other (object): The object to compare.

        Returns:
            bool: True if equal, False otherwise.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def is_close(self, other: "Vec3") -> bool:
        """
        Check if the distance between two vectors is below EPSILON.

        This is a single threshold on the Euclidean length of the difference, not
        a per component tolerance.

        Args:
            other (Vec3): The vector to compare against.

        Returns:
            bool: True if the vectors are within EPSILON of each other.
        """
        return (self - other).length() < EPSILON

    def __iter__(self) -> Iterator[float]:
        """Return an iterator over the x, y, z components."""
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]

    def to_numpy(self) -> np.ndarray:
        """Return a new float64 numpy array of shape (3,)."""
        return np.array((self.x, self.y, self.z), dtype=np.float64)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union["Vec3", Real]) -> "Vec3":
        """
        Multiply component-wise by another Vec3, or scale by a real number.

        Args:
            other: A Vec3 (Hadamard product) or a real scalar.

        Returns:
            Vec3: The product.
        """
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_scalar(other):
            value = float(other)
            return Vec3(self.x * value, self.y * value, self.z * value)
        return NotImplemented

    def __rmul__(self, other: Real) -> "Vec3":
        if not _is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, other: Union["Vec3", Real]) -> "Vec3":
        """
        Divide component-wise by another Vec3, or by a real number.

        Args:
            other: A Vec3 or a real scalar.

        Returns:
            Vec3: The quotient.

        Raises:
            ZeroDivisionError: If the scalar is zero, or if the product of the
                divisor's components is zero.
        """
        if isinstance(other, Vec3):
            # the product alone misses a zero paired with an infinity (inf * 0 is nan)
            if other.x * other.y * other.z == 0.0 or 0.0 in (other.x, other.y, other.z):
                raise ZeroDivisionError("Division by 0")
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if _is_scalar(other):
            value = float(other)
            if value == 0.0:
                raise ZeroDivisionError("Division by 0")
            return Vec3(self.x / value, self.y / value, self.z / value)
        return NotImplemented

    def length(self) -> float:
        """
        Calculate the length (Euclidean norm) of the vector.

        Returns:
            float: The length of the vector.
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_sq(self) -> float:
        """Squared length, avoids the square root."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> "Vec3":
        """
        Return a unit length copy of this vector.

        Raises:
            ZeroDivisionError: If this is the zero vector.
        """
        return self / self.length()

    def dot(self, other: "Vec3") -> float:
        """
        Compute the dot product of two vectors.

        Args:
            other (Vec3): The other vector.

        Returns:
            float: The dot product.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Compute the right handed cross product of two vectors.

        Args:
            other (Vec3): The other vector.

        Returns:
            Vec3: The cross product vector.
        """
        return Vec3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )
