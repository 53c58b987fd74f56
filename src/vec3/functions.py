from .Vec3 import Real, Vec3, _as_float


def length(v: Vec3) -> float:
    return v.length()


def length_sq(v: Vec3) -> float:
    return v.length_sq()


def normalize(v: Vec3) -> Vec3:
    """
    Return v scaled to unit length.

    Raises:
        ZeroDivisionError: If v is the zero vector, there is no fallback direction.
    """
    return v.normalize()


def dot(v1: Vec3, v2: Vec3) -> float:
    return v1.dot(v2)


def cross(v1: Vec3, v2: Vec3) -> Vec3:
    """Right handed cross product, cross(v1, v2) == -cross(v2, v1)."""
    return v1.cross(v2)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """
    Reflect v about the direction of n.

    n is normalized on every call. When the same normal is reused many times
    normalize it once and call reflect_opt instead.

    Args:
        v (Vec3): The vector to reflect.
        n (Vec3): The normal, any non zero length.

    Returns:
        Vec3: The reflected vector.

    Raises:
        ZeroDivisionError: If n is the zero vector.
    """
    return reflect_opt(v, normalize(n))


def reflect_opt(v: Vec3, n: Vec3) -> Vec3:
    """
    Reflect v about the unit normal n.

    n MUST already be normalized. This is not checked, a non unit n silently
    gives a wrong result.

    Args:
        v (Vec3): The vector to reflect.
        n (Vec3): The unit length normal.

    Returns:
        Vec3: The reflected vector.
    """
    return n * 2.0 * dot(n, v) - v


def lerp(v1: Vec3, v2: Vec3, t: Real) -> Vec3:
    """
    Linearly interpolate between v1 (t=0) and v2 (t=1).

    t is not clamped so values outside [0, 1] extrapolate.
    """
    t = _as_float(t, "t")
    return Vec3(
        v1.x * (1.0 - t) + v2.x * t,
        v1.y * (1.0 - t) + v2.y * t,
        v1.z * (1.0 - t) + v2.z * t,
    )
