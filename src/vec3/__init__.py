from .functions import cross, dot, length, length_sq, lerp, normalize, reflect, reflect_opt
from .sampling import rand_in_unit_cube, rand_on_unit_sphere
from .Vec3 import EPSILON, Vec3

__all__ = [
    "EPSILON",
    "Vec3",
    "cross",
    "dot",
    "length",
    "length_sq",
    "lerp",
    "normalize",
    "rand_in_unit_cube",
    "rand_on_unit_sphere",
    "reflect",
    "reflect_opt",
]
