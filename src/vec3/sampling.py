import logging
import random
from typing import Optional

from .Vec3 import Vec3

logger = logging.getLogger(__name__)


def rand_in_unit_cube(rng: Optional[random.Random] = None) -> Vec3:
    """
    Return a vector with each component drawn uniformly from [-1, 1].

    Args:
        rng: Any object with a uniform(a, b) method, e.g. a seeded random.Random.
            Defaults to the random module's shared generator.

    Returns:
        Vec3: The random vector.
    """
    uniform = random.uniform if rng is None else rng.uniform
    return Vec3(uniform(-1.0, 1.0), uniform(-1.0, 1.0), uniform(-1.0, 1.0))


def rand_on_unit_sphere(rng: Optional[random.Random] = None) -> Vec3:
    """
    Return a random unit vector, uniformly distributed over the sphere.

    Samples are drawn from the unit cube and rejected until one falls inside
    the unit sphere, which is then normalized. There is no retry limit.

    Args:
        rng: Any object with a uniform(a, b) method. Defaults to the random module.

    Returns:
        Vec3: A vector of length 1.
    """
    rejected = 0
    while True:
        sample = rand_in_unit_cube(rng)
        sample_length = sample.length()
        if sample_length < 1.0:
            if rejected and logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"rand_on_unit_sphere rejected {rejected} samples")
            return sample / sample_length
        rejected += 1
