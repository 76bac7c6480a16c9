import math
import random


def poisson_score(lam: float, rng=random) -> int:
    """Draw a score from a Poisson distribution with mean ``lam``.

    Uses Knuth's multiplication method: uniform draws are multiplied into a
    running product until it falls to ``exp(-lam)`` or below. The score is the
    number of draws minus one. ``lam <= 0`` always yields 0.
    """
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= rng.random()
        if p <= limit:
            return k - 1


class ScoreGenerator:
    """Poisson scores drawn from a single random source.

    ``rng`` is anything with a ``random()`` method returning floats in
    [0, 1). It defaults to the process-wide ``random`` module.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random

    def generate(self, lam: float) -> int:
        return poisson_score(lam, self.rng)

    __call__ = generate
