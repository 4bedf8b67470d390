"""Probabilistic sampling of client calls"""
import math
import random
from numbers import Real
from typing import Optional

from ..exceptions import InvalidArgumentError


def validate_rate(rate) -> float:
    """Check a sample rate is a number above zero"""
    if isinstance(rate, bool) or not isinstance(rate, Real):
        raise InvalidArgumentError(f"Sample rate must be a number, got {rate!r}")
    if math.isnan(rate) or rate <= 0:
        raise InvalidArgumentError(f"Sample rate must be in (0, 1], got {rate!r}")
    return float(rate)


class Sampler:
    """Decides once per call whether the call's lines are sent at all"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    @staticmethod
    def is_sampled(rate: float) -> bool:
        """Whether lines sent at this rate carry the @rate suffix"""
        return rate < 1

    def should_send(self, rate: float) -> bool:
        if not self.is_sampled(rate):
            return True
        return self._rng.random() <= rate
