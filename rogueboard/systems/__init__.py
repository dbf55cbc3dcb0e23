"""Engine systems: RNG and board generation."""

from rogueboard.systems.rng import DeterministicRNG
from rogueboard.systems.generator import BoardGenerator, GeneratedLevel

__all__ = ["BoardGenerator", "DeterministicRNG", "GeneratedLevel"]
