"""Testing generators – hypothesis strategies."""
from aclock.testing.generators.strategies import instant_strategy, offset_delta_strategy

__all__ = ["instant_strategy", "offset_delta_strategy"]
