"""Testing generators – property-based test data."""
from searchbase.testing.generators.strategies import dynamic_value_strategy, scalar_value_strategy

__all__ = ["dynamic_value_strategy", "scalar_value_strategy"]
