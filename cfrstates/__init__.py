"""Leduc and no-limit hold'em poker game states for counterfactual regret minimisation."""

__version__ = "0.1.0"
__all__ = ["actions", "base", "cards", "leduc", "nlth", "rank"]