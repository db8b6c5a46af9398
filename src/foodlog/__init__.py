"""
Food logging helper package.

The package turns free-text nutrition breakdowns produced by a language model into
canonical food-diary blocks and forwards them to a food-diary automation service.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
