"""
Language-specific model generators.
"""

from .go import GoModelGenerator

__all__ = ["GoModelGenerator"]
