"""Debiasing permutation module."""

from .DebiasingPermutation import DebiasingPermutation
from .abstract.IDebiasingPermutation import IDebiasingPermutation

__all__ = ["DebiasingPermutation", "IDebiasingPermutation"]
