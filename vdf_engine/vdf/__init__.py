"""Verifiable delay function module."""

from .SqrtVDF import SqrtVDF
from .MimcVDF import MimcVDF
from .MimcPermutation import MimcPermutation
from .VdfSchemeFactory import VdfSchemeFactory, VdfSchemeType
from .abstract.IVdfScheme import IVdfScheme

__all__ = [
    "SqrtVDF",
    "MimcVDF",
    "MimcPermutation",
    "VdfSchemeFactory",
    "VdfSchemeType",
    "IVdfScheme",
]
