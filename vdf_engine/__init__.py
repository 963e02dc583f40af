"""Verifiable delay functions over prime fields: modular square roots and MiMC."""

from . import mimc_vdf, sqrt_vdf
from .errors import VdfConfigurationError
from .vdf import IVdfScheme, MimcVDF, SqrtVDF, VdfSchemeFactory, VdfSchemeType

__all__ = [
    "mimc_vdf",
    "sqrt_vdf",
    "VdfConfigurationError",
    "IVdfScheme",
    "MimcVDF",
    "SqrtVDF",
    "VdfSchemeFactory",
    "VdfSchemeType",
]
