from enum import Enum
from typing import Optional

from ..errors import VdfConfigurationError
from ..mpc.types import T
from .abstract.IVdfScheme import IVdfScheme
from .MimcVDF import MimcVDF
from .SqrtVDF import SqrtVDF


class VdfSchemeType(Enum):
    """Available VDF constructions."""
    SQRT = "sqrt"
    MIMC = "mimc"


class VdfSchemeFactory:
    """Factory for creating VDF schemes by type."""

    @staticmethod
    def create(scheme_type: VdfSchemeType, modulus: Optional[T] = None) -> IVdfScheme:
        """Create a VDF scheme.

        Args:
            scheme_type (VdfSchemeType): Which construction to build
            modulus (MPZ): Prime modulus, required by SQRT and ignored by MIMC

        Returns:
            IVdfScheme: The scheme instance

        Raises:
            VdfConfigurationError: If SQRT is requested without a modulus
        """
        if scheme_type == VdfSchemeType.SQRT:
            if modulus is None:
                raise VdfConfigurationError("The square-root VDF requires a modulus")
            return SqrtVDF(modulus)
        if scheme_type == VdfSchemeType.MIMC:
            return MimcVDF()
        raise VdfConfigurationError(f"Unknown VDF scheme: {scheme_type!r}")
