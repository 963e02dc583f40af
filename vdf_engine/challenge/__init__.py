"""VDF challenge module."""

from .VdfChallenge import VdfChallenge
from .VdfChallengeBuilder import VdfChallengeBuilder
from .abstract.IVdfChallengeBuilder import IVdfChallengeBuilder

__all__ = ["VdfChallenge", "VdfChallengeBuilder", "IVdfChallengeBuilder"]
