"""cardano-signer commands."""

from .base import SignerCommandGroup, SignerOutputFormat, data_arguments, parse_verdict
from .canonize import CanonizeCommands
from .keygen import KeyGenCommands, SignerDerivation
from .sign import SignCommands
from .verify import VerifyCommands

__all__ = [
    "CanonizeCommands",
    "KeyGenCommands",
    "SignCommands",
    "SignerCommandGroup",
    "SignerDerivation",
    "SignerOutputFormat",
    "VerifyCommands",
    "data_arguments",
    "parse_verdict",
]
