"""Deterministic directory of every secp256k1 private key."""

from .deriver import DerivedKey, KeyDeriver
from .encoding import MAINNET, NETWORKS, TESTNET, Network
from .errors import ChecksumMismatch, KeyDirectoryError, MalformedInput, OutOfRange
from .keyspace import DOMAIN_BOUND, RESULTS_PER_PAGE, Keyspace, parse_number

__version__ = "1.0.0"

__all__ = [
    "ChecksumMismatch",
    "DOMAIN_BOUND",
    "DerivedKey",
    "KeyDeriver",
    "KeyDirectoryError",
    "Keyspace",
    "MAINNET",
    "MalformedInput",
    "NETWORKS",
    "Network",
    "OutOfRange",
    "RESULTS_PER_PAGE",
    "TESTNET",
    "parse_number",
]
