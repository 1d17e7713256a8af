"""
Hashing and Base58Check helpers shared by the key deriver.

- Legacy P2PKH addresses only
- WIF private keys, mainnet or testnet
"""

import hashlib
from dataclasses import dataclass
from typing import Dict, Tuple

import base58
from Crypto.Hash import RIPEMD160

from .errors import ChecksumMismatch, MalformedInput


# ======================================================
#                 BASIC HASH / ENCODING
# ======================================================

def sha256(b: bytes) -> bytes:
    return hashlib.sha256(b).digest()


def ripemd160(b: bytes) -> bytes:
    return RIPEMD160.new(b).digest()


def hash160(b: bytes) -> bytes:
    return ripemd160(sha256(b))


def double_sha256(b: bytes) -> bytes:
    return sha256(sha256(b))


# ======================================================
#                    NETWORKS
# ======================================================

@dataclass(frozen=True)
class Network:
    """Version bytes of one network"""
    name: str
    wif_version: int
    p2pkh_version: int


MAINNET = Network("mainnet", wif_version=0x80, p2pkh_version=0x00)
TESTNET = Network("testnet", wif_version=0xEF, p2pkh_version=0x6F)

NETWORKS: Dict[str, Network] = {net.name: net for net in (MAINNET, TESTNET)}


def get_network(name: str) -> Network:
    try:
        return NETWORKS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown network {name!r}, expected one of {sorted(NETWORKS)}") from None


# ======================================================
#                    BASE58CHECK
# ======================================================

CHECKSUM_SIZE = 4


def base58check_encode(version: int, payload: bytes) -> str:
    return base58.b58encode_check(bytes([version]) + payload).decode()


def base58check_decode(s: str) -> Tuple[int, bytes]:
    """
    Split a Base58Check string into (version, payload).

    Raises MalformedInput for text that is not Base58 or too short to hold a
    version byte and checksum, ChecksumMismatch when the checksum is wrong.
    """
    try:
        raw = base58.b58decode(s)
    except ValueError as e:
        raise MalformedInput(f"Invalid base58 string: {e}") from None
    if len(raw) <= CHECKSUM_SIZE:
        raise MalformedInput("Invalid base58check: too short")
    data, checksum = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if double_sha256(data)[:CHECKSUM_SIZE] != checksum:
        raise ChecksumMismatch("Invalid base58check: bad checksum")
    return data[0], data[1:]


def p2pkh_address(public_key: bytes, network: Network = MAINNET) -> str:
    return base58check_encode(network.p2pkh_version, hash160(public_key))
