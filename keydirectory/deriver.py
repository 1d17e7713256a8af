"""
Key deriver: turns keyspace indices into WIF private keys and P2PKH addresses,
and WIF private keys back into indices.
"""

from dataclasses import dataclass
from typing import List, Tuple

from coincurve import PrivateKey

from .encoding import MAINNET, Network, base58check_decode, base58check_encode, p2pkh_address
from .errors import MalformedInput
from .keyspace import Keyspace

SCALAR_SIZE = 32
COMPRESSED_SUFFIX = b"\x01"


@dataclass(frozen=True)
class DerivedKey:
    """One row of the directory"""
    private: str       # WIF, uncompressed flag
    number: str        # decimal index
    compressed: str    # address of the compressed public key
    uncompressed: str  # address of the uncompressed public key

    @property
    def index(self) -> int:
        return int(self.number)


class KeyDeriver:
    def __init__(self, keyspace: Keyspace, network: Network = MAINNET):
        self.keyspace = keyspace
        self.network = network

    def scalar_bytes(self, index: int) -> bytes:
        return self.keyspace.check_index(index).to_bytes(SCALAR_SIZE, "big")

    def wif(self, index: int) -> str:
        return base58check_encode(self.network.wif_version, self.scalar_bytes(index))

    def derive_one(self, index: int) -> DerivedKey:
        raw = self.scalar_bytes(index)
        public_key = PrivateKey(raw).public_key
        return DerivedKey(
            private=base58check_encode(self.network.wif_version, raw),
            number=str(index),
            compressed=p2pkh_address(public_key.format(compressed=True), self.network),
            uncompressed=p2pkh_address(public_key.format(compressed=False), self.network),
        )

    def derive_range(self, start: int) -> Tuple[List[DerivedKey], int]:
        """
        Derive up to page_size keys for the indices following start.

        Stops early once the domain bound is passed. Indices below 1 in the
        window are skipped.
        """
        keys = []
        first = max(start + 1, 1)
        last = min(start + self.keyspace.page_size, self.keyspace.bound)
        for index in range(first, last + 1):
            keys.append(self.derive_one(index))
        return keys, len(keys)

    def derive_page(self, page: int) -> Tuple[List[DerivedKey], int]:
        page = self.keyspace.validate_page(page)
        return self.derive_range(self.keyspace.start_index(page))

    def decode_index(self, wif: str) -> int:
        """Recover the keyspace index of a WIF private key"""
        version, payload = base58check_decode(wif)
        if version != self.network.wif_version:
            raise MalformedInput(f"Not a {self.network.name} private key")
        if len(payload) == SCALAR_SIZE + 1 and payload[-1:] == COMPRESSED_SUFFIX:
            payload = payload[:-1]
        if len(payload) != SCALAR_SIZE:
            raise MalformedInput("Invalid private key length")
        return self.keyspace.check_index(int.from_bytes(payload, "big"))

    def canonical_wif(self, wif: str) -> str:
        """Uncompressed-mode WIF of the same key"""
        return self.wif(self.decode_index(wif))
