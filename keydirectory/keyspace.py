"""
Keyspace counter: the ordered set of secp256k1 private keys, cut into pages.

Indices are 1-based. Page p holds the indices
start_index(p) + 1 .. start_index(p) + page_size.
"""

import re
from dataclasses import dataclass

from ecdsa import SECP256k1

from .errors import MalformedInput, OutOfRange


RESULTS_PER_PAGE = 128

# Every scalar in [1, n - 1] is a valid private key
DOMAIN_BOUND = SECP256k1.order - 1

# Generous upper bound on the length of a page or index number; the domain
# bound itself has 78 digits
MAX_NUMBER_DIGITS = 512

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def parse_number(text: str) -> int:
    """Parse a base-10 number, dropping its sign"""
    if not isinstance(text, str) or not _NUMBER_RE.fullmatch(text):
        raise MalformedInput(f"Not a number: {text!r}")
    if len(text) > MAX_NUMBER_DIGITS:
        raise MalformedInput("Number too long")
    return abs(int(text, 10))


@dataclass(frozen=True)
class Keyspace:
    bound: int
    page_size: int
    page_count: int

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError("page_size must be positive")
        if not 1 <= self.bound <= DOMAIN_BOUND:
            raise ValueError(f"bound must lie in [1, {DOMAIN_BOUND}]")
        if self.page_count != -(-self.bound // self.page_size):
            raise ValueError("page_count does not match bound and page_size")

    @classmethod
    def create(cls, page_size: int = RESULTS_PER_PAGE, bound: int = DOMAIN_BOUND) -> "Keyspace":
        if page_size < 1:
            raise ValueError("page_size must be positive")
        return cls(bound=bound, page_size=page_size, page_count=-(-bound // page_size))

    def pages(self) -> int:
        return self.page_count

    def validate_page(self, requested: int) -> int:
        """Clamp a requested page to [1, ...], failing above the last page"""
        page = max(abs(requested), 1)
        if page > self.page_count:
            raise OutOfRange(f"Page {page} is beyond the last page {self.page_count}")
        return page

    def parse_page(self, text: str) -> int:
        return self.validate_page(parse_number(text))

    def start_index(self, page: int) -> int:
        """Index just before the first entry of page"""
        return (page - 1) * self.page_size

    def check_index(self, index: int) -> int:
        if index < 1 or index > self.bound:
            raise OutOfRange(f"Index outside [1, {self.bound}]")
        return index

    def page_for_index(self, index: int) -> int:
        self.check_index(index)
        return (index - 1) // self.page_size + 1
