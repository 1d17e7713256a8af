"""
Keyspace counter: page count, page validation and index/page mapping
"""

import pytest

from keydirectory.errors import MalformedInput, OutOfRange
from keydirectory.keyspace import DOMAIN_BOUND, RESULTS_PER_PAGE, Keyspace, parse_number

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class TestConstants:
    def test_domain_bound_is_order_minus_one(self) -> None:
        assert DOMAIN_BOUND == SECP256K1_N - 1

    def test_default_page_size(self) -> None:
        assert RESULTS_PER_PAGE == 128

    def test_page_count_is_ceiling(self, keyspace) -> None:
        assert keyspace.pages() == -(-DOMAIN_BOUND // 128)
        assert (keyspace.pages() - 1) * 128 < DOMAIN_BOUND <= keyspace.pages() * 128

    def test_small_keyspace_page_count(self) -> None:
        assert Keyspace.create(page_size=10, bound=25).pages() == 3
        assert Keyspace.create(page_size=10, bound=30).pages() == 3
        assert Keyspace.create(page_size=10, bound=31).pages() == 4

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(ValueError):
            Keyspace.create(page_size=0)

    @pytest.mark.parametrize("bound", [0, DOMAIN_BOUND + 1, SECP256K1_N + 10])
    def test_rejects_bound_outside_curve_order(self, bound) -> None:
        with pytest.raises(ValueError):
            Keyspace.create(bound=bound)

    @pytest.mark.parametrize("fields", [
        {"bound": 25, "page_size": 0, "page_count": 3},
        {"bound": 25, "page_size": 10, "page_count": 2},
        {"bound": DOMAIN_BOUND + 10, "page_size": 128, "page_count": 1},
    ])
    def test_constructor_validates(self, fields) -> None:
        with pytest.raises(ValueError):
            Keyspace(**fields)

    def test_keyspace_is_immutable(self, keyspace) -> None:
        with pytest.raises(AttributeError):
            keyspace.page_size = 1


class TestParseNumber:
    def test_plain_decimal(self) -> None:
        assert parse_number("42") == 42

    def test_sign_is_dropped(self) -> None:
        assert parse_number("-7") == 7
        assert parse_number("+7") == 7

    def test_arbitrary_precision(self) -> None:
        assert parse_number(str(DOMAIN_BOUND)) == DOMAIN_BOUND

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "0x10", " 1", "1_000", "--1", "١٢"])
    def test_malformed(self, text) -> None:
        with pytest.raises(MalformedInput):
            parse_number(text)

    def test_too_long(self) -> None:
        with pytest.raises(MalformedInput):
            parse_number("9" * 10_000)


class TestValidatePage:
    def test_sign_dropped(self, keyspace) -> None:
        assert keyspace.validate_page(-7) == keyspace.validate_page(7) == 7

    def test_zero_is_first_page(self, keyspace) -> None:
        assert keyspace.validate_page(0) == 1

    def test_last_page_is_valid(self, keyspace) -> None:
        assert keyspace.validate_page(keyspace.pages()) == keyspace.pages()

    def test_beyond_last_page(self, keyspace) -> None:
        with pytest.raises(OutOfRange):
            keyspace.validate_page(keyspace.pages() + 1)
        with pytest.raises(OutOfRange):
            keyspace.validate_page(-(keyspace.pages() + 1))

    def test_parse_page(self, keyspace) -> None:
        assert keyspace.parse_page("-3") == 3
        with pytest.raises(MalformedInput):
            keyspace.parse_page("three")


class TestIndexMapping:
    def test_start_index(self, keyspace) -> None:
        assert keyspace.start_index(1) == 0
        assert keyspace.start_index(2) == 128

    @pytest.mark.parametrize("index, page", [(1, 1), (128, 1), (129, 2), (256, 2), (257, 3)])
    def test_page_for_index(self, keyspace, index, page) -> None:
        assert keyspace.page_for_index(index) == page

    @pytest.mark.parametrize("index", [1, 127, 128, 129, DOMAIN_BOUND // 2, DOMAIN_BOUND - 1, DOMAIN_BOUND])
    def test_index_falls_inside_its_page(self, keyspace, index) -> None:
        start = keyspace.start_index(keyspace.page_for_index(index))
        assert start < index <= start + keyspace.page_size

    def test_last_index_on_last_page(self, keyspace) -> None:
        assert keyspace.page_for_index(DOMAIN_BOUND) == keyspace.pages()

    @pytest.mark.parametrize("index", [0, -1, DOMAIN_BOUND + 1])
    def test_index_out_of_range(self, keyspace, index) -> None:
        with pytest.raises(OutOfRange):
            keyspace.page_for_index(index)
