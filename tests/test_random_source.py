import pytest

from modprime.random_source import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    random_exact_bits,
    random_in_range,
    random_up_to_bits,
)


class _AllOnes:
    def random_bytes(self, n: int) -> bytes:
        return b"\xff" * n


class _ShortRead:
    def random_bytes(self, n: int) -> bytes:
        return b"\x00" * (n - 1)


def test_sources_satisfy_protocol():
    assert isinstance(SystemRandomSource(), RandomSource)
    assert isinstance(SeededRandomSource(1), RandomSource)
    assert isinstance(_AllOnes(), RandomSource)


def test_zero_bits():
    assert random_up_to_bits(0) == 0
    assert random_exact_bits(0) == 0


def test_negative_bits_rejected():
    with pytest.raises(ValueError):
        random_up_to_bits(-1)
    with pytest.raises(ValueError):
        random_exact_bits(-8)


@pytest.mark.parametrize("nbits", [1, 2, 7, 8, 9, 15, 16, 17, 63, 64, 65, 521, 2048])
def test_random_exact_bits_has_exact_length(nbits):
    rng = SeededRandomSource(nbits)
    for _ in range(25):
        assert random_exact_bits(nbits, rng).bit_length() == nbits
    assert random_exact_bits(nbits).bit_length() == nbits


@pytest.mark.parametrize("nbits", [1, 3, 8, 12, 100])
def test_random_up_to_bits_stays_in_range(nbits):
    rng = SeededRandomSource(f"up-to-{nbits}")
    for _ in range(50):
        assert 0 <= random_up_to_bits(nbits, rng) < 2**nbits


def test_byte_alignment_excess_is_shifted_away():
    # 12 bits from two 0xff bytes keeps the top 12 bits only
    assert random_up_to_bits(12, _AllOnes()) == 2**12 - 1
    assert random_exact_bits(12, _AllOnes()) == 2**12 - 1


def test_random_exact_bits_forces_high_bit_on_zero_bytes():
    zeros = SeededRandomSource(0)
    zeros.random_bytes = lambda n: b"\x00" * n  # type: ignore[method-assign]

    assert random_exact_bits(10, zeros) == 2**9


def test_short_read_from_source_is_an_error():
    with pytest.raises(ValueError):
        random_up_to_bits(16, _ShortRead())


def test_seeded_source_is_reproducible():
    def draws(seed):
        rng = SeededRandomSource(seed)
        return [random_exact_bits(256, rng) for _ in range(5)]

    a, b, c = draws(42), draws(42), draws(43)

    assert a == b
    assert a != c


def test_random_exact_bits_covers_both_halves_of_range():
    rng = SeededRandomSource("coverage")
    values = {random_exact_bits(3, rng) for _ in range(200)}

    assert values == {4, 5, 6, 7}


def test_random_in_range_is_inclusive():
    rng = SeededRandomSource("range")
    seen = {random_in_range(2, 6, rng) for _ in range(300)}

    assert seen == {2, 3, 4, 5, 6}
    assert random_in_range(9, 9, rng) == 9


def test_random_in_range_rejects_empty_range():
    with pytest.raises(ValueError):
        random_in_range(5, 4)
