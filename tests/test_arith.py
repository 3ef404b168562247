import pytest

from listwork.arith import corp_flight_bookings, is_prime, min_steps


def test_corp_flight_bookings_worked_example():
    bookings = [[1, 2, 10], [2, 3, 20], [2, 5, 25]]
    assert corp_flight_bookings(bookings, 5) == [10, 55, 45, 25, 25]


def test_corp_flight_bookings_total_seats_preserved():
    bookings = [(1, 3, 7), (2, 2, 4), (3, 6, 1), (6, 6, 9)]
    result = corp_flight_bookings(bookings, 6)
    assert len(result) == 6
    assert sum(result) == sum(s * (b - a + 1) for a, b, s in bookings)


def test_corp_flight_bookings_full_range_is_uniform():
    assert corp_flight_bookings([(1, 4, 12)], 4) == [12, 12, 12, 12]


def test_corp_flight_bookings_no_bookings():
    assert corp_flight_bookings([], 3) == [0, 0, 0]


def test_corp_flight_bookings_single_flight():
    assert corp_flight_bookings([(2, 2, 5)], 3) == [0, 5, 0]


@pytest.mark.parametrize("booking", [(0, 1, 5), (2, 4, 5), (3, 2, 5)])
def test_corp_flight_bookings_bad_range_raises(booking):
    with pytest.raises(ValueError):
        corp_flight_bookings([booking], 3)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_is_prime_true(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 25, 100])
def test_is_prime_false(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_min_steps_trivial(n):
    assert min_steps(n) == 0


def test_min_steps_worked_example():
    assert min_steps(3) == 3


@pytest.mark.parametrize("p", [2, 5, 7, 13, 31])
def test_min_steps_of_prime_is_itself(p):
    assert min_steps(p) == p


@pytest.mark.parametrize("a,b", [(2, 3), (4, 9), (5, 6), (12, 10), (7, 7)])
def test_min_steps_adds_over_products(a, b):
    assert min_steps(a * b) == min_steps(a) + min_steps(b)


@pytest.mark.parametrize("n", [4, 12, 30, 64, 100, 1000])
def test_min_steps_never_exceeds_n(n):
    assert 0 < min_steps(n) <= n