import pytest


def satisfy_equals_contract(x, y, z):
    """ x and y are equal, z is different from both """
    # reflexive
    assert x == x and y == y and z == z
    # symmetric
    assert x == y and y == x
    assert x != z and z != x
    # consistent hash
    assert hash(x) == hash(y)
    assert hash(x) != hash(z)
    # None and other types are never equal
    assert x != None  # noqa: E711
    assert z != None  # noqa: E711
    assert x != object()


@pytest.fixture
def equals_contract():
    return satisfy_equals_contract
