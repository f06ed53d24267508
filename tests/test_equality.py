import itertools

import pytest
from perhaps import Just, Maybe, absent, present

SAMPLES = {
    "int": [1, 2, 3],
    "str": ["a", "b", "a"],
    "tuple": [(1,), (1, 2), ()],
}

def _values(kind):
    return [present(v) for v in SAMPLES[kind]] + [absent()]

def test_scenarios():
    assert present(5).equals(present(5))
    assert not present(5).equals(present(6))
    assert present(5).not_equals(absent())
    assert absent().equals(absent())
    assert not present(5).equals(absent())
    assert not absent().equals(present(5))

@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_reflexive(kind):
    for m in _values(kind):
        assert m.equals(m)

@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_present_equality_follows_payload(kind):
    for v, w in itertools.product(SAMPLES[kind], repeat=2):
        assert present(v).equals(present(w)) == (v == w)

@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_symmetric(kind):
    for a, b in itertools.product(_values(kind), repeat=2):
        assert a.equals(b) == b.equals(a)

@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_transitive(kind):
    for a, b, c in itertools.product(_values(kind), repeat=3):
        if a.equals(b) and b.equals(c):
            assert a.equals(c)

@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_not_equals_is_negation(kind):
    for a, b in itertools.product(_values(kind), repeat=2):
        assert a.not_equals(b) == (not a.equals(b))

def test_operators_match_methods():
    assert present(5) == present(5)
    assert present(5) != present(6)
    assert present(5) != absent()
    assert absent() == absent()

def test_comparison_with_plain_values():
    assert present(5) != 5
    assert absent() != None  # noqa: E711
    assert not present(5).equals(5)
    assert absent().not_equals(None)

def test_hashable():
    assert hash(present(5)) == hash(present(5))
    assert len({present(1), present(1), absent(), absent()}) == 2

def test_unhashable_payload_still_compares():
    assert present([1, 2]) == present([1, 2])
    with pytest.raises(TypeError):
        hash(present([1, 2]))

def test_present_wraps_in_just():
    m = present(5)
    assert isinstance(m, Just)
    assert isinstance(m, Maybe)

class _Mask:
    def __init__(self, flag):
        self.flag = flag

    def __bool__(self):
        return self.flag

class _Elementwise:
    """Payload whose == returns a mask object rather than a bool."""

    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return _Mask(self.x == other.x)

    __hash__ = None

def test_equals_returns_bool_for_non_bool_payload_equality():
    a, b, c = _Elementwise(1), _Elementwise(1), _Elementwise(2)
    assert present(a).equals(present(b)) is True
    assert present(a).equals(present(c)) is False
    assert present(a).not_equals(present(c)) is True
    assert present(a).not_equals(present(b)) is False
