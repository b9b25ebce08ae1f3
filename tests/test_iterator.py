"""Tests for FriendsIterator and LimitedIterator."""

import pytest

from friendcircles.config import CirclesConfig
from friendcircles.filters import FemaleFilter, Filter, MaleFilter
from friendcircles.iterator import FriendsIterator, LimitedIterator
from friendcircles.person import FEMALE, MALE, Person


# ── Fixtures ──────────────────────────────────────────────


@pytest.fixture
def friends():
    """Sam and Sally are best friends; circles grow outwards from them.

    Circle 1: Sally, Sam
    Circle 2: Brad, Emily, Mat, Sharon
    Circle 3: Itan, Julia
    Circle 4: Mary
    Circle 5: Zak
    Unreachable: Nobody (no path from a best friend)
    """
    records = [
        {"name": "Sam", "friends": ["Mat", "Sharon", "Sally"], "gender": "male", "best": True},
        {"name": "Sally", "friends": ["Sam", "Brad", "Emily"], "gender": "female", "best": True},
        {"name": "Mat", "friends": ["Sam", "Sharon"], "gender": "male"},
        {"name": "Sharon", "friends": ["Sam", "Itan", "Mat"], "gender": "female"},
        {"name": "Brad", "friends": ["Sally", "Emily", "Julia"], "gender": "male"},
        {"name": "Emily", "friends": ["Sally", "Brad"], "gender": "female"},
        {"name": "Itan", "friends": ["Sharon", "Julia"], "gender": "male"},
        {"name": "Julia", "friends": ["Brad", "Itan", "Mary"], "gender": "female"},
        {"name": "Mary", "friends": ["Julia", "Zak"], "gender": "female"},
        {"name": "Zak", "friends": ["Mary"], "gender": "male"},
        {"name": "Nobody", "friends": [], "gender": "male"},
    ]
    return [Person.from_dict(r) for r in records]


def drain(iterator):
    result = []
    while not iterator.done():
        result.append(iterator.next().name)
    return result


# ── FriendsIterator ───────────────────────────────────────


class TestFriendsIterator:
    def test_all_friends_in_circle_order(self, friends):
        it = FriendsIterator(friends, Filter())
        assert drain(it) == [
            "Sally", "Sam",
            "Brad", "Emily", "Mat", "Sharon",
            "Itan", "Julia",
            "Mary",
            "Zak",
        ]

    def test_female_filter(self, friends):
        it = FriendsIterator(friends, FemaleFilter())
        assert drain(it) == ["Sally", "Emily", "Sharon", "Julia", "Mary"]

    def test_male_filter(self, friends):
        it = FriendsIterator(friends, MaleFilter())
        assert drain(it) == ["Sam", "Brad", "Mat", "Itan", "Zak"]

    def test_unreachable_person_excluded(self, friends):
        it = FriendsIterator(friends, Filter())
        assert "Nobody" not in drain(it)

    def test_spec_chain_example(self):
        people = [
            Person("A", MALE, best=True, friends=("B",)),
            Person("B", MALE, friends=("A", "C")),
            Person("C", MALE, friends=("B",)),
        ]
        assert drain(FriendsIterator(people, Filter())) == ["A", "B", "C"]

    def test_two_components_interleave(self):
        people = [
            Person("Y", FEMALE, best=True, friends=("Q",)),
            Person("Q", FEMALE),
            Person("X", MALE, best=True, friends=("P",)),
            Person("P", MALE),
        ]
        assert drain(FriendsIterator(people, Filter())) == ["X", "Y", "P", "Q"]

    def test_same_name_different_case(self):
        people = [Person("Anna", MALE, best=True), Person("anna", MALE, best=True)]
        assert drain(FriendsIterator(people, Filter())) == ["anna", "Anna"]

    def test_empty_input(self):
        it = FriendsIterator([], Filter())
        assert it.done() is True
        assert it.next() is None


class TestEndOfSequence:
    def test_next_returns_none_when_exhausted(self, friends):
        it = FriendsIterator(friends, Filter())
        drain(it)
        assert it.next() is None
        assert it.next() is None
        assert it.done() is True

    def test_done_matches_next(self, friends):
        it = FriendsIterator(friends, FemaleFilter())
        while True:
            done = it.done()
            value = it.next()
            assert done == (value is None)
            if value is None:
                break

    def test_done_does_not_advance(self, friends):
        it = FriendsIterator(friends, Filter())
        it.done()
        it.done()
        assert it.next().name == "Sally"

    def test_remaining_and_len(self, friends):
        it = FriendsIterator(friends, MaleFilter())
        assert len(it) == 5
        assert it.remaining == 5
        it.next()
        assert it.remaining == 4
        assert len(it) == 5


class TestIteratorProtocol:
    def test_for_loop(self, friends):
        it = FriendsIterator(friends, FemaleFilter())
        assert [p.name for p in it] == ["Sally", "Emily", "Sharon", "Julia", "Mary"]
        assert it.done() is True

    def test_shares_cursor_with_next(self, friends):
        it = FriendsIterator(friends, Filter())
        assert it.next().name == "Sally"
        assert next(it).name == "Sam"
        assert iter(it) is it

    def test_stop_iteration(self):
        it = FriendsIterator([], Filter())
        with pytest.raises(StopIteration):
            next(it)


class TestFilterValidation:
    @pytest.mark.parametrize("bad", [None, {}, "female", lambda p: True, FemaleFilter])
    def test_non_filter_rejected(self, friends, bad):
        with pytest.raises(TypeError, match="must be a Filter"):
            FriendsIterator(friends, bad)

    def test_limited_non_filter_rejected(self, friends):
        with pytest.raises(TypeError):
            LimitedIterator(friends, object(), 2)


# ── LimitedIterator ───────────────────────────────────────


class TestLimitedIterator:
    def test_first_circle(self, friends):
        assert drain(LimitedIterator(friends, Filter(), 1)) == ["Sally", "Sam"]

    def test_two_circles_male(self, friends):
        assert drain(LimitedIterator(friends, MaleFilter(), 2)) == ["Sam", "Brad", "Mat"]

    def test_zero_bound_is_empty(self, friends):
        it = LimitedIterator(friends, Filter(), 0)
        assert it.done() is True
        assert it.next() is None

    def test_negative_bound_is_empty(self, friends):
        assert drain(LimitedIterator(friends, Filter(), -1)) == []

    def test_large_bound_matches_unbounded(self, friends):
        assert drain(LimitedIterator(friends, Filter(), 100)) == drain(
            FriendsIterator(friends, Filter())
        )

    def test_is_friends_iterator(self, friends):
        it = LimitedIterator(friends, Filter(), 3)
        assert isinstance(it, FriendsIterator)
        assert it.max_level == 3

    def test_config_passed_through(self):
        people = [
            Person("bob", MALE, best=True),
            Person("Carl", MALE, best=True),
        ]
        config = CirclesConfig(case_sensitive_names=True)
        assert drain(LimitedIterator(people, Filter(), 1, config=config)) == ["Carl", "bob"]
        assert drain(LimitedIterator(people, Filter(), 1)) == ["bob", "Carl"]
