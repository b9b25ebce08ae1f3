"""friendcircles — rank a friend graph by circle of acquaintance.

Best friends are circle 1, their friends circle 2, and so on, within each
connected component of the graph. The ranked result (circle ascending,
then name) is walked through a FriendsIterator, optionally bounded to the
first N circles and filtered by gender.

Usage:
    friends = [Person.from_dict(r) for r in records]
    it = FriendsIterator(friends, FemaleFilter())
    while not it.done():
        print(it.next().name)
"""

from friendcircles.config import CirclesConfig
from friendcircles.filters import FemaleFilter, Filter, GenderFilter, MaleFilter
from friendcircles.graph import FriendGraph, find_connected_components
from friendcircles.iterator import FriendsIterator, LimitedIterator
from friendcircles.levels import assign_levels
from friendcircles.person import (
    FEMALE,
    MALE,
    DuplicateNameError,
    Gender,
    LeveledPerson,
    Person,
)
from friendcircles.ranking import collect_circles, rank_friends

__all__ = [
    "CirclesConfig",
    "DuplicateNameError",
    "FEMALE",
    "FemaleFilter",
    "Filter",
    "FriendGraph",
    "FriendsIterator",
    "Gender",
    "GenderFilter",
    "LeveledPerson",
    "LimitedIterator",
    "MALE",
    "MaleFilter",
    "Person",
    "assign_levels",
    "collect_circles",
    "find_connected_components",
    "rank_friends",
]
