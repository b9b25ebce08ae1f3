"""Circle assignment — breadth-first layering from best friends.

Best friends form circle 1. Circle N+1 is every person named in the
`friends` list of someone already in a circle, who is not yet in one.
Layering is iterative, one synchronous frontier per circle.
"""

from __future__ import annotations

from typing import Sequence

from friendcircles.person import LeveledPerson, Person


def assign_levels(
    component: Sequence[Person],
    max_level: int,
) -> list[LeveledPerson]:
    """Assign a circle number to every reachable person in one component.

    Args:
        component: Persons of a single connected component.
        max_level: Highest circle to assign. <= 0 assigns nothing.

    Returns:
        LeveledPerson entries, circle 1 first, each circle in discovery
        order. Persons not reachable from a best friend within max_level
        are absent.
    """
    seeds = [p for p in component if p.best]
    if max_level <= 0 or not seeds:
        return []

    index: dict[str, Person] = {}
    for person in component:
        index.setdefault(person.name, person)

    assigned = {p.name for p in seeds}
    leveled = [LeveledPerson(p, 1) for p in seeds]
    frontier = seeds
    level = 2

    while level <= max_level and frontier and len(assigned) < len(index):
        next_frontier: list[Person] = []
        for person in frontier:
            for friend_name in person.friends:
                friend = index.get(friend_name)
                if friend is None or friend.name in assigned:
                    continue
                assigned.add(friend.name)
                next_frontier.append(friend)

        leveled.extend(LeveledPerson(p, level) for p in next_frontier)
        frontier = next_frontier
        level += 1

    return leveled
