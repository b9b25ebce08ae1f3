"""Ranking — merge per-component circles into one ordered sequence.

Order: circle ascending, then name ascending within a circle.
"""

from __future__ import annotations

from collections import defaultdict
from functools import lru_cache
from typing import Iterable, Sequence

from loguru import logger
from pyuca import Collator

from friendcircles.config import CirclesConfig
from friendcircles.graph import FriendGraph
from friendcircles.levels import assign_levels
from friendcircles.person import LeveledPerson, Person


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def name_sort_key(name: str, case_sensitive: bool = False) -> tuple:
    """Sort key for names within one circle.

    Default mode uses the Unicode Collation Algorithm: accents and case
    only decide between otherwise equal names, lowercase sorts before
    uppercase, and punctuation sorts before letters. The raw name breaks
    any remaining tie.
    """
    if case_sensitive:
        return (name,)
    return (_collator().sort_key(name), name)


def rank_friends(
    leveled: Iterable[LeveledPerson],
    config: CirclesConfig | None = None,
) -> tuple[Person, ...]:
    """Bucket by circle, sort each bucket by name, flatten to persons."""
    config = config or CirclesConfig()

    buckets: dict[int, list[LeveledPerson]] = defaultdict(list)
    for entry in leveled:
        buckets[entry.level].append(entry)

    ranked: list[Person] = []
    for level in sorted(buckets):
        bucket = sorted(
            buckets[level],
            key=lambda e: name_sort_key(e.person.name, config.case_sensitive_names),
        )
        ranked.extend(e.person for e in bucket)

    return tuple(ranked)


def collect_circles(
    friends: Sequence[Person],
    max_level: int,
    config: CirclesConfig | None = None,
) -> tuple[Person, ...]:
    """Run the full pipeline: components, circles per component, ranking."""
    config = config or CirclesConfig()
    graph = FriendGraph(friends, config)
    components = graph.find_components()

    leveled: list[LeveledPerson] = []
    for component in components:
        leveled.extend(assign_levels(component, max_level))

    ranked = rank_friends(leveled, config)
    logger.debug(
        f"Ranked {len(ranked)}/{len(graph)} friends across "
        f"{len(components)} component(s), max circle {max_level}"
    )
    return ranked
