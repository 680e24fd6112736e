"""Edit-distance helpers for API name suggestions."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(left: str, right: str) -> int:
    if left == right:
        return 0
    if not left:
        return len(right)
    if not right:
        return len(left)

    previous = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            if left_char == right_char:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


class LengthBucketIndex:
    """Names bucketed by length.

    Two strings whose lengths differ by more than `d` cannot be within edit
    distance `d`, so a lookup only scores the buckets inside that window.
    Candidates keep their insertion order, which breaks ties.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._buckets: dict[int, list[tuple[int, str]]] = {}
        for order, name in enumerate(names):
            self._buckets.setdefault(len(name), []).append((order, name))

    def candidates(self, length: int, max_distance: int) -> list[tuple[int, str]]:
        found: list[tuple[int, str]] = []
        for bucket_length in range(max(length - max_distance, 0), length + max_distance + 1):
            found.extend(self._buckets.get(bucket_length, ()))
        found.sort()
        return found

    def nearest(self, name: str, max_distance: int, *, key=str.lower) -> str | None:
        """Closest name within `max_distance`; ties go to the earliest name."""
        target = key(name)
        best: tuple[int, int, str] | None = None
        for order, candidate in self.candidates(len(name), max_distance):
            distance = levenshtein_distance(target, key(candidate))
            if distance > max_distance:
                continue
            if best is None or (distance, order) < best[:2]:
                best = (distance, order, candidate)
        return best[2] if best is not None else None
