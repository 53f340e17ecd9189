"""Course scheduling over prerequisite graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _topological_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    dependents: list[list[int]] = [[] for _ in range(num_courses)]
    in_degree = [0] * num_courses
    for course, required in prerequisites:
        for index in (course, required):
            if not 0 <= index < num_courses:
                raise ValueError(f"course {index} is outside 0..{num_courses - 1}")
        dependents[required].append(course)
        in_degree[course] += 1

    ready = deque(course for course, degree in enumerate(in_degree) if degree == 0)
    order = []
    while ready:
        course = ready.popleft()
        order.append(course)
        for dependent in dependents[course]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                ready.append(dependent)
    return order


def find_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    """Return an order to take every course, or [] if the prerequisites form a cycle.

    Each prerequisite is a pair [course, required]: required comes first.
    """
    order = _topological_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every course can be taken given the prerequisites."""
    return len(_topological_order(num_courses, prerequisites)) == num_courses