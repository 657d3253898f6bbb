"""Sorting people and words by various keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    city: str


def sort_by_age(people: Iterable[Person]) -> List[Person]:
    """People ordered by ascending age."""
    return sorted(people, key=lambda p: p.age)


def sort_by_name(people: Iterable[Person]) -> List[Person]:
    """People ordered by name."""
    return sorted(people, key=lambda p: p.name)


def sort_by_fields(people: Iterable[Person]) -> List[Person]:
    """People ordered by age, then name, then city."""
    return sorted(people, key=lambda p: (p.age, p.name, p.city))


def sort_by_age_and_name(people: Iterable[Person]) -> List[Person]:
    """People ordered by age, then name."""
    return sorted(people, key=lambda p: (p.age, p.name))


def sort_by_city(people: Iterable[Person]) -> List[Person]:
    """People ordered by city; equal cities keep their original order."""
    return sorted(people, key=lambda p: p.city)


def sort_case_insensitive(words: Iterable[str]) -> List[str]:
    """Words ordered ignoring letter case."""
    return sorted(words, key=str.lower)