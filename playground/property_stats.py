"""Generating and summarising large files of property prices."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
NAME_LENGTH = 7
MIN_PRICE = 100.00
MAX_PRICE = 999.00
DECIMALS = 2
TOTAL_ENTRIES = 1_000_000_000

PathLike = Union[str, Path]


def generate_name(rng: Optional[random.Random] = None) -> str:
    """A random property name of NAME_LENGTH ASCII letters."""
    source = rng or random
    return "".join(source.choice(LETTERS) for _ in range(NAME_LENGTH))


def random_price(rng: Optional[random.Random] = None) -> float:
    """A random price between MIN_PRICE and MAX_PRICE rounded to DECIMALS places."""
    source = rng or random
    value = MIN_PRICE + source.random() * (MAX_PRICE - MIN_PRICE)
    factor = 10**DECIMALS
    return math.floor(value * factor + 0.5) / factor


def write_properties(
    path: PathLike, count: int = TOTAL_ENTRIES, rng: Optional[random.Random] = None
) -> None:
    """Write count lines of the form ``name;price`` to path."""
    with open(path, "w", encoding="utf-8") as out:
        for _ in range(count):
            out.write(f"{generate_name(rng)};{random_price(rng):f}\n")


@dataclass
class Stat:
    """Running minimum, maximum, sum and count of prices."""

    min: float = math.inf
    max: float = -math.inf
    total: float = 0.0
    count: int = 0

    def add(self, price: float) -> None:
        self.min = min(self.min, price)
        self.max = max(self.max, price)
        self.total += price
        self.count += 1

    def average(self) -> float:
        if not self.count:
            raise ValueError("no prices recorded")
        return self.total / self.count


def aggregate(lines: Iterable[str]) -> Dict[str, Stat]:
    """Per-property statistics of ``name;price`` lines; malformed lines are skipped."""
    stats: Dict[str, Stat] = {}
    for line in lines:
        parts = line.rstrip("\r\n").split(";")
        if len(parts) < 2:
            continue
        try:
            price = float(parts[1])
        except ValueError:
            continue
        stats.setdefault(parts[0], Stat()).add(price)
    return stats


def format_stats(stats: Mapping[str, Stat]) -> str:
    """``{name=min/avg/max, ...}`` with one decimal place."""
    body = ", ".join(
        f"{name}={stat.min:.1f}/{stat.average():.1f}/{stat.max:.1f}"
        for name, stat in stats.items()
    )
    return f"{{{body}}}"


def process_file(path: PathLike) -> Dict[str, Stat]:
    """Summarise the file at path, print the summary and return the statistics."""
    with open(path, encoding="utf-8") as source:
        stats = aggregate(source)
    print(format_stats(stats))
    return stats