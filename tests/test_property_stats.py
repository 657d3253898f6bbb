import random

import pytest

from playground.property_stats import (
    LETTERS,
    MAX_PRICE,
    MIN_PRICE,
    NAME_LENGTH,
    Stat,
    aggregate,
    format_stats,
    generate_name,
    process_file,
    random_price,
    write_properties,
)


def test_generate_name_uses_letters_only():
    rng = random.Random(1)
    for _ in range(50):
        name = generate_name(rng)
        assert len(name) == NAME_LENGTH
        assert set(name) <= set(LETTERS)


def test_generate_name_is_reproducible_with_seed():
    first_rng = random.Random(7)
    second_rng = random.Random(7)
    first = [generate_name(first_rng) for _ in range(5)]
    second = [generate_name(second_rng) for _ in range(5)]
    assert all(len(name) == NAME_LENGTH for name in first)
    assert len(set(first)) > 1
    assert first == second


def test_random_price_in_range_with_two_decimals():
    rng = random.Random(2)
    for _ in range(200):
        price = random_price(rng)
        assert MIN_PRICE <= price <= MAX_PRICE
        assert round(price, 2) == price


def test_stat_tracks_min_max_average():
    stat = Stat()
    for price in (5.0, 1.0, 3.0):
        stat.add(price)
    assert stat.min == 1.0
    assert stat.max == 5.0
    assert stat.count == 3
    assert stat.average() == pytest.approx(3.0)


def test_empty_stat_average_raises():
    with pytest.raises(ValueError):
        Stat().average()


def test_aggregate_skips_malformed_lines():
    stats = aggregate(["a;1.0\n", "a;3.0\n", "b;2.5\n", "bad\n", "c;xyz\n"])
    assert set(stats) == {"a", "b"}
    assert stats["a"].count == 2
    assert stats["a"].min == 1.0
    assert stats["a"].max == 3.0
    assert stats["b"].count == 1


def test_format_stats():
    stats = aggregate(["a;1.0", "a;3.0"])
    assert format_stats(stats) == "{a=1.0/2.0/3.0}"


def test_write_then_aggregate_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    write_properties(path, 100, random.Random(3))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 100
    stats = aggregate(lines)
    assert sum(stat.count for stat in stats.values()) == 100
    for stat in stats.values():
        assert MIN_PRICE <= stat.min <= stat.average() <= stat.max <= MAX_PRICE


def test_process_file_prints_summary(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("x;2.0\nx;4.0\n", encoding="utf-8")
    stats = process_file(path)
    assert stats["x"].count == 2
    assert capsys.readouterr().out.strip() == format_stats(stats)