"""Guns built by a small factory."""

from __future__ import annotations

from dataclasses import dataclass


class UnknownGunError(ValueError):
    """Raised when asking the factory for a gun type it does not know."""


@dataclass
class Gun:
    name: str
    power: int


def _ak47() -> Gun:
    return Gun(name="Ak47 gun", power=4)


def _maverick() -> Gun:
    return Gun(name="Maverick gun", power=5)


_FACTORIES = {
    "ak47": _ak47,
    "maverick": _maverick,
}


def get_gun(gun_type: str) -> Gun:
    """Build a new gun of the given type ("ak47" or "maverick")."""
    try:
        factory = _FACTORIES[gun_type]
    except KeyError:
        raise UnknownGunError("wrong gun type") from None
    return factory()