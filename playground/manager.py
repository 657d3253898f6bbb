"""JSON encodings of managers and lake requests."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass
from typing import Any, Dict

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _dumps(value: Any) -> str:
    text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text


@dataclass
class Manager:
    full_name: str
    position: str
    age: int
    years_in_company: int


def encode_manager(manager: Manager) -> io.BytesIO:
    """A readable stream of the manager as compact JSON with sorted keys."""
    document = {
        "full_name": manager.full_name,
        "position": manager.position,
        "age": manager.age,
        "years_in_company": manager.years_in_company,
    }
    return io.BytesIO(_dumps(document).encode("utf-8"))


@dataclass
class Lake:
    id: str
    name: str
    area: int

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "area": self.area}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lake":
        return cls(id=data.get("id", ""), name=data.get("name", ""), area=data.get("area", 0))


@dataclass
class CreateRequest:
    type: str
    payload: Lake

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": self.payload.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateRequest":
        return cls(type=data.get("type", ""), payload=Lake.from_dict(data.get("payload", {})))


@dataclass
class GenericRequest:
    type: str
    payload: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenericRequest":
        return cls(type=data.get("type", ""), payload=data.get("payload", ""))