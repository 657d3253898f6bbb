"""Clients for paginated JSON record APIs and queries over their pages."""

from __future__ import annotations

import json
import sys
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

MEDICAL_RECORDS_URL = "https://jsonmock.hackerrank.com/api/medical_records"
FOOD_OUTLETS_URL = "https://jsonmock.hackerrank.com/api/food_outlets"
TIMEOUT = 120


@dataclass
class Page:
    """One page of a paginated API response."""

    page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0
    data: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, document: Dict[str, Any]) -> "Page":
        return cls(
            page=document.get("page", 0),
            per_page=document.get("per_page", 0),
            total=document.get("total", 0),
            total_pages=document.get("total_pages", 0),
            data=list(document.get("data") or []),
        )


def _get_page(base_url: str, query: List[tuple], body: Dict[str, Any]) -> Page:
    url = f"{base_url}?{urllib.parse.urlencode(query)}"
    payload = (json.dumps(body, separators=(",", ":")) + "\n").encode("utf-8")
    request = urllib.request.Request(url, data=payload, method="GET")
    with urllib.request.urlopen(request, timeout=TIMEOUT) as response:
        return Page.from_dict(json.loads(response.read()))


def fetch_medical_records(
    doctor_name: str, diagnosis_id: int, page: int, base_url: str = MEDICAL_RECORDS_URL
) -> Page:
    """Fetch one page of medical records."""
    body = {"doctorName": doctor_name, "diagnosisId": diagnosis_id}
    return _get_page(base_url, [("page", str(page))], body)


MedicalFetch = Callable[[str, int, int], Page]
OutletFetch = Callable[[str, int], Page]


def _all_pages(first: Page, fetch_page: Callable[[int], Page]):
    yield first
    for number in range(2, first.total_pages + 1):
        yield fetch_page(number)


def body_temperature(
    doctor_name: str, diagnosis_id: int, fetch: Optional[MedicalFetch] = None
) -> List[int]:
    """The lowest and highest body temperature among the doctor's records of the diagnosis.

    With no matching record the result is [sys.maxsize, -sys.maxsize - 1].
    """
    fetch = fetch or fetch_medical_records
    low, high = sys.maxsize, -sys.maxsize - 1
    first = fetch(doctor_name, diagnosis_id, 1)
    if first.total_pages < 1:
        return [low, high]
    pages = _all_pages(first, lambda number: fetch(doctor_name, diagnosis_id, number))
    for page in pages:
        for record in page.data:
            if (record.get("diagnosis") or {}).get("id", 0) != diagnosis_id:
                continue
            if (record.get("doctor") or {}).get("name", "") != doctor_name:
                continue
            temperature = (record.get("vitals") or {}).get("bodyTemperature", 0)
            low = min(low, temperature)
            high = max(high, temperature)
    return [low, high]


def fetch_food_outlets(city: str, page: int, base_url: str = FOOD_OUTLETS_URL) -> Page:
    """Fetch one page of food outlets in a city."""
    return _get_page(base_url, [("city", city), ("page", str(page))], {})


def finest_food_outlet(city: str, min_votes: int, fetch: Optional[OutletFetch] = None) -> str:
    """The name of the best-rated outlet with at least min_votes votes.

    Ties on average rating go to the outlet with more votes, then to the one listed first.
    """
    fetch = fetch or fetch_food_outlets
    first = fetch(city, 1)
    outlets = []
    if first.total_pages >= 1:
        for page in _all_pages(first, lambda number: fetch(city, number)):
            outlets.extend(
                record
                for record in page.data
                if (record.get("user_rating") or {}).get("votes", 0) >= min_votes
            )
    if not outlets:
        raise LookupError(f"no outlet in {city} has at least {min_votes} votes")

    def rank(record: Dict[str, Any]):
        rating = record.get("user_rating") or {}
        return (-rating.get("average_rating", 0.0), -rating.get("votes", 0))

    return min(outlets, key=rank).get("name", "")