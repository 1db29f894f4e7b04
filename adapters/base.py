from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

CAMPSITE_URL = "https://www.recreation.gov/camping/campsites/{}"


class AdapterError(Exception):
    """Recoverable failure; str(e) is the message shown to the user."""


class NetworkFailure(AdapterError):
    pass


class NoMatches(AdapterError):
    pass


class InvalidKeywords(AdapterError):
    pass


def _count(value) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Campground:
    id: str
    name: str
    parent_name: str
    city: str
    state_code: str
    site_count: int
    reservable: bool
    entity_type: str

    @classmethod
    def from_result(cls, record: dict) -> "Campground":
        return cls(
            id=str(record.get("entity_id", "")),
            name=record.get("name") or "",
            parent_name=record.get("parent_name") or "",
            city=record.get("city") or "",
            state_code=record.get("state_code") or "",
            site_count=_count(record.get("campsites_count")),
            reservable=bool(record.get("reservable")),
            entity_type=record.get("entity_type", ""),
        )


@dataclass(frozen=True)
class MonthKey:
    campground_id: str
    month_start: date

    @property
    def iso(self) -> str:
        return f"{self.month_start.strftime('%Y-%m')}-01T00:00:00.000Z"


@dataclass(frozen=True)
class SiteAvailability:
    site_id: str
    site_label: str
    loop: str
    campsite_type: str
    available_days: tuple
    range_labels: tuple

    @property
    def days(self) -> str:
        return ",".join(self.available_days)

    @property
    def url(self) -> str:
        return CAMPSITE_URL.format(self.site_id)


class BaseAdapter(ABC):
    @abstractmethod
    def search_campgrounds(self, keywords: str) -> list:
        """
        Returns reservable campgrounds matching the keywords, in upstream order.

        Raises:
            InvalidKeywords: keywords outside 3-50 characters
            NetworkFailure: request or decode failed
            NoMatches: response carried no results
        """
        raise NotImplementedError

    @abstractmethod
    def get_site_availability(self, campground_id: str, month_start: date) -> list:
        """
        Returns SiteAvailability records for every site with at least one open day
        in the month starting at month_start.

        Raises:
            NetworkFailure: request or decode failed
        """
        raise NotImplementedError
