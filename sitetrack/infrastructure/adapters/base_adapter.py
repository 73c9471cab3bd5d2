"""
Base Adapter - Maps data-store records onto canonical domain entities.

Each data source names its fields differently; one adapter per source
keeps the metrics engine on a single representation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, List, Mapping, Optional

from sitetrack.domain.entities import (
    DailyLaborReport,
    ExecutionCost,
    Payment,
    Site,
    SiteCalculation,
)
from sitetrack.domain.entities.base import as_date, as_money
from sitetrack.domain.exceptions import RecordMappingError, SiteNotFoundError


@dataclass
class Dataset:
    """All records needed to evaluate a set of sites."""

    sites: List[Site] = field(default_factory=list)
    labor_reports: List[DailyLaborReport] = field(default_factory=list)
    execution_costs: List[ExecutionCost] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)

    def get_site(self, site_id: str) -> Optional[Site]:
        return next((s for s in self.sites if s.id == site_id), None)

    def require_site(self, site_id: str) -> Site:
        """
        Get a site by id.

        Raises:
            SiteNotFoundError: If no site has this id
        """
        site = self.get_site(site_id)
        if site is None:
            raise SiteNotFoundError(site_id)
        return site


class RecordAdapter(ABC):
    """
    Abstract adapter between raw records and domain entities.

    Subclasses implement the field naming of one data source.
    """

    # Keys of the raw dataset document
    dataset_keys = {
        'sites': 'sites',
        'labor_reports': 'daily_reports',
        'execution_costs': 'execution_costs',
        'payments': 'payments',
    }

    @abstractmethod
    def site(self, record: Mapping[str, Any]) -> Site:
        """Map a raw site record."""

    @abstractmethod
    def labor_report(self, record: Mapping[str, Any]) -> DailyLaborReport:
        """Map a raw daily labor report record."""

    @abstractmethod
    def execution_cost(self, record: Mapping[str, Any]) -> ExecutionCost:
        """Map a raw execution cost record."""

    @abstractmethod
    def payment(self, record: Mapping[str, Any]) -> Payment:
        """Map a raw payment record."""

    @abstractmethod
    def snapshot_to_record(self, calc: SiteCalculation) -> dict:
        """Map a snapshot to this source's output field names."""

    def dataset(self, document: Mapping[str, Iterable[Mapping[str, Any]]]) -> Dataset:
        """
        Map a whole raw document into a Dataset.

        Missing collections are treated as empty.

        Raises:
            RecordMappingError: If the document is not a mapping, a collection
                is not a list, or a record is not a mapping
        """
        if not isinstance(document, Mapping):
            raise RecordMappingError(
                "dataset", "<document>", f"must be a mapping, got {type(document).__name__}"
            )
        keys = self.dataset_keys
        return Dataset(
            sites=[self.site(r) for r in self._records(document, keys['sites'])],
            labor_reports=[self.labor_report(r) for r in self._records(document, keys['labor_reports'])],
            execution_costs=[self.execution_cost(r) for r in self._records(document, keys['execution_costs'])],
            payments=[self.payment(r) for r in self._records(document, keys['payments'])],
        )

    @staticmethod
    def _records(document: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
        collection = document.get(key) or []
        if not isinstance(collection, list):
            raise RecordMappingError(
                "dataset", key, f"must be a list, got {type(collection).__name__}"
            )
        for record in collection:
            if not isinstance(record, Mapping):
                raise RecordMappingError(
                    "dataset", key, f"must contain mappings, got {type(record).__name__}"
                )
        return collection

    # =========================================================================
    # Field helpers
    # =========================================================================

    @staticmethod
    def require(record: Mapping[str, Any], key: str, kind: str) -> Any:
        """Return a mandatory field or raise RecordMappingError."""
        value = record.get(key)
        if value is None or value == "":
            raise RecordMappingError(kind, key, "is missing")
        return value

    @staticmethod
    def convert(kind: str, key: str, value: Any, converter: Callable[[Any], Any]) -> Any:
        """Apply a converter, turning parse failures into RecordMappingError."""
        try:
            return converter(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise RecordMappingError(kind, key, f"has invalid value {value!r}: {e}")

    def money(self, record: Mapping[str, Any], key: str, kind: str, required: bool = True) -> Decimal:
        if required:
            value = self.require(record, key, kind)
        else:
            value = record.get(key)
            if value is None or value == "":
                return Decimal("0")
        return self.convert(kind, key, value, as_money)

    def day(self, record: Mapping[str, Any], key: str, kind: str):
        return self.convert(kind, key, record.get(key), as_date)

    @staticmethod
    def text(record: Mapping[str, Any], key: str) -> Optional[str]:
        value = record.get(key)
        if value is None:
            return None
        return str(value)
