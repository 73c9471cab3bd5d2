"""
Data Loaders for SiteTrack

Loads site records exported from the data store:
- sites.csv: Site budgets, deadlines, status
- daily_reports.csv: Daily labor cost per site
- execution_costs.csv: Material / outsource / other costs
- payments.csv: Client payments

or a single JSON document holding the same collections.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from sitetrack.domain.entities import SiteCalculation
from sitetrack.domain.exceptions import DatasetLoadError
from sitetrack.infrastructure.adapters import Dataset, RecordAdapter, RemoteRowAdapter

logger = logging.getLogger(__name__)

DEFAULT_FILES = {
    'sites': 'sites.csv',
    'daily_reports': 'daily_reports.csv',
    'execution_costs': 'execution_costs.csv',
    'payments': 'payments.csv',
}

# File key -> dataset collection
FILE_COLLECTIONS = {
    'sites': 'sites',
    'daily_reports': 'labor_reports',
    'execution_costs': 'execution_costs',
    'payments': 'payments',
}


class DataLoader:
    """
    Unified data loader for site records.

    Rows are mapped through a RecordAdapter (snake_case rows by default).
    """

    def __init__(
        self,
        data_dir: str = "data",
        adapter: Optional[RecordAdapter] = None,
        files: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize loader.

        Args:
            data_dir: Directory containing CSV files
            adapter: Adapter used to map rows
            files: Override of the file name per collection
        """
        self.data_dir = Path(data_dir)
        self.adapter = adapter or RemoteRowAdapter()
        self.files = {**DEFAULT_FILES, **(files or {})}

    def load_all(self) -> Dataset:
        """
        Load all CSV files in the data directory.

        The sites file is mandatory; the others default to empty.
        """
        document = {}
        for name, filename in self.files.items():
            rows = self._read_csv(self.data_dir / filename)
            if rows is None:
                if name == 'sites':
                    raise FileNotFoundError(f"Sites file not found: {self.data_dir / filename}")
                logger.warning(f"Could not find {name} data file")
                rows = []
            else:
                logger.info(f"Loaded {name}: {len(rows)} rows")
            document[self.adapter.dataset_keys[FILE_COLLECTIONS[name]]] = rows
        return self.adapter.dataset(document)

    def load_json(self, path) -> Dataset:
        """
        Load a JSON document with one list per collection.

        Raises:
            RecordMappingError: If the document or a collection has the wrong shape
        """
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
        dataset = self.adapter.dataset(document)
        logger.info(
            f"Loaded {len(dataset.sites)} sites, {len(dataset.labor_reports)} reports, "
            f"{len(dataset.execution_costs)} costs, {len(dataset.payments)} payments from {path}"
        )
        return dataset

    @staticmethod
    def _read_csv(path: Path) -> Optional[List[dict]]:
        """
        Read a CSV as string columns; empty cells become None.

        Raises:
            DatasetLoadError: If the file is empty or not valid CSV
        """
        if not path.exists():
            return None
        try:
            df = pd.read_csv(path, dtype=str)
        except pd.errors.EmptyDataError:
            raise DatasetLoadError(str(path), "file is empty")
        except pd.errors.ParserError as e:
            raise DatasetLoadError(str(path), f"malformed CSV: {e}")
        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict(orient='records')


def load_dataset(path, adapter: Optional[RecordAdapter] = None,
                 files: Optional[Dict[str, str]] = None) -> Dataset:
    """Load a dataset from a JSON file or a directory of CSV files."""
    path = Path(path)
    if path.is_dir():
        return DataLoader(str(path), adapter, files).load_all()
    return DataLoader(str(path.parent), adapter, files).load_json(path)


def snapshots_to_frame(snapshots: Iterable[SiteCalculation]) -> pd.DataFrame:
    """Build a DataFrame with one row per snapshot, in input order."""
    columns = [
        'site_id', 'budget_amount', 'total_labor_cost', 'total_material_cost',
        'total_outsource_cost', 'total_other_cost', 'total_execution_cost',
        'remaining_budget', 'margin_rate', 'deadline', 'days_remaining', 'risk_level',
    ]
    snapshots = list(snapshots)
    df = pd.DataFrame([s.to_dict() for s in snapshots], columns=columns)
    df['days_remaining'] = pd.array([s.days_remaining for s in snapshots], dtype='Int64')
    return df
