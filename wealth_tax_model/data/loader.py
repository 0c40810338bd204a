"""
Country dataset loader.

Loads one JSON tabulation per country and converts it into an immutable
CountryDataset. Files follow the layout of the published simulator data:

    {
        "country": "France", "currency": "€",
        "dataYear": 2022, "simulationYear": 2026,
        "groups": [{"group": "P99-P99.9", "n": 380000, "avgIncome": ..., ...}]
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from wealth_tax_model.bands import Band, CountryDataset
from wealth_tax_model.data.validation import DatasetValidator

logger = logging.getLogger(__name__)

# Environment variable overriding the default data directory
DATA_DIR_ENV = "WEALTH_TAX_DATA_DIR"

# JSON key -> Band field
BAND_FIELDS = {
    "group": "label",
    "n": "headcount",
    "avgIncome": "avg_income",
    "incomeThreshold": "income_threshold",
    "incomeWealthRatio": "income_wealth_ratio",
    "totalRate": "total_rate",
    "indivRate": "indiv_rate",
    "nominalGrowthAvg": "growth_avg_income",
    "nominalGrowthThreshold": "growth_threshold",
    "populationGrowth": "population_growth",
}


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def band_from_dict(record: Dict[str, Any]) -> Band:
    """Build a Band from one JSON group record. Unknown keys are ignored."""
    if "group" not in record:
        raise KeyError(f"Band record missing 'group' label: {record}")

    kwargs: Dict[str, Any] = {"label": str(record["group"])}
    for key, field_name in BAND_FIELDS.items():
        if key == "group" or key not in record:
            continue
        kwargs[field_name] = _optional_float(record[key])
    return Band(**kwargs)


def dataset_from_dict(payload: Dict[str, Any]) -> CountryDataset:
    """Build a CountryDataset from a parsed JSON payload."""
    data_year = int(payload["dataYear"])
    return CountryDataset(
        country=str(payload["country"]),
        currency=str(payload.get("currency", "€")),
        data_year=data_year,
        simulation_year=int(payload.get("simulationYear", data_year)),
        bands=tuple(band_from_dict(g) for g in payload.get("groups", [])),
        gdp=_optional_float(payload.get("gdp")),
        deficit=_optional_float(payload.get("deficit")),
        color=payload.get("color"),
    )


class CountryDataLoader:
    """
    Loader for country band tabulations stored as JSON files.

    Example:
        >>> loader = CountryDataLoader()
        >>> loader.available_countries()
        >>> dataset = loader.load("Exampleland")
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None, validate: bool = True):
        """
        Initialize the loader.

        Args:
            data_dir: Directory of JSON files. If None, uses the
                     WEALTH_TAX_DATA_DIR environment variable, then the
                     package's data_files/ directory.
            validate: Reject datasets failing blocking validation checks
        """
        if data_dir is None:
            data_dir = os.environ.get(DATA_DIR_ENV)
        if data_dir is None:
            data_dir = Path(__file__).parent.parent / "data_files"

        self.data_dir = Path(data_dir)
        self.validate = validate
        self._cache: Dict[str, CountryDataset] = {}

        if not self.data_dir.exists():
            logger.warning(f"Country data directory not found: {self.data_dir}")

    def _files(self) -> List[Path]:
        if not self.data_dir.exists():
            return []
        return sorted(self.data_dir.glob("*.json"))

    def load_file(self, path: Union[str, Path]) -> CountryDataset:
        """
        Load and validate one JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidDatasetError: If a blocking validation check fails
        """
        path = Path(path)
        key = str(path.resolve())
        if key in self._cache:
            return self._cache[key]

        if not path.exists():
            raise FileNotFoundError(f"Country data file not found: {path}")

        logger.info(f"Loading country data from {path.name}")
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

        dataset = dataset_from_dict(payload)
        if self.validate:
            DatasetValidator.ensure_valid(dataset)

        self._cache[key] = dataset
        return dataset

    def available_countries(self) -> List[str]:
        """Names of the countries with a data file, in file order."""
        return [self.load_file(path).country for path in self._files()]

    def load(self, country: str) -> CountryDataset:
        """
        Load a country by name (case-insensitive) or by file stem.

        Raises:
            FileNotFoundError: If no file matches
        """
        for path in self._files():
            if path.stem.lower() == country.lower():
                return self.load_file(path)
        for path in self._files():
            dataset = self.load_file(path)
            if dataset.country.lower() == country.lower():
                return dataset
        raise FileNotFoundError(f"No data file for country '{country}' in {self.data_dir}")

    def load_all(self) -> List[CountryDataset]:
        """Load every country in the data directory."""
        return [self.load_file(path) for path in self._files()]
