"""
Data integration layer for wealth_tax_model.

This package provides the loader and validator for country band
tabulations stored as JSON files.

Example usage:
    >>> from wealth_tax_model.data import CountryDataLoader
    >>> loader = CountryDataLoader()
    >>> datasets = loader.load_all()
"""

from wealth_tax_model.data.loader import (
    CountryDataLoader,
    band_from_dict,
    dataset_from_dict,
)
from wealth_tax_model.data.validation import (
    DatasetValidator,
    InvalidDatasetError,
    ValidationResult,
)

__all__ = [
    'CountryDataLoader',
    'band_from_dict',
    'dataset_from_dict',
    'DatasetValidator',
    'InvalidDatasetError',
    'ValidationResult',
]
