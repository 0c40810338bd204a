"""
Data validation utilities for country band tabulations.

Provides validation checks to ensure a dataset is well formed before it is
handed to the simulation engine.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from wealth_tax_model.bands import CountryDataset
from wealth_tax_model.pareto import is_degenerate

logger = logging.getLogger(__name__)


class InvalidDatasetError(ValueError):
    """Raised when a country dataset fails a blocking validation check."""

    def __init__(self, country: str, issues: List[str]):
        self.country = country
        self.issues = issues
        super().__init__(f"Invalid dataset for {country}: " + "; ".join(issues))


@dataclass
class ValidationResult:
    """Result of a validation check."""
    passed: bool
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        status = "✓ PASS" if self.passed else "✗ FAIL"
        return f"{status}: {self.message}"


class DatasetValidator:
    """
    Validation checks for country band tabulations.

    Checks:
    - Structure (bands present, unique labels, consistent years)
    - Ordering (income thresholds strictly increasing)
    - Rates (all rates and ratios are fractions in [0, 1], positive incomes
      wherever an income/wealth ratio is given)
    - Shapes (bands whose wealth distribution cannot be fitted, warning only)
    """

    # Checks whose failure makes the dataset unusable
    BLOCKING_CHECKS = ("structure", "ordering", "rates")

    RATE_FIELDS = ("total_rate", "indiv_rate", "income_wealth_ratio")

    @staticmethod
    def validate_structure(dataset: CountryDataset) -> ValidationResult:
        """
        Validate that the dataset has bands, unique labels and sane years.
        """
        issues = []

        if len(dataset.bands) == 0:
            return ValidationResult(
                passed=False,
                message=f"{dataset.country} has no income bands",
            )

        labels = dataset.labels
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            issues.append(f"Duplicate band labels: {duplicates}")

        if dataset.simulation_year < dataset.data_year:
            issues.append(
                f"Simulation year {dataset.simulation_year} precedes data year {dataset.data_year}"
            )

        if issues:
            return ValidationResult(
                passed=False,
                message=f"Structure validation failed for {dataset.country}",
                details={'issues': issues},
            )

        return ValidationResult(
            passed=True,
            message=f"{dataset.country} structure is valid ({len(labels)} bands)",
        )

    @staticmethod
    def validate_ordering(dataset: CountryDataset) -> ValidationResult:
        """
        Validate that income thresholds are strictly increasing.

        Bands without a threshold (typically the bottom band) are skipped.
        """
        issues = []
        previous = None

        for band in dataset.bands:
            if band.income_threshold is None:
                continue
            if previous is not None and band.income_threshold <= previous.income_threshold:
                issues.append(
                    f"{band.label} threshold {band.income_threshold:,.0f} is not above "
                    f"{previous.label} threshold {previous.income_threshold:,.0f}"
                )
            previous = band

        if issues:
            return ValidationResult(
                passed=False,
                message=f"Bands of {dataset.country} are not in ascending income order",
                details={'issues': issues},
            )

        return ValidationResult(
            passed=True,
            message=f"Bands of {dataset.country} are in ascending income order",
        )

    @staticmethod
    def validate_rates(dataset: CountryDataset) -> ValidationResult:
        """
        Validate that rates and income/wealth ratios are fractions in [0, 1],
        and that bands with a ratio have positive incomes.
        """
        issues = []

        for band in dataset.bands:
            for name in DatasetValidator.RATE_FIELDS:
                value = getattr(band, name)
                if value is not None and not (0 <= value <= 1):
                    issues.append(f"{band.label}.{name} = {value} outside [0, 1]")
            if band.headcount is not None and band.headcount < 0:
                issues.append(f"{band.label}.headcount is negative")
            if band.income_wealth_ratio is not None:
                # Wealth thresholds and Pareto tails need positive incomes
                for name in ("income_threshold", "avg_income"):
                    value = getattr(band, name)
                    if value is not None and value <= 0:
                        issues.append(f"{band.label}.{name} = {value} must be positive with an income/wealth ratio")

        if issues:
            return ValidationResult(
                passed=False,
                message=f"Rate validation failed for {dataset.country}",
                details={'issues': issues},
            )

        return ValidationResult(
            passed=True,
            message=f"All rates of {dataset.country} are within [0, 1]",
        )

    @staticmethod
    def validate_shapes(dataset: CountryDataset) -> ValidationResult:
        """
        Report bands whose projected average income does not exceed their
        projected threshold. Never fails: these bands only lose their
        reform rate when the threshold cuts through them.
        """
        degenerate = [
            band.label for band in dataset.bands
            if is_degenerate(band, dataset.years_elapsed)
        ]

        if degenerate:
            logger.warning(
                f"{dataset.country}: no Pareto fit for bands {degenerate}"
            )
            return ValidationResult(
                passed=True,
                message=f"{len(degenerate)} band(s) of {dataset.country} cannot be fitted",
                details={'degenerate_bands': degenerate},
            )

        return ValidationResult(
            passed=True,
            message=f"All bands of {dataset.country} can be fitted",
        )

    @staticmethod
    def run_all_checks(dataset: CountryDataset) -> Dict[str, ValidationResult]:
        """
        Run every check on a dataset.

        Returns:
            Dict mapping check name to its ValidationResult
        """
        results = {
            "structure": DatasetValidator.validate_structure(dataset),
            "ordering": DatasetValidator.validate_ordering(dataset),
            "rates": DatasetValidator.validate_rates(dataset),
            "shapes": DatasetValidator.validate_shapes(dataset),
        }

        failed = [name for name, r in results.items() if not r.passed]
        if failed:
            logger.warning(f"{len(failed)} validation check(s) failed for {dataset.country}: {failed}")
        else:
            logger.info(f"All validation checks passed for {dataset.country}")

        return results

    @staticmethod
    def ensure_valid(dataset: CountryDataset) -> Dict[str, ValidationResult]:
        """
        Run all checks and raise if a blocking check failed.

        Raises:
            InvalidDatasetError: If structure, ordering or rate checks fail
        """
        results = DatasetValidator.run_all_checks(dataset)

        issues = []
        for name in DatasetValidator.BLOCKING_CHECKS:
            result = results[name]
            if not result.passed:
                if result.details:
                    issues.extend(result.details.get('issues', []))
                else:
                    issues.append(result.message)

        if issues:
            raise InvalidDatasetError(dataset.country, issues)

        return results
