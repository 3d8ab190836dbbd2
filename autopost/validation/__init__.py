"""Article validation: quality checks, grading, and reporting."""

from autopost.validation.checks import validate_article
from autopost.validation.report import compute_grade, format_validation_report

__all__ = ["validate_article", "compute_grade", "format_validation_report"]
