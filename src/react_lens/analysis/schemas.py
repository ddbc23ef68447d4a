"""Pydantic models for scan input and output."""

from pydantic import BaseModel, ConfigDict, Field

from react_lens.constants import Category, Severity


class Diagnostic(BaseModel):
    """A single finding produced by a rule module."""

    model_config = ConfigDict(frozen=True)

    category: Category
    rule: str
    severity: Severity
    file_path: str
    line: int = Field(ge=1)
    message: str
    snippet: str | None = None


class FileContext(BaseModel):
    """One source file handed to a rule module."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    content: str


class ScoreBreakdown(BaseModel):
    """Per-category scores, each floored independently at 0."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    accessibility: int = Field(default=100, ge=0, le=100)
    best_practices: int = Field(
        default=100, ge=0, le=100, alias="best-practices"
    )
    bundle: int = Field(default=100, ge=0, le=100)

    def for_category(self, category: Category) -> int:
        """Score for one category."""
        return {
            Category.ACCESSIBILITY: self.accessibility,
            Category.BEST_PRACTICES: self.best_practices,
            Category.BUNDLE: self.bundle,
        }[category]


class ScanResult(BaseModel):
    """Scored outcome of one scan invocation.

    ``diagnostics`` is ordered by (category, file_path, line).
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    diagnostics: tuple[Diagnostic, ...] = ()
