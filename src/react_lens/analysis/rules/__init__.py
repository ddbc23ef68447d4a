"""Rule modules, one per category, in registration order."""

from react_lens.analysis.rules.accessibility import AccessibilityRules
from react_lens.analysis.rules.base import RuleModule
from react_lens.analysis.rules.best_practices import BestPracticeRules
from react_lens.analysis.rules.bundle import BundleRules

RULE_MODULES: tuple[RuleModule, ...] = (
    AccessibilityRules(),
    BestPracticeRules(),
    BundleRules(),
)

__all__ = [
    "RULE_MODULES",
    "AccessibilityRules",
    "BestPracticeRules",
    "BundleRules",
    "RuleModule",
]
