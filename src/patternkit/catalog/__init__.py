"""Pattern catalog: taxonomy and lookup."""

from patternkit.catalog.models import PatternCategory, PatternInfo
from patternkit.catalog.registry import PatternCatalog, get_catalog

__all__ = ["PatternCategory", "PatternInfo", "PatternCatalog", "get_catalog"]
