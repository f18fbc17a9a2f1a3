"""Pattern catalog registry."""

import io
import threading
from contextlib import redirect_stdout
from typing import Dict, List, Optional

from patternkit.catalog.models import PatternCategory, PatternInfo
from patternkit.exceptions import UnknownPatternError
from patternkit.logging.logger import get_logger


class PatternCatalog:
    """Registry of documented patterns keyed by slug."""

    def __init__(self):
        self._patterns: Dict[str, PatternInfo] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    @staticmethod
    def normalize(name: str) -> str:
        return name.strip().lower().replace("_", "-").replace(" ", "-")

    def register(self, info: PatternInfo) -> None:
        """
        Register a pattern.

        Args:
            info: Catalog entry; an existing entry with the same name is replaced
        """
        with self._lock:
            if info.name in self._patterns:
                self.logger.warning(f"Overriding existing pattern: {info.name}")
            self._patterns[info.name] = info
        self.logger.debug(f"Registered pattern: {info.name}")

    def get(self, name: str) -> PatternInfo:
        """
        Look a pattern up by name.

        Names are case-insensitive and may use '_' or spaces instead of '-'.

        Raises:
            UnknownPatternError: If no pattern has that name
        """
        key = self.normalize(name)
        with self._lock:
            info = self._patterns.get(key)
            if info is None:
                available = sorted(self._patterns)
                raise UnknownPatternError(
                    f"Pattern '{name}' not found. Available patterns: {available}",
                    details={"available": available},
                )
            return info

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return self.normalize(name) in self._patterns

    def list(self, category: Optional[PatternCategory] = None) -> List[PatternInfo]:
        """List patterns sorted by name, optionally restricted to one category."""
        with self._lock:
            patterns = list(self._patterns.values())
        if category is not None:
            category = PatternCategory(category)
            patterns = [p for p in patterns if p.category == category]
        return sorted(patterns, key=lambda p: p.name)

    def categories(self) -> Dict[str, List[str]]:
        """Map each category to the sorted names of its patterns."""
        result: Dict[str, List[str]] = {category.value: [] for category in PatternCategory}
        for info in self.list():
            result[info.category.value].append(info.name)
        return result

    def run_demo(self, name: str) -> List[str]:
        """
        Run a pattern's demo and capture what it prints.

        Returns:
            The printed lines, in order
        """
        info = self.get(name)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            info.demo()
        self.logger.debug(f"Ran demo for pattern: {info.name}")
        return buffer.getvalue().splitlines()


# Global catalog instance
_catalog: Optional[PatternCatalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> PatternCatalog:
    """
    Get the global pattern catalog, populated with the built-in patterns.

    Returns:
        Global pattern catalog
    """
    global _catalog

    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                catalog = PatternCatalog()
                _register_builtin_patterns(catalog)
                _catalog = catalog

    return _catalog


def _register_builtin_patterns(catalog: PatternCatalog) -> None:
    from patternkit.patterns import (
        adapter,
        null_object,
        simple_factory,
        singleton,
        strategy,
        template_method,
    )

    catalog.register(PatternInfo(
        name="adapter",
        title="Adapter",
        category=PatternCategory.STRUCTURAL,
        intent="Wrap an incompatible interface so it satisfies the interface a caller expects.",
        example="An mp3-only audio player plays vlc and mp4 files through a media adapter.",
        demo=adapter.demo,
    ))
    catalog.register(PatternInfo(
        name="null-object",
        title="Null Object",
        category=PatternCategory.BEHAVIORAL,
        intent="Provide a do-nothing implementation of an interface so callers never check for absence.",
        example="A payment service logs through a NullLogger when logging is disabled.",
        demo=null_object.demo,
    ))
    catalog.register(PatternInfo(
        name="singleton",
        title="Singleton",
        category=PatternCategory.CREATIONAL,
        intent="Restrict a type to exactly one globally accessible instance.",
        example="Eager, lazy, lock-guarded and metaclass singletons hand out one shared instance.",
        demo=singleton.demo,
    ))
    catalog.register(PatternInfo(
        name="simple-factory",
        title="Simple Factory",
        category=PatternCategory.CREATIONAL,
        intent="Centralize construction logic behind a function keyed by a type tag.",
        example="A vehicle factory builds a car, bike or truck from its name.",
        demo=simple_factory.demo,
    ))
    catalog.register(PatternInfo(
        name="strategy",
        title="Strategy",
        category=PatternCategory.BEHAVIORAL,
        intent="Select an interchangeable algorithm and inject it at runtime.",
        example="A shopping cart pays by credit card or PayPal depending on the chosen strategy.",
        demo=strategy.demo,
    ))
    catalog.register(PatternInfo(
        name="template-method",
        title="Template Method",
        category=PatternCategory.BEHAVIORAL,
        intent="Fix the order of an operation's steps while deferring some steps to subclasses.",
        example="Tea and coffee share one preparation sequence but brew and season differently.",
        demo=template_method.demo,
    ))
