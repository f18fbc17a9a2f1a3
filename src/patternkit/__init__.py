"""patternkit - runnable walk-throughs of classic object-oriented design patterns."""

__version__ = "1.0.0"
