"""Catalog value objects."""
from enum import Enum
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """Gang of Four pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternInfo(BaseModel):
    """Catalog entry describing one pattern and its runnable example."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Slug, e.g. 'simple-factory'")
    title: str
    category: PatternCategory
    intent: str
    example: str = Field(..., description="One-line description of the toy example")
    demo: Callable[[], None] = Field(..., exclude=True)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Store names as lower-case, dash-separated slugs."""
        slug = v.strip().lower().replace("_", "-").replace(" ", "-")
        if not slug:
            raise ValueError("Pattern name cannot be empty")
        return slug

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view without the demo callable."""
        return self.model_dump(mode="json")
