"""Pydantic models for Brickset LEGO set records."""

from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Dimensions(BaseModel):
    """Box dimensions of a set (centimetres, weight in kilograms)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    height: float | None = Field(default=None, strict=True)
    width: float | None = Field(default=None, strict=True)
    depth: float | None = Field(default=None, strict=True)
    weight: float | None = Field(default=None, strict=True)


class LegoSet(BaseModel):
    """A single LEGO set entry. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    number: str = Field(..., strict=True, description="Set number, e.g. 75192-1")
    name: Optional[str] = None
    pieces: int = Field(..., ge=0, strict=True)
    theme: str
    subtheme: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    dimensions: Optional[Dimensions] = None

    # Extra Brickset fields, carried through but unused by the queries
    year: Optional[int] = Field(default=None, strict=True)
    packaging: Optional[str] = Field(default=None, validation_alias=AliasChoices("packaging", "packagingType"))
    availability: Optional[str] = None
    minifigs: Optional[int] = Field(default=None, ge=0, strict=True)

    @property
    def code(self) -> str:
        """Identifying code of the set (alias of ``number``)."""
        return self.number


# The loaded collection: ordered, read-only, passed explicitly to queries.
Dataset = Tuple[LegoSet, ...]
