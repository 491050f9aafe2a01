"""
Corpus Models - Pydantic schemas for the extracted DSFR documentation artifacts.

index.json holds a list of ComponentEntry, icons.json a list of IconEntry,
and colors.json a single ColorsIndex. Field aliases keep the camelCase keys
used on disk.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Section(str, Enum):
	"""Documentation facets, in their canonical order."""
	OVERVIEW = "overview"
	CODE = "code"
	DESIGN = "design"
	ACCESSIBILITY = "accessibility"
	DEMO = "demo"


SECTION_NAMES: list[str] = [s.value for s in Section]

Category = Literal["component", "core", "layout", "pattern"]
ColorContext = Literal["background", "text", "artwork"]
FamilyCategory = Literal["primaire", "neutre", "systeme", "illustrative"]


class ComponentEntry(BaseModel):
	"""One documented unit: component, core concept, layout or pattern."""
	model_config = ConfigDict(frozen=True)

	name: str = Field(description="Unique key, e.g. 'button' or 'page/login'")
	title: str = Field(description="French display title")
	description: str = Field(default="")
	category: Category
	sections: list[str] = Field(default_factory=list, description="Available sections in declared order")


class SearchResult(BaseModel):
	"""A single search_components hit."""
	name: str
	title: str
	category: str
	match_type: str
	excerpt: str


class IconEntry(BaseModel):
	"""An icon grouped across its fill/line variants."""
	model_config = ConfigDict(frozen=True)

	name: str
	category: str
	variants: list[str] = Field(default_factory=list)
	classes: list[str] = Field(default_factory=list)


class ColorDecisionToken(BaseModel):
	"""A usage-bound color variable with light and dark theme values."""
	model_config = ConfigDict(frozen=True)

	token: str
	context: ColorContext
	description: str = ""
	light: str
	dark: str


class ColorPair(BaseModel):
	model_config = ConfigDict(frozen=True)

	light: str
	dark: str


class ColorFamily(BaseModel):
	"""A palette group with its semantic variants."""
	model_config = ConfigDict(frozen=True)

	name: str
	category: FamilyCategory
	correspondences: dict[str, ColorPair] = Field(default_factory=dict)


class ColorsIndex(BaseModel):
	"""Aggregate content of colors.json."""
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	decision_tokens: list[ColorDecisionToken] = Field(default_factory=list, alias="decisionTokens")
	families: list[ColorFamily] = Field(default_factory=list)
	illustrative_names: list[str] = Field(default_factory=list, alias="illustrativeNames")
