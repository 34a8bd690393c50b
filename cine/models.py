"""
Data models for the Cine Colombia graph demo.
"""
from typing import Optional, List, Dict
from datetime import date
from pydantic import BaseModel, Field, field_validator


class Movie(BaseModel):
	"""Represents one movie listing on the Cine Colombia billboard."""

	id: str = Field(..., description="Identifier used to build the resource URI")
	title: str = Field(..., description="Original title")
	spanish_title: str = Field(..., description="Title as shown in Colombia")
	genre: str = Field(..., description="Genre, or several genres separated by ', '")
	duration: int = Field(0, ge=0, description="Duration in minutes (0 = unknown)")
	rating: str = Field(..., description="Age rating")
	release_date: date = Field(..., description="Release date")
	status: str = Field("En cartelera", description="Commercial status")
	pre_sale: bool = Field(False, description="Whether tickets are on pre-sale")
	format: str = Field("Estreno", description="Commercial label")

	def genres(self) -> List[str]:
		"""Split the genre string into individual genres."""
		if "," in self.genre:
			return self.genre.split(", ")
		return [self.genre]

	def uri(self, base: str) -> str:
		"""Get the resource URI of this movie under ``base``."""
		return f"{base}{self.id}"

	def __str__(self) -> str:
		lines = [f"🎬 {self.spanish_title} ({self.title})"]
		lines.append(f"   Genre: {self.genre}")
		if self.duration:
			lines.append(f"   Duration: {self.duration} min")
		lines.append(f"   Rating: {self.rating}")
		lines.append(f"   Release: {self.release_date.isoformat()}")
		if self.pre_sale:
			lines.append("   [Preventa]")
		return "\n".join(lines)


class ResultSet(BaseModel):
	"""Ordered columns plus ordered rows of optional text values."""

	columns: List[str] = Field(default_factory=list)
	rows: List[Dict[str, Optional[str]]] = Field(default_factory=list)

	@field_validator("columns")
	@classmethod
	def columns_must_be_unique(cls, columns: List[str]) -> List[str]:
		seen = set()
		for name in columns:
			if name in seen:
				raise ValueError(f"duplicate column: {name}")
			seen.add(name)
		return columns

	def is_empty(self) -> bool:
		return not self.rows

	def get(self, index: int, column: str) -> Optional[str]:
		"""Value of ``column`` in row ``index``; None when unbound."""
		return self.rows[index].get(column)

	def __len__(self) -> int:
		return len(self.rows)


class DemoQuery(BaseModel):
	"""A titled SPARQL query from the demo catalogue."""

	title: str
	sparql: str
