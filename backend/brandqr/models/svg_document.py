"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    path_data: str | None = None


class SvgDocument(BaseModel):
    """Represents a parsed SVG file."""

    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    width: float = 0.0
    height: float = 0.0
    elements: list[SvgElement] = Field(default_factory=list)
    root_attributes: dict[str, str] = Field(default_factory=dict)
    raw_svg: str = ""

    def find(self, tag: str) -> list[SvgElement]:
        return [e for e in self.elements if e.tag == tag]

    @property
    def embedded_images(self) -> list[str]:
        return [e.attributes["href"] for e in self.find("image") if e.attributes.get("href")]
