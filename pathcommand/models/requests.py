"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConvertOptions(BaseModel):
    """Option flags; anything left out falls back to the configured defaults."""

    model_config = ConfigDict(extra="forbid")

    convert_absolute: bool = True
    split_chains: bool = False
    convert_lines: bool = False
    convert_smooth: bool = False
    convert_quadratic_to_cubic: bool = False
    convert_arc_to_cubic: bool = False
    add_line_breaks: bool = False
    return_structured: bool = False
    correct_floating_point: bool = False


class PathConvertRequest(BaseModel):
    d: str = Field(..., description="Raw path data (the d attribute value)")
    options: ConvertOptions = Field(default_factory=ConvertOptions)


class DocumentConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    options: ConvertOptions = Field(default_factory=ConvertOptions)
