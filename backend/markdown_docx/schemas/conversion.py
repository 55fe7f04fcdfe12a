"""Schemas for conversion endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    markdown: str = Field(..., description="Raw markdown text to convert")
    title: Optional[str] = Field(
        default=None,
        description="Document title, also used for the download filename.",
    )


class SyntaxHelpItem(BaseModel):
    name: str = Field(..., description="Name of the construct")
    example: str = Field(..., description="How to write it in markdown")


class SyntaxHelpResponse(BaseModel):
    items: List[SyntaxHelpItem] = Field(default_factory=list)
    packaged_writer_enabled: bool = Field(
        ...,
        description="Whether DOCX output is available or every conversion uses the HTML fallback.",
    )


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API status")
    environment: str = Field(..., description="Deployment environment name")
