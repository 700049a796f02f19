"""Pydantic models for dataset records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class Book(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    author_id: int = Field(alias="authorId")
