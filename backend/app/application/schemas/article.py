"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Both fields are ``required`` on the HTML forms only; the server accepts
whatever the browser submits, including empty strings.
"""

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article from the add form."""

    title: str = Field("", examples=["Week 7 Power Rankings"])
    content: str = Field("", examples=["<p>The <strong>Chiefs</strong> stay on top.</p>"])


class ArticleUpdate(BaseModel):
    """Schema for the edit form — both fields are overwritten."""

    title: str = ""
    content: str = ""
