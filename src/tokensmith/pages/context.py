"""
Template context models for the documentation pages.

A page is an ordered list of sections; each section is a titled table of
token rows. Templates only see these models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NavItemContext(BaseModel):
    """Navigation entry."""

    label: str
    href: str
    active: bool = False


class NavGroupContext(BaseModel):
    """Navigation group (Foundations, Components, ...)."""

    title: str
    items: list[NavItemContext] = Field(default_factory=list)


class TokenRowContext(BaseModel):
    """One documented token."""

    name: str  # display name, e.g. "ui-bg-default"
    variable: str  # copyable reference, e.g. "--ui-bg-default" or "$gap-sm"
    value: str
    reference: str = ""
    dark_value: str = ""
    dark_reference: str = ""
    sample_style: str = ""  # inline style applied to the sample cell


class SectionContext(BaseModel):
    """A titled table of token rows."""

    title: str
    kind: str = "values"  # values, colors, theme-colors
    description: str = ""
    rows: list[TokenRowContext] = Field(default_factory=list)


class PageContext(BaseModel):
    """Everything needed to render one documentation page."""

    id: str
    title: str
    brand: str
    description: str = ""
    stylesheet: str = ""  # relative href of the generated tokens.css
    nav: list[NavGroupContext] = Field(default_factory=list)
    sections: list[SectionContext] = Field(default_factory=list)
