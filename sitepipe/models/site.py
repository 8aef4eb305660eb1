"""Content model: a Site owns ordered Pages, each Page owns ordered Sections.

Sections form a tagged union keyed by ``type``.  Each variant only carries
the fields its template renders, so combinations such as a hero section with
form fields are rejected when the model is built.  All models are frozen.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SUPPORTED_SECTION_TYPES = ("hero", "skills", "form", "text", "image", "contact", "about")


class _SectionBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    heading: Optional[str] = None
    content: Dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form extension content passed through to the template.",
    )


class HeroSection(_SectionBase):
    type: Literal["hero"] = "hero"
    text: Optional[str] = None


class SkillsSection(_SectionBase):
    type: Literal["skills"] = "skills"
    items: List[str] = Field(default_factory=list)


class FormSection(_SectionBase):
    type: Literal["form"] = "form"
    fields: List[str] = Field(default_factory=list)


class TextSection(_SectionBase):
    type: Literal["text"] = "text"
    text: Optional[str] = None


class ImageSection(_SectionBase):
    """Image block; ``content["src"]`` and ``content["alt"]`` describe the image, ``text`` is the caption."""

    type: Literal["image"] = "image"
    text: Optional[str] = None


class ContactSection(_SectionBase):
    type: Literal["contact"] = "contact"
    text: Optional[str] = None
    items: List[str] = Field(default_factory=list)


class AboutSection(_SectionBase):
    type: Literal["about"] = "about"
    text: Optional[str] = None
    items: List[str] = Field(default_factory=list)


Section = Annotated[
    Union[
        HeroSection,
        SkillsSection,
        FormSection,
        TextSection,
        ImageSection,
        ContactSection,
        AboutSection,
    ],
    Field(discriminator="type"),
]


class Page(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9-]+$",
        description="Lowercase letters, digits and hyphens; ``index`` maps to index.html.",
    )
    sections: List[Section] = Field(min_length=1)


class Site(BaseModel):
    """A complete site description as submitted by the caller."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(alias="siteName", min_length=1, max_length=100)
    pages: List[Page] = Field(min_length=1)
