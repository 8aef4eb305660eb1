"""Structural checks run on a :class:`~sitepipe.models.site.Site` before generation.

The pydantic models already reject most malformed input when they are
built; this module is the authoritative gate and also covers instances
assembled with ``model_construct`` or by other callers that skipped
validation.  Checks run in a fixed order and the first failure wins.
"""

from typing import Optional

from sitepipe.models.site import SUPPORTED_SECTION_TYPES, Page, Site
from sitepipe.services.errors import SiteValidationError


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def validate_site(site: Optional[Site]) -> None:
    """Raise :class:`SiteValidationError` if *site* cannot be generated."""
    if site is None:
        raise SiteValidationError("Site cannot be null")

    if _is_blank(site.name):
        raise SiteValidationError("Site name cannot be blank")

    if not site.pages:
        raise SiteValidationError("Site must have at least one page")

    for page in site.pages:
        _validate_page(page)

    slugs = [page.slug for page in site.pages]
    if len(set(slugs)) != len(slugs):
        raise SiteValidationError("Page slugs must be unique")


def _validate_page(page: Page) -> None:
    if _is_blank(page.title):
        raise SiteValidationError("Page title cannot be blank")

    if _is_blank(page.slug):
        raise SiteValidationError("Page slug cannot be blank")

    if not page.sections:
        raise SiteValidationError("Page must have at least one section")

    for section in page.sections:
        section_type = getattr(section, "type", None)
        if _is_blank(section_type):
            raise SiteValidationError("Section type cannot be blank")
        if section_type not in SUPPORTED_SECTION_TYPES:
            raise SiteValidationError(
                f"Unsupported section type: {section_type}. "
                f"Supported types: {list(SUPPORTED_SECTION_TYPES)}"
            )
