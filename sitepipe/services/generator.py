"""Site generation: turns a validated Site description into a Generated Tree.

Layout written under ``<output_root>/<site name>``::

    index.html, <slug>.html, ...
    assets/styles.css
    assets/script.js
    config.json

Directories are created if missing and reused otherwise; files are
overwritten.  A failure part-way through leaves whatever was already
written in place, and the next call for the same site overwrites it.
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional

from sitepipe.config import get_settings
from sitepipe.models.generation_response import GenerationResult
from sitepipe.models.site import Page, Site
from sitepipe.services import assets
from sitepipe.services.errors import RenderError, SiteGenerationError, SiteValidationError
from sitepipe.services.locks import site_lock
from sitepipe.services.paths import resolve_site_dir
from sitepipe.services.renderer import PAGE_TEMPLATE, Renderer, get_renderer
from sitepipe.services.validator import validate_site

logger = logging.getLogger(__name__)

ASSETS_DIRNAME = "assets"
CONFIG_FILENAME = "config.json"


def page_filename(slug: str) -> str:
    """Map a page slug to its output file name (``index`` -> ``index.html``)."""
    return "index.html" if slug == "index" else f"{slug}.html"


def generate_site(
    site: Optional[Site],
    *,
    output_root: Optional[Path] = None,
    renderer: Optional[Renderer] = None,
) -> GenerationResult:
    """Validate *site* and write its Generated Tree.

    Raises:
        SiteValidationError: if *site* is malformed.  Nothing is written.
        SiteGenerationError: if rendering or any filesystem write fails.
    """
    validate_site(site)

    root = Path(output_root) if output_root is not None else get_settings().output_path
    try:
        site_path = resolve_site_dir(root, site.name)
    except ValueError as exc:
        raise SiteValidationError(str(exc)) from exc

    renderer = renderer or get_renderer()

    logger.info(
        "Generating site",
        extra={"site_name": site.name, "pages": len(site.pages), "output_path": str(site_path)},
    )
    with site_lock("generate", site.name):
        _create_directories(site_path)
        pages_generated = _generate_pages(site, site_path, renderer)
        _generate_assets(site_path / ASSETS_DIRNAME)
        _generate_config(site, site_path)

    logger.info("Generated %d page(s) for site %s", pages_generated, site.name)
    return GenerationResult(
        site_name=site.name,
        output_path=str(site_path),
        pages_generated=pages_generated,
        message="Site generated successfully",
    )


def _create_directories(site_path: Path) -> None:
    try:
        (site_path / ASSETS_DIRNAME).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create output directory %s: %s", site_path, exc)
        raise SiteGenerationError(
            f"Failed to generate site: could not create directory {site_path}: {exc}"
        ) from exc


def _generate_pages(site: Site, site_path: Path, renderer: Renderer) -> int:
    # Counts pages processed, not distinct files written.
    pages_generated = 0
    for page in site.pages:
        html = _render_page(site, page, renderer)
        _write(site_path / page_filename(page.slug), html)
        pages_generated += 1
    return pages_generated


def _render_page(site: Site, page: Page, renderer: Renderer) -> str:
    context = {"site": site, "page": page, "sections": list(page.sections)}
    try:
        return renderer.render(PAGE_TEMPLATE, context)
    except RenderError as exc:
        raise SiteGenerationError(
            f"Failed to generate site: page '{page.slug}' could not be rendered: {exc}"
        ) from exc


def _generate_assets(assets_path: Path) -> None:
    _write(assets_path / assets.STYLES_FILENAME, assets.STYLES_CSS)
    _write(assets_path / assets.SCRIPT_FILENAME, assets.SCRIPT_JS)


def _generate_config(site: Site, site_path: Path) -> None:
    config = {
        "siteName": site.name,
        "pages": len(site.pages),
        "generatedAt": int(time.time() * 1000),
    }
    _write(site_path / CONFIG_FILENAME, json.dumps(config, ensure_ascii=False, indent=2) + "\n")


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        raise SiteGenerationError(f"Failed to generate site: could not write {path}: {exc}") from exc
