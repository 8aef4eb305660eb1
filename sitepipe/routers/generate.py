import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sitepipe.config import Settings, get_settings
from sitepipe.models.generation_response import GenerationResult
from sitepipe.models.site import SUPPORTED_SECTION_TYPES, Site
from sitepipe.services.errors import SiteGenerationError, SiteValidationError
from sitepipe.services.generator import generate_site

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/api", tags=["Generation"])


@router.post(
    "/generate",
    response_model=GenerationResult,
    summary="Generate a static site from a site description",
    description=(
        "Validates the site description and renders one HTML file per page "
        "into `<output path>/<siteName>`, together with a stylesheet, a script "
        "and a `config.json` summary.  Any previous output for the same site "
        "is overwritten."
    ),
)
@limiter.limit("10/minute")
def generate(
    request: Request,
    body: Site,
    settings: Settings = Depends(get_settings),
) -> GenerationResult:
    logger.info("Generate request received", extra={"site_name": body.name, "pages": len(body.pages)})

    try:
        return generate_site(body, output_root=settings.output_path)
    except SiteValidationError as exc:
        logger.warning("Invalid site description for %s – %s", body.name, exc)
        raise HTTPException(status_code=400, detail=f"Validation error: {exc}")
    except SiteGenerationError as exc:
        logger.error("Error generating site %s: %s", body.name, exc)
        raise HTTPException(status_code=500, detail=f"Generation error: {exc}")


@router.get("/section-types", summary="List supported section types")
def section_types() -> dict:
    return {
        "supportedTypes": list(SUPPORTED_SECTION_TYPES),
        "description": "Supported section types for site generation",
    }


@router.get("/health", summary="Health check")
def health() -> dict:
    return {"status": "UP", "service": "sitepipe", "timestamp": str(int(time.time() * 1000))}
