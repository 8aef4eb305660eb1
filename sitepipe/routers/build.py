import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sitepipe.config import Settings, get_settings
from sitepipe.models.build_response import BuildResult, BuildStatus, SiteListResponse
from sitepipe.services.builder import build_site
from sitepipe.services.deployment import SUPPORTED_PLATFORMS
from sitepipe.services.errors import SiteBuildError
from sitepipe.services.inventory import get_build_status, list_available_sites

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/api", tags=["Build"])


@router.get(
    "/build",
    response_model=BuildResult,
    summary="Build a generated site for deployment",
    description=(
        "Mirrors the generated site into `<build path>/<siteName>`, collapsing "
        "whitespace in HTML, CSS and JavaScript files, and adds `.htaccess`, "
        "`netlify.toml` and `README.md` deployment files.  An existing build "
        "for the same site is deleted first."
    ),
)
@limiter.limit("5/minute")
def build(
    request: Request,
    site_name: str = Query(alias="siteName", description="Name of a previously generated site."),
    settings: Settings = Depends(get_settings),
) -> BuildResult:
    logger.info("Build request received", extra={"site_name": site_name})

    try:
        return build_site(
            site_name,
            input_root=settings.build_source_path,
            build_root=settings.build_path,
        )
    except SiteBuildError as exc:
        logger.warning("Build of %s failed – %s", site_name, exc)
        raise HTTPException(status_code=400, detail=f"Build error: {exc}")


@router.get("/sites", response_model=SiteListResponse, summary="List generated sites")
def sites(settings: Settings = Depends(get_settings)) -> SiteListResponse:
    names = list_available_sites(input_root=settings.build_source_path)
    return SiteListResponse(
        sites=names,
        count=len(names),
        message="Available sites retrieved successfully",
    )


@router.get("/status/{site_name}", response_model=BuildStatus, summary="Build status of a site")
def status(site_name: str, settings: Settings = Depends(get_settings)) -> BuildStatus:
    try:
        return get_build_status(site_name, build_root=settings.build_path)
    except SiteBuildError as exc:
        raise HTTPException(status_code=400, detail=f"Status check error: {exc}")


@router.get("/deployment-info", summary="Supported deployment platforms")
def deployment_info() -> dict:
    return {
        "supportedPlatforms": SUPPORTED_PLATFORMS,
        "message": "Built sites include configuration files for all major platforms",
    }
