"""Site build: mirrors a Generated Tree into an optimised, deployable Built Tree.

Every build starts from scratch: an existing build directory for the site
is removed entirely before the source tree is copied again, so files that
disappeared from the source never linger in the output.
"""

import logging
import os
import shutil
import time
from pathlib import Path
from typing import Optional

from sitepipe.config import get_settings
from sitepipe.models.build_response import BuildResult
from sitepipe.services.deployment import emit_deployment_files
from sitepipe.services.errors import SiteBuildError
from sitepipe.services.locks import site_lock
from sitepipe.services.optimizer import optimize_file
from sitepipe.services.paths import resolve_site_dir

logger = logging.getLogger(__name__)


def build_site(
    site_name: Optional[str],
    *,
    input_root: Optional[Path] = None,
    build_root: Optional[Path] = None,
) -> BuildResult:
    """Build *site_name* from ``<input_root>/<site_name>`` into ``<build_root>/<site_name>``.

    Returns a :class:`BuildResult` whose ``file_count`` is the number of
    files copied from the source tree; the deployment manifests are not
    included in that figure.

    Raises:
        SiteBuildError: if the name is blank or invalid, the source site is
            missing, or any filesystem operation fails.
    """
    if site_name is None or not site_name.strip():
        raise SiteBuildError("Site name cannot be blank")

    settings = get_settings()
    input_root = Path(input_root) if input_root is not None else settings.build_source_path
    build_root = Path(build_root) if build_root is not None else settings.build_path

    try:
        source_path = resolve_site_dir(input_root, site_name)
        target_path = resolve_site_dir(build_root, site_name)
    except ValueError as exc:
        raise SiteBuildError(str(exc)) from exc

    start = time.monotonic()
    if not source_path.is_dir():
        logger.warning("Build requested for unknown site %s", site_name)
        raise SiteBuildError(f"Site '{site_name}' not found in input directory")

    logger.info(
        "Building site",
        extra={"site_name": site_name, "source": str(source_path), "target": str(target_path)},
    )
    with site_lock("build", site_name):
        try:
            _recreate_directory(target_path)
            file_count = copy_and_optimize(source_path, target_path)
            emit_deployment_files(target_path, site_name)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Build of %s failed: %s", site_name, exc)
            raise SiteBuildError(f"Failed to build site: {exc}") from exc

    build_time_ms = int((time.monotonic() - start) * 1000)
    logger.info("Built site %s: %d file(s) in %d ms", site_name, file_count, build_time_ms)
    return BuildResult(
        site_name=site_name,
        build_path=str(target_path),
        status="SUCCESS",
        message="Site built successfully",
        build_time_ms=build_time_ms,
        file_count=file_count,
    )


def _recreate_directory(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


def copy_and_optimize(source: Path, target: Path) -> int:
    """Mirror *source* into *target*, optimising each copied file.

    Directories are walked depth-first in sorted order.  Returns the number
    of files copied.
    """
    file_count = 0
    for dirpath, dirnames, filenames in os.walk(source):
        dirnames.sort()
        relative = Path(dirpath).relative_to(source)
        target_dir = target / relative
        target_dir.mkdir(parents=True, exist_ok=True)

        for filename in sorted(filenames):
            target_file = target_dir / filename
            shutil.copyfile(Path(dirpath) / filename, target_file)
            optimize_file(target_file)
            file_count += 1
    return file_count
