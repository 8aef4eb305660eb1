"""Read-only queries over the generation and build roots."""

import os
from pathlib import Path
from typing import List, Optional

from sitepipe.config import get_settings
from sitepipe.models.build_response import BuildStatus
from sitepipe.services.errors import SiteBuildError
from sitepipe.services.paths import resolve_site_dir


def list_available_sites(*, input_root: Optional[Path] = None) -> List[str]:
    """Return the names of the sites under the generation root.

    A missing root yields an empty list.
    """
    root = Path(input_root) if input_root is not None else get_settings().build_source_path
    if not root.is_dir():
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir())


def count_files(directory: Path) -> int:
    """Count every regular file below *directory*, recursively."""
    return sum(len(filenames) for _dirpath, _dirnames, filenames in os.walk(directory))


def get_build_status(site_name: Optional[str], *, build_root: Optional[Path] = None) -> BuildStatus:
    """Report whether *site_name* has a Built Tree and how many files it holds.

    Raises:
        SiteBuildError: if *site_name* is blank or not a valid directory name.
    """
    if site_name is None or not site_name.strip():
        raise SiteBuildError("Site name cannot be blank")

    root = Path(build_root) if build_root is not None else get_settings().build_path
    try:
        build_path = resolve_site_dir(root, site_name)
    except ValueError as exc:
        raise SiteBuildError(str(exc)) from exc

    if not build_path.is_dir():
        return BuildStatus(
            site_name=site_name,
            build_path=None,
            status="NOT_BUILT",
            message="Site has not been built yet",
            file_count=0,
        )

    return BuildStatus(
        site_name=site_name,
        build_path=str(build_path),
        status="BUILT",
        message="Site is ready for deployment",
        file_count=count_files(build_path),
    )
