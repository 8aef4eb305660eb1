from pathlib import Path

# Characters that would let a site name escape its root directory.
_FORBIDDEN = ("/", "\\", "\x00")


def resolve_site_dir(root: Path, site_name: str) -> Path:
    """Return ``root / site_name``, refusing names that point outside *root*.

    Raises:
        ValueError: if *site_name* contains a path separator or is a relative
            directory reference such as ``..``.
    """
    if site_name in (".", "..") or any(ch in site_name for ch in _FORBIDDEN):
        raise ValueError(f"Site name '{site_name}' is not a valid directory name.")
    return Path(root) / site_name
