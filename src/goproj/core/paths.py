"""Project path resolution."""

import os
from pathlib import Path
from typing import Union

from goproj.core.errors import InvalidNameError

_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def normalize_base(base_dir: Union[str, Path]) -> Path:
    """Expand ``~`` and make the base directory absolute and normalized."""
    return Path(os.path.normpath(os.path.abspath(os.path.expanduser(str(base_dir)))))


def resolve_project_path(base_dir: Union[str, Path], name: str) -> Path:
    """Resolve the directory a project named ``name`` lives in.

    Args:
        base_dir: Directory that holds all projects
        name: Project name supplied by the user

    Returns:
        Normalized absolute path directly under ``base_dir``

    Raises:
        InvalidNameError: If the name is empty, contains a path separator
            or NUL byte, or would resolve outside ``base_dir``
    """
    if not name or not name.strip():
        raise InvalidNameError("Please provide a project name")

    if "\x00" in name:
        raise InvalidNameError(f"Invalid project name {name!r}: contains a NUL byte")

    if name in (".", "..") or any(sep in name for sep in _SEPARATORS):
        raise InvalidNameError(
            f"Invalid project name {name!r}: must be a single directory name"
        )

    base = normalize_base(base_dir)
    target = Path(os.path.normpath(os.path.join(str(base), name)))

    # Containment check on the normalized result, not on the raw input
    if target == base or base not in target.parents:
        raise InvalidNameError(
            f"Invalid project name {name!r}: resolves outside {base}"
        )

    return target
