"""Error taxonomy for project provisioning.

Validation errors (name, kind, framework) are raised before anything
touches the filesystem. Step errors raised after the project directory
exists are always accompanied by a rollback of that directory.
"""

from typing import Optional


class ProvisionError(Exception):
    """Base exception for a failed provisioning run."""

    step = "provision"

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        if step is not None:
            self.step = step
        self.rollback_error: Optional["RollbackError"] = None
        self.rolled_back = False


# =============================================================================
# Raised before any mutation
# =============================================================================

class InvalidNameError(ProvisionError):
    """Project name is empty or escapes the projects directory."""
    step = "validate"


class UnknownKindError(ProvisionError):
    """Project kind has no registered starter template."""
    step = "validate"

    def __init__(self, kind: str, known: list):
        super().__init__(
            f"Unknown project kind: {kind!r}. Available: {', '.join(known)}"
        )
        self.kind = kind


class UnknownFrameworkError(ProvisionError):
    """CLI framework has no registered dependency set."""
    step = "validate"

    def __init__(self, framework: str, known: list):
        super().__init__(
            f"Unknown CLI library: {framework!r}. Available: {', '.join(known)}"
        )
        self.framework = framework


class DirectoryCreationError(ProvisionError):
    """The project directory could not be created."""
    step = "create directory"


# =============================================================================
# Raised after the directory exists (trigger rollback)
# =============================================================================

class ManifestInitError(ProvisionError):
    """`go mod init` failed."""
    step = "initialize module"


class VCSInitError(ProvisionError):
    """`git init` failed."""
    step = "initialize git repository"


class DependencyFetchError(ProvisionError):
    """`go get` failed for the framework dependencies."""
    step = "fetch dependencies"


class FileWriteError(ProvisionError):
    """The starter file could not be written."""
    step = "write starter file"


class RollbackError(ProvisionError):
    """Removing a partially created project failed.

    Never raised on its own; attached to the primary error as
    ``rollback_error``.
    """
    step = "rollback"


# =============================================================================
# User decision
# =============================================================================

class ProvisionAborted(Exception):
    """The user declined to continue into an existing directory."""

    def __init__(self, path):
        super().__init__(f"Operation aborted: {path} already exists")
        self.path = path
