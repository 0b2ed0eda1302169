"""Core modules for goproj.

This package contains the provisioning machinery used by the CLI:
- config: Settings loaded at startup
- paths: Project path resolution
- runner: External command execution
- provisioner: Transactional project creation with rollback
- errors: Provisioning error taxonomy
"""

from goproj.core.config import GoprojConfig, load_config

from goproj.core.errors import (
    ProvisionError,
    InvalidNameError,
    UnknownKindError,
    UnknownFrameworkError,
    DirectoryCreationError,
    ManifestInitError,
    VCSInitError,
    DependencyFetchError,
    FileWriteError,
    RollbackError,
    ProvisionAborted,
)

from goproj.core.paths import resolve_project_path

from goproj.core.runner import (
    CommandRunner,
    ExternalCommandError,
    CommandNotFoundError,
    CommandTimeoutError,
    CommandFailedError,
)

from goproj.core.provisioner import (
    ProjectRequest,
    ProvisioningState,
    ProvisionPlan,
    Provisioner,
    RollbackGuard,
)

__all__ = [
    # Config
    "GoprojConfig",
    "load_config",
    # Errors
    "ProvisionError",
    "InvalidNameError",
    "UnknownKindError",
    "UnknownFrameworkError",
    "DirectoryCreationError",
    "ManifestInitError",
    "VCSInitError",
    "DependencyFetchError",
    "FileWriteError",
    "RollbackError",
    "ProvisionAborted",
    # Paths
    "resolve_project_path",
    # Runner
    "CommandRunner",
    "ExternalCommandError",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "CommandFailedError",
    # Provisioner
    "ProjectRequest",
    "ProvisioningState",
    "ProvisionPlan",
    "Provisioner",
    "RollbackGuard",
]
