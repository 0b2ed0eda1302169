"""Transactional Go project provisioning.

A run either produces a complete project or leaves the target directory
exactly as it found it:

1. validate name, kind and framework (no filesystem access)
2. confirm before reusing an existing directory
3. create the directory
4. go mod init
5. git init (optional)
6. go get <framework deps> (cli kind only)
7. write the starter file

Steps 3-7 run inside a RollbackGuard that undoes everything unless the
run reaches the end and disarms it.
"""

import logging
import os
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set, Tuple

from goproj.core.config import GoprojConfig
from goproj.core.errors import (
    DependencyFetchError,
    DirectoryCreationError,
    FileWriteError,
    ManifestInitError,
    ProvisionAborted,
    ProvisionError,
    RollbackError,
    UnknownFrameworkError,
    UnknownKindError,
    VCSInitError,
)
from goproj.core.paths import resolve_project_path
from goproj.core.runner import CommandRunner, ExternalCommandError
from goproj.templates import (
    STDLIB_FRAMEWORK,
    DependencyRegistry,
    TemplateRegistry,
    default_dependencies,
    default_templates,
)

logger = logging.getLogger(__name__)

CLI_KIND = "cli"


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class ProjectRequest:
    """Everything needed to provision one project."""
    name: str
    kind: str = CLI_KIND
    module_path: Optional[str] = None  # defaults to name
    framework: str = STDLIB_FRAMEWORK
    init_vcs: bool = False

    @property
    def module(self) -> str:
        return self.module_path or self.name


@dataclass
class ProvisioningState:
    """Steps completed by the current run. Never persisted."""
    directory_created: bool = False
    manifest_initialized: bool = False
    vcs_initialized: bool = False
    dependencies_fetched: bool = False
    template_written: bool = False
    rollback_armed: bool = False

    def completed_steps(self) -> List[str]:
        steps = [
            ("directory", self.directory_created),
            ("manifest", self.manifest_initialized),
            ("vcs", self.vcs_initialized),
            ("dependencies", self.dependencies_fetched),
            ("template", self.template_written),
        ]
        return [name for name, done in steps if done]


@dataclass(frozen=True)
class ProvisionPlan:
    """Result of validating a request; fixed before anything is mutated."""
    target: Path
    template: str
    dependencies: Tuple[str, ...] = ()


# =============================================================================
# Rollback
# =============================================================================

class RollbackGuard:
    """Undo a partially provisioned project unless explicitly disarmed.

    If the target did not exist before the run, rollback removes the whole
    tree. If it did exist (the user chose to continue), only entries added
    by this run are removed and files saved with ``preserve`` are restored.

    Args:
        target: Project directory
        state: Step tracker for the run, used for log context
    """

    def __init__(self, target: Path, state: Optional[ProvisioningState] = None):
        self.target = target
        self.state = state or ProvisioningState()
        self.preexisting = target.exists()
        self._entries: Optional[Set[str]] = None
        if target.is_dir():
            self._entries = set(os.listdir(target))
        self._saved: Dict[Path, bytes] = {}
        self.armed = False

    def __enter__(self) -> "RollbackGuard":
        self.armed = True
        self.state.rollback_armed = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.armed:
            return False

        self.armed = False
        self.state.rollback_armed = False
        logger.info(
            "Rolling back %s (completed steps: %s)",
            self.target,
            ", ".join(self.state.completed_steps()) or "none",
        )
        try:
            changed = self.rollback()
        except OSError as e:
            rollback_error = RollbackError(f"Could not remove {self.target}: {e}")
            rollback_error.__cause__ = e
            logger.error("Rollback of %s failed: %s", self.target, e)
            if isinstance(exc, ProvisionError):
                exc.rollback_error = rollback_error
            elif exc is None:
                raise rollback_error
        else:
            if isinstance(exc, ProvisionError):
                exc.rolled_back = changed
        return False

    def disarm(self) -> None:
        """Keep everything the run produced."""
        self.armed = False
        self.state.rollback_armed = False

    def preserve(self, path: Path) -> None:
        """Remember a pre-existing file's bytes so rollback can restore it."""
        if self._entries is not None and path.is_file() and path not in self._saved:
            self._saved[path] = path.read_bytes()

    def rollback(self) -> bool:
        """Restore the target to its pre-run state.

        Returns:
            True if anything on disk was removed or restored

        Raises:
            OSError: If removal or restore fails
        """
        if not self.preexisting:
            if not os.path.lexists(self.target):
                return False
            shutil.rmtree(self.target)
            return True

        if self._entries is None:
            # Pre-existing non-directory; mkdir failed and nothing was made
            return False

        changed = False
        for entry in sorted(set(os.listdir(self.target)) - self._entries):
            path = self.target / entry
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
            changed = True

        for path, data in self._saved.items():
            path.write_bytes(data)
            changed = True
        return changed


@contextmanager
def _step(error_cls, message: str):
    """Translate a step's low-level failure into its ProvisionError."""
    try:
        yield
    except (ExternalCommandError, OSError) as e:
        raise error_cls(f"{message}: {e}") from e


# =============================================================================
# Provisioner
# =============================================================================

class Provisioner:
    """Creates Go projects under the configured projects directory.

    Args:
        config: Settings (projects dir, tool names, entry point)
        templates: Kind -> starter text
        dependencies: Framework -> Go module ids
        runner: Executes external commands; anything with a compatible
            ``run(working_dir, program, *args)`` works
        confirm_overwrite: Asked with the target path when it already
            exists; returning False aborts the run
        reporter: Called with a short message after each completed step
    """

    def __init__(
        self,
        config: Optional[GoprojConfig] = None,
        templates: Optional[TemplateRegistry] = None,
        dependencies: Optional[DependencyRegistry] = None,
        runner: Optional[CommandRunner] = None,
        confirm_overwrite: Optional[Callable[[Path], bool]] = None,
        reporter: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or GoprojConfig()
        self.templates = templates or default_templates()
        self.dependencies = dependencies or default_dependencies()
        self.runner = runner or CommandRunner(timeout=self.config.command_timeout)
        self.confirm_overwrite = confirm_overwrite or (lambda path: False)
        self.reporter = reporter or (lambda message: None)

    def _report(self, message: str) -> None:
        logger.info(message)
        self.reporter(message)

    def plan(self, request: ProjectRequest) -> ProvisionPlan:
        """Validate a request without touching the filesystem.

        Raises:
            InvalidNameError: Bad project name
            UnknownKindError: No template for the kind
            UnknownFrameworkError: No dependencies for the cli framework
        """
        target = resolve_project_path(self.config.base_dir, request.name)

        if request.kind not in self.templates:
            raise UnknownKindError(request.kind, self.templates.kinds())
        template = self.templates.template_for(request.kind)

        deps: Tuple[str, ...] = ()
        if request.kind == CLI_KIND:
            if not self.dependencies.is_known(request.framework):
                raise UnknownFrameworkError(
                    request.framework, self.dependencies.frameworks()
                )
            deps = self.dependencies.dependencies_for(request.framework) or ()
        elif request.framework != self.dependencies.default:
            logger.debug(
                "Ignoring framework %s for %s project", request.framework, request.kind
            )

        return ProvisionPlan(target=target, template=template, dependencies=deps)

    def create_project(self, request: ProjectRequest) -> Path:
        """Provision a project atomically.

        Returns:
            Path of the created project

        Raises:
            ProvisionError: A step failed; anything created was rolled back
            ProvisionAborted: The target exists and the user declined
        """
        plan = self.plan(request)
        target = plan.target

        with _step(DirectoryCreationError, f"Cannot access {target}"):
            exists = target.exists()
        if exists and not self.confirm_overwrite(target):
            logger.info("User declined to continue into existing %s", target)
            raise ProvisionAborted(target)

        state = ProvisioningState()
        with _step(DirectoryCreationError, f"Cannot read {target}"):
            guard = RollbackGuard(target, state)
        with guard:
            with _step(DirectoryCreationError, f"Error creating directory {target}"):
                target.mkdir(parents=True, exist_ok=True)
            state.directory_created = True
            self._report("Created project directory")

            with _step(ManifestInitError, "Error initializing Go module"):
                self.runner.run(target, self.config.go_command, "mod", "init", request.module)
            state.manifest_initialized = True
            self._report("Initialized Go module")

            if request.init_vcs:
                with _step(VCSInitError, "Error initializing Git repository"):
                    self.runner.run(target, self.config.git_command, "init")
                state.vcs_initialized = True
                self._report("Initialized Git repository")

            if plan.dependencies:
                logger.info("Adding dependencies for %s", request.framework)
                with _step(DependencyFetchError, "Error getting dependencies"):
                    self.runner.run(target, self.config.go_command, "get", *plan.dependencies)
                state.dependencies_fetched = True
                self._report("Dependencies added")

            entry_point = target / self.config.entry_point
            with _step(FileWriteError, f"Error writing {self.config.entry_point}"):
                guard.preserve(entry_point)
                entry_point.write_text(plan.template)
            state.template_written = True
            self._report(f"Wrote {self.config.entry_point} file")

            guard.disarm()

        return target
