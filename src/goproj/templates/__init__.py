"""Starter template and dependency registries.

Both registries are read-only once built and are handed to the
Provisioner, so tests can swap in their own data.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from goproj.templates.starters import API_MAIN, APP_MAIN, CLI_MAIN

# Framework sentinel: Go's standard library flag package, no extra dependency
STDLIB_FRAMEWORK = "flag"

KIND_DESCRIPTIONS = {
    "cli": "Command-line tool",
    "api": "JSON HTTP API with request logging",
    "app": "HTML web app",
}

FRAMEWORK_DESCRIPTIONS = {
    STDLIB_FRAMEWORK: "Standard library flag package",
    "cobra": "spf13/cobra command framework",
    "cli": "urfave/cli v2",
}


class TemplateRegistry:
    """Maps a project kind to its starter source text."""

    def __init__(self, templates: Mapping[str, str]):
        self._templates = MappingProxyType(dict(templates))

    def template_for(self, kind: str) -> Optional[str]:
        return self._templates.get(kind)

    def kinds(self) -> list:
        return list(self._templates)

    def __contains__(self, kind: str) -> bool:
        return kind in self._templates


class DependencyRegistry:
    """Maps a CLI framework name to the Go modules it needs.

    The ``default`` framework needs nothing and is never looked up.
    """

    def __init__(
        self,
        dependencies: Mapping[str, Iterable[str]],
        default: str = STDLIB_FRAMEWORK,
    ):
        self._dependencies: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {name: tuple(ids) for name, ids in dependencies.items()}
        )
        self.default = default

    def dependencies_for(self, framework: str) -> Optional[Tuple[str, ...]]:
        return self._dependencies.get(framework)

    def frameworks(self) -> list:
        """All accepted framework names, default first."""
        return [self.default] + [f for f in self._dependencies if f != self.default]

    def is_known(self, framework: str) -> bool:
        return framework == self.default or framework in self._dependencies


def default_templates() -> TemplateRegistry:
    """Registry with the built-in starter for each kind."""
    return TemplateRegistry({
        "cli": CLI_MAIN,
        "api": API_MAIN,
        "app": APP_MAIN,
    })


def default_dependencies() -> DependencyRegistry:
    """Registry with the built-in CLI framework dependencies."""
    deps: Dict[str, Tuple[str, ...]] = {
        "cobra": ("github.com/spf13/cobra",),
        "cli": ("github.com/urfave/cli/v2",),
    }
    return DependencyRegistry(deps)
