"""Configuration helpers shared by the bundle scaffolder and CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from .errors import InvalidBundleNameError
from .naming import (
    NAMESPACE_SEPARATOR,
    generate_package_id,
    generate_path_segment,
    parse_name_parts,
    split_qualified_name,
)

__all__ = ["BundleConfig", "ScaffoldSettings", "DEFAULT_PATH", "DIRECTORY_NAMES"]


DEFAULT_PATH = "../Bundles"

DIRECTORY_NAMES: tuple[str, ...] = (
    "src",
    "config",
    "Resources",
    "tests",
    "public",
    "translations",
    "templates",
    "migrations",
)

_ALTERNATE_SEPARATORS = re.compile(r"[./]")


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Fixed shape of a generated bundle.

    The defaults describe a Symfony bundle distributed through Composer. They
    are not read from any file; a different scaffold shape means constructing
    a different :class:`ScaffoldSettings`.
    """

    default_path: str = DEFAULT_PATH
    directories: tuple[str, ...] = DIRECTORY_NAMES
    marker_name: str = ".gitkeep"
    gitignore_content: str = "/vendor/\n/.env"
    manifest_name: str = "composer.json"
    source_extension: str = "php"
    package_type: str = "symfony-bundle"
    php_constraint: str = ">=8.1"
    framework_package: str = "symfony/framework-bundle"
    framework_constraint: str = "^6.4"

    def requirements(self) -> dict[str, str]:
        """Return the ``require`` section of the manifest."""

        return {
            "php": self.php_constraint,
            self.framework_package: self.framework_constraint,
        }


@dataclass(frozen=True, slots=True)
class BundleConfig:
    """Identifiers derived from a fully qualified bundle name.

    Attributes
    ----------
    qualified_name:
        The namespaced name supplied by the user, normalised to use
        backslashes, e.g. ``Napse\\DemoBundle``.
    path_segment:
        Directory name of the bundle inside the base path
        (``napse-demo-bundle``).
    package_id:
        Composer package name (``napse/demo-bundle``).
    namespace:
        PHP namespace of the bundle class. It includes the class segment and
        therefore equals :attr:`qualified_name`.
    class_name:
        The final segment, used as the bundle class name.
    """

    qualified_name: str
    path_segment: str
    package_id: str
    namespace: str
    class_name: str

    @classmethod
    def from_name(cls, name: str) -> "BundleConfig":
        """Build a :class:`BundleConfig` from user input.

        ``.`` and ``/`` are accepted as namespace separators and converted to
        backslashes. Surrounding whitespace is ignored, inner whitespace is an
        error, and the name must contain at least two non-empty segments.
        """

        normalized = name.strip()
        if not normalized:
            raise InvalidBundleNameError("bundle name must not be empty")
        if any(character.isspace() for character in normalized):
            raise InvalidBundleNameError(f'bundle name "{normalized}" must not contain whitespace')

        qualified_name = _ALTERNATE_SEPARATORS.sub(r"\\", normalized).strip(NAMESPACE_SEPARATOR)
        segments = split_qualified_name(qualified_name)
        if len(segments) < 2:
            raise InvalidBundleNameError(
                f'bundle name "{normalized}" must include a vendor namespace, e.g. Napse\\DemoBundle'
            )
        if not all(segments):
            raise InvalidBundleNameError(f'bundle name "{normalized}" contains an empty namespace segment')

        namespace, class_name = parse_name_parts(qualified_name)
        return cls(
            qualified_name=qualified_name,
            path_segment=generate_path_segment(qualified_name),
            package_id=generate_package_id(qualified_name),
            namespace=namespace,
            class_name=class_name,
        )

    @property
    def bundle_class(self) -> str:
        """Fully qualified name of the generated bundle class."""

        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.class_name}"

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "qualified_name": self.qualified_name,
            "path_segment": self.path_segment,
            "package_id": self.package_id,
            "namespace": self.namespace,
            "class_name": self.class_name,
            "bundle_class": self.bundle_class,
        }
