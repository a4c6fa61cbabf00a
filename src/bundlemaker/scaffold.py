"""Bundle scaffolding helpers.

Generation happens in two steps. :meth:`BundleScaffolder.plan` turns a
:class:`~bundlemaker.config.BundleConfig` into an ordered list of
:class:`FileOperation` values without touching the disk, and
:meth:`BundleScaffolder.create` checks that the target is free before applying
them one by one. A failure half way through leaves the files written so far in
place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from .config import BundleConfig, ScaffoldSettings
from .errors import TargetExistsError
from .manifest import Autoload, ComposerManifest
from .naming import NAMESPACE_SEPARATOR
from .template import render_template

__all__ = ["BundleScaffolder", "FileOperation", "OperationKind", "ScaffoldPlan"]


LOGGER = logging.getLogger(__name__)


BUNDLE_CLASS_TEMPLATE = """<?php

namespace {{ namespace }};

use Symfony\\Component\\HttpKernel\\Bundle\\Bundle;
use Symfony\\Component\\DependencyInjection\\ContainerBuilder;

/**
 * {{ class_name }} class.
 */
class {{ class_name }} extends Bundle
{
    /**
     * Builds the bundle by adding configurations to the container.
     *
     * @param ContainerBuilder $container The container builder.
     */
    public function build(ContainerBuilder $container): void
    {
        parent::build($container);
    }
}"""


class OperationKind(str, Enum):
    """Filesystem actions performed while scaffolding."""

    MKDIR = "mkdir"
    TOUCH = "touch"
    WRITE = "write"


@dataclass(frozen=True, slots=True)
class FileOperation:
    """A single filesystem change produced by :meth:`BundleScaffolder.plan`."""

    kind: OperationKind
    path: Path
    content: str = ""

    def apply(self) -> None:
        if self.kind is OperationKind.MKDIR:
            self.path.mkdir(parents=True, exist_ok=True)
        elif self.kind is OperationKind.TOUCH:
            self.path.touch()
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.content, encoding="utf-8")

    def describe(self) -> str:
        return f"{self.kind.value:<5} {self.path}"


@dataclass(frozen=True, slots=True)
class ScaffoldPlan:
    """Target directory and the ordered operations that populate it."""

    target: Path
    operations: tuple[FileOperation, ...]

    def __iter__(self) -> Iterator[FileOperation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)


def _join_target(base_path: str | Path, path_segment: str) -> Path:
    base = str(base_path).rstrip("/")
    return Path(f"{base}/{path_segment}")


@dataclass(slots=True)
class BundleScaffolder:
    """Create the directory tree, manifest and bundle class for a new bundle."""

    settings: ScaffoldSettings

    def __init__(self, settings: ScaffoldSettings | None = None) -> None:
        self.settings = settings or ScaffoldSettings()

    def target_for(self, config: BundleConfig, base_path: str | Path | None = None) -> Path:
        """Return the directory the bundle described by ``config`` goes into."""

        if base_path is None:
            base_path = self.settings.default_path
        return _join_target(base_path, config.path_segment)

    def build_manifest(self, config: BundleConfig) -> ComposerManifest:
        return ComposerManifest(
            name=config.package_id,
            description=f"Symfony Bundle for {config.qualified_name}",
            type=self.settings.package_type,
            require=self.settings.requirements(),
            autoload=Autoload(psr4={f"{config.namespace}{NAMESPACE_SEPARATOR}": "src/"}),
            extra={"symfony": {"bundle": config.bundle_class}},
        )

    def render_bundle_class(self, config: BundleConfig) -> str:
        return render_template(BUNDLE_CLASS_TEMPLATE, config.context())

    def plan(self, config: BundleConfig, base_path: str | Path | None = None) -> ScaffoldPlan:
        """Compute every operation needed to scaffold ``config``.

        Nothing is read from or written to disk, so the plan can be shown to
        the user before :meth:`create` applies it.
        """

        settings = self.settings
        target = self.target_for(config, base_path)

        operations: list[FileOperation] = []
        for directory in settings.directories:
            directory_path = target / directory
            operations.append(FileOperation(OperationKind.MKDIR, directory_path))
            operations.append(FileOperation(OperationKind.TOUCH, directory_path / settings.marker_name))

        operations.append(FileOperation(OperationKind.WRITE, target / ".gitignore", settings.gitignore_content))
        operations.append(
            FileOperation(
                OperationKind.WRITE,
                target / settings.manifest_name,
                self.build_manifest(config).to_json(),
            )
        )
        operations.append(
            FileOperation(
                OperationKind.WRITE,
                target / "src" / f"{config.class_name}.{settings.source_extension}",
                self.render_bundle_class(config),
            )
        )
        return ScaffoldPlan(target=target, operations=tuple(operations))

    def ensure_target_free(self, target: Path) -> None:
        if target.exists() or target.is_symlink():
            raise TargetExistsError(target)

    def create(self, config: BundleConfig, base_path: str | Path | None = None) -> Path:
        """Scaffold the bundle described by ``config`` and return its directory.

        Raises :class:`~bundlemaker.errors.TargetExistsError` when the target
        already exists. Filesystem errors raised while writing propagate
        unchanged and abort the remaining operations.
        """

        plan = self.plan(config, base_path)
        self.ensure_target_free(plan.target)

        LOGGER.info("Scaffolding bundle %s into %s", config.qualified_name, plan.target)
        for operation in plan:
            LOGGER.debug("%s", operation.describe())
            operation.apply()

        return plan.target
