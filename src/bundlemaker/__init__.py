"""Utilities for scaffolding Symfony bundles.

The package derives Composer package names, directory names and PHP class
names from a namespaced bundle name such as ``Napse\\DemoBundle``, and ships a
scaffolder that writes the bundle skeleton either programmatically or through
the ``bundlemaker make:bundle`` command.
"""

from __future__ import annotations

from .config import BundleConfig, ScaffoldSettings
from .errors import BundleMakerError, InvalidBundleNameError, TargetExistsError, TemplateRenderingError
from .manifest import ComposerManifest
from .naming import generate_package_id, generate_path_segment, parse_name_parts, pascal_case_to_kebab_case
from .scaffold import BundleScaffolder, FileOperation, ScaffoldPlan
from .template import render_template

__all__ = [
    "BundleConfig",
    "BundleMakerError",
    "BundleScaffolder",
    "ComposerManifest",
    "FileOperation",
    "InvalidBundleNameError",
    "ScaffoldPlan",
    "ScaffoldSettings",
    "TargetExistsError",
    "TemplateRenderingError",
    "generate_package_id",
    "generate_path_segment",
    "parse_name_parts",
    "pascal_case_to_kebab_case",
    "render_template",
]

__version__ = "0.1.0"
