"""Composer manifest schema for generated bundles."""

from __future__ import annotations

import json
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Autoload(BaseModel):
    """Autoload rules mapping PHP namespace prefixes to directories."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    psr4: Dict[str, str] = Field(
        default_factory=dict,
        alias="psr-4",
        description="PSR-4 namespace prefix (with trailing backslash) to directory mapping.",
    )


class ComposerManifest(BaseModel):
    """Contents of the ``composer.json`` written next to the bundle sources."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Composer package name in vendor/package form.")
    description: str = Field(..., description="Human-readable summary of the package.")
    type: str = Field("symfony-bundle", description="Composer package type.")
    require: Dict[str, str] = Field(default_factory=dict, description="Runtime and framework version constraints.")
    autoload: Autoload = Field(default_factory=Autoload, description="Autoload configuration for the package sources.")
    extra: Dict[str, Dict[str, str]] = Field(default_factory=dict, description="Framework specific metadata.")

    def to_json(self) -> str:
        """Serialise the manifest the way Composer pretty-prints it."""

        payload = self.model_dump(mode="json", by_alias=True)
        return json.dumps(payload, indent=4)


__all__ = [
    "Autoload",
    "ComposerManifest",
]
