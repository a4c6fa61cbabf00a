from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bundlemaker.config import BundleConfig  # noqa: E402


@pytest.fixture()
def demo_config() -> BundleConfig:
    return BundleConfig.from_name("Napse\\DemoBundle")
