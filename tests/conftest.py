"""
Shared pytest fixtures for the YCbCr color tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add repo root to path so tools/ is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from ycbcr import YCbCrColor


@pytest.fixture
def sample_colors():
    return [
        YCbCrColor(128, 64, 192),
        YCbCrColor(0, 0, 0),
        YCbCrColor(255, 255, 255),
        YCbCrColor(1, 2, 3),
        YCbCrColor(1, 2, 4),
    ]
