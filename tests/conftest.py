"""Shared fixtures for the vfstree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vfstree.testing import small_disk, sample_disk


@pytest.fixture
def small_root():
    """/ -> bin/{ls 10, cp 20}, etc-note 5"""
    return small_disk()


@pytest.fixture
def disk():
    return sample_disk()
