"""Pytest configuration for phongtrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Canvas fields are allocated on the active runtime, so calling ti.init()
    again mid-session would invalidate every canvas created before it.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield
