"""Pytest configuration for raykernel tests.

This module provides shared fixtures for all test modules. The math kernel is
pure Python; only the canvas and image export tests need Taichi, so they opt
in to the session fixture with pytest.mark.usefixtures.
"""

import pytest


@pytest.fixture(scope="session")
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    import taichi as ti

    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def allocator():
    """A fresh id allocator, so each test sees ids starting at 1."""
    from raykernel.geometry.sphere import IdAllocator

    return IdAllocator()


@pytest.fixture
def sphere(allocator):
    """A default sphere with the identity transform."""
    from raykernel.geometry.sphere import Sphere

    return Sphere(allocator)
