# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for varint codec tests."""

import random

import pytest

from varint_codec.widths import IntType

# Fixed seed so randomized sweeps are reproducible
SWEEP_SEED = 0x5EED


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--sweep-count",
        action="store",
        type=int,
        default=500,
        help="Number of random values per type in round-trip sweeps",
    )


@pytest.fixture(scope="session")
def sweep_count(request):
    """Number of random samples per randomized sweep."""
    return request.config.getoption("--sweep-count")


@pytest.fixture
def rng():
    """Seeded random generator, fresh for every test."""
    return random.Random(SWEEP_SEED)


@pytest.fixture(params=list(IntType), ids=str)
def int_type(request):
    """Each supported integer type in turn."""
    return request.param


@pytest.fixture
def boundary_values(int_type):
    """Range edges and small values of the current type."""
    lo, hi = int_type.min_value, int_type.max_value
    candidates = {lo, lo + 1, hi - 1, hi, 0, 1, 127, 128, 16383, 16384}
    if int_type.signed:
        candidates |= {-1, -64, -65, -128, -129, -300}
    return sorted(v for v in candidates if lo <= v <= hi)
