"""
Kernel test configuration.

Presidents fixtures come from the demo dataset so the kernel is exercised on
all three record shapes.
"""

import pytest

from datatable.demo.presidents import dataset


@pytest.fixture(params=["struct", "tuple", "list"])
def presidents(request):
    """(view, records) for each record shape."""
    return dataset(request.param)


@pytest.fixture
def struct_presidents():
    return dataset("struct")
