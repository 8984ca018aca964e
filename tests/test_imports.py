import importlib
import pytest

@pytest.mark.parametrize("module", [
    "kspace",
    "kspace.base",
    "kspace.algorithms",
    "kspace.distances",
    "kspace.initialization",
    "kspace.utils",
    "kspace.utils.metrics",
    "kspace.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None
