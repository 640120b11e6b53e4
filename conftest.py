"""Adds the sweep-selection options to pytest."""
import pytest

_SWEEPS = {
    "slow": ("--skip-slow", True, "Slow sweep: needs no --skip-slow option"),
    "extreme": ("--run-extreme", False, "Extreme sweep: needs --run-extreme option"),
}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip exhaustive i8 sweeps")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run the i16 sweeps, extremely slow")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    for marker, (option, skip_when_set, reason) in _SWEEPS.items():
        if config.getoption(option) == skip_when_set:
            skipdict[marker] = pytest.mark.skip(reason=reason)
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)
