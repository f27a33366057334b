"""Shared pytest setup: Hypothesis profiles and the opt-in fuzz marker.

Profiles (select with HYPOTHESIS_PROFILE, CI=true picks "ci"):
    dev      500 examples
    ci       50 examples, derandomized
    verbose  100 examples with progress output

Tests marked ``fuzz`` only run with ``pytest -m fuzz`` or when their module
is named on the command line.
"""

import os

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose)

_PROFILE = os.environ.get("HYPOTHESIS_PROFILE") or (
    "ci" if os.environ.get("CI") == "true" else "dev"
)
settings.load_profile(_PROFILE)

_FUZZ_MODULE = "test_parser_fuzzing"


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests in regular runs."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
