"""Pytest configuration and shared fixtures for abbrtree test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import el, implicit, root

# Hypothesis profiles, selected with HYPOTHESIS_PROFILE (default "dev")
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def list_tree():
    """Provide ``ul>li*`` with an unresolved repeat on the item.

    Returns
    -------
    AbbreviationNode
        Tree root.

    """
    return root(el("ul", implicit("li")))


@pytest.fixture
def nav_tree():
    """Provide ``nav>ul>li*>a`` where the link is the deepest node.

    Returns
    -------
    AbbreviationNode
        Tree root.

    """
    return root(el("nav", el("ul", implicit("li", el("a", attrs={"href": ""})))))
