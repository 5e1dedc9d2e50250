"""Pytest configuration and shared fixtures for the adf2mdast test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_adf_document() -> dict[str, Any]:
    """Provide a small ADF document covering common node types.

    Returns
    -------
    dict
        Parsed ADF JSON with a heading, a formatted paragraph, a bullet list
        and an info panel.

    """
    return {
        "version": 1,
        "type": "doc",
        "content": [
            {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Release notes"}]},
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "Fixed in "},
                    {"type": "text", "text": "v2.1", "marks": [{"type": "code"}]},
                    {"type": "text", "text": " by "},
                    {"type": "mention", "attrs": {"id": "42", "text": "Grace"}},
                ],
            },
            {
                "type": "bulletList",
                "content": [
                    {
                        "type": "listItem",
                        "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Faster search"}]}],
                    }
                ],
            },
            {
                "type": "panel",
                "attrs": {"panelType": "info"},
                "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Upgrade soon."}]}],
            },
        ],
    }
