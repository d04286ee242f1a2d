"""Pytest configuration and shared fixtures for the clausemark test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from clausemark.ast import (
    Clause,
    ComputedVariable,
    ConditionalVariable,
    Document,
    Item,
    ListVariable,
    Paragraph,
    Text,
    Variable,
)
from clausemark.unwrap import ConversionContext

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
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def context() -> ConversionContext:
    """Provide a conversion context with the default collaborators.

    Returns
    -------
    ConversionContext
        Context built by ``ConversionContext.default()``.

    """
    return ConversionContext.default()


@pytest.fixture
def contract_document() -> Document:
    """Provide an annotated document exercising every semantic kind.

    Returns
    -------
    Document
        Document with a clause holding variables, a computed variable,
        a conditional variable and a bound list.

    """
    return Document(
        children=[
            Paragraph(children=[Text(text="Master agreement")]),
            Clause(
                src="ap://payment@0.1.0",
                clauseid="payment-1",
                children=[
                    Paragraph(
                        children=[
                            Text(text="The buyer "),
                            Variable(id="buyer", value="Acme Corp"),
                            Text(text=" pays "),
                            ComputedVariable(value="100 * 1.2"),
                            Text(text=" "),
                            ConditionalVariable(id="late", value="true", when_true="with penalty", when_false=""),
                        ]
                    ),
                    ListVariable(
                        type="bullet",
                        children=[
                            Item(children=[Paragraph(children=[Text(text="Widgets")])]),
                            Item(children=[Paragraph(children=[Text(text="Gadgets")])]),
                        ],
                    ),
                ],
            ),
        ]
    )
