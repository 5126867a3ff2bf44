"""Shared test fixtures and utilities for phonecountry tests."""

import pytest

from phonecountry.countries.countryid import Id


@pytest.fixture
def sample_codes():
    """Fixture providing canonical codes and the Id each parses to.

    Covers ordinary ISO codes plus the numbering-plan pseudo-regions.
    """
    return {
        "FR": Id.FR,
        "US": Id.US,
        "GB": Id.GB,
        "DE": Id.DE,
        "AC": Id.AC,
        "TA": Id.TA,
        "XK": Id.XK,
    }


@pytest.fixture
def invalid_codes():
    """Fixture providing strings that are not canonical territory codes.

    Lowercase, three-letter, empty, unassigned, retired (YU, AN, CS),
    ISO codes without a numbering plan of their own (AQ, UM), and padded.
    """
    return [
        "us",
        "fr",
        "Fr",
        "USA",
        "FRA",
        "",
        "ZZ",
        "YU",
        "AN",
        "CS",
        "AQ",
        "UM",
        " FR",
        "FR ",
        "F",
    ]


@pytest.fixture
def sample_countries():
    """Fixture providing sample country hints for lenient resolution.

    Returns a dict of country names/codes and their canonical codes.
    """
    return {
        "USA": "US",
        "United States": "US",
        "United Kingdom": "GB",
        "England": "GB",
        "Australia": "AU",
        "Canada": "CA",
        "Germany": "DE",
        "France": "FR",
        "Kosovo": "XK",
    }
