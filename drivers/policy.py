"""
Purpose: Central configuration for driver search.
What it does:

Stores the tunable cap on how many drivers a search returns:

SEARCH_MAX_RESULTS = 5

Values can be overridden from the environment (or a .env file).

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Read overrides from a .env file once, at import
load_dotenv()

MAX_RESULTS_ENV = "SEARCH_MAX_RESULTS"


@dataclass(frozen=True)
class SearchPolicy:
    """
    Central configuration for all search strategies.
    """

    # How many drivers a single search hands back to the dispatcher.
    max_results: int = 5

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.max_results < 1:
            raise ValueError("max_results must be >= 1")


def default_search_policy() -> SearchPolicy:
    """
    Convenience factory for the default policy.
    """
    p = SearchPolicy()
    p.validate()
    return p


def search_policy_from_env() -> SearchPolicy:
    """
    Builds the policy from SEARCH_MAX_RESULTS, falling back to the default
    cap when the variable is not set.
    """
    raw_value = os.getenv(MAX_RESULTS_ENV)
    if raw_value is None or raw_value.strip() == "":
        return default_search_policy()

    try:
        max_results = int(raw_value)
    except ValueError:
        raise ValueError(f"{MAX_RESULTS_ENV} must be an integer, got {raw_value!r}") from None

    p = SearchPolicy(max_results=max_results)
    p.validate()
    return p
