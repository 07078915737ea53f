"""Shared fixtures for unit tests."""

import pytest

from fakes import make_candidate

from recipe_matcher.engine.estimates import Estimator


@pytest.fixture
def estimator():
    """Deterministic estimator."""
    return Estimator(seed=7)


@pytest.fixture
def chicken_rice():
    """Candidate from the chicken/rice scenario."""
    return make_candidate(
        "52772",
        [("Chicken Breast", "2"), ("White Rice", "1 cup"), ("Soy Sauce", "3 tbs")],
        title="Teriyaki Chicken Rice",
        category="Chicken",
        area="Japanese",
        instructions="Cook the rice.\r\n\r\n  Fry the chicken.  \r\nAdd the soy sauce.",
        tags_text="Meat,Casserole, Meat",
    )
