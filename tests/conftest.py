"""Pytest configuration for the numparse test suite.

Hypothesis profiles:
- dev: 500 examples per property. The decimal-literal and radix
  roundtrips only reach rare shapes (fraction-only literals, radix-36 edge
  values, i128 boundaries) with this many draws
- ci: 50 examples, derandomized so failures reproduce across runs
- verbose: 100 examples with per-example output, for chasing a single
  failing literal

Profile selection:
- HYPOTHESIS_PROFILE=dev|ci|verbose -> that profile
- CI=true -> "ci"
- Otherwise -> "dev"

Fuzz tests:
tests/fuzz/ feeds arbitrary text to every engine and kind. Those tests are
marked @pytest.mark.fuzz and skipped in a plain `pytest` run.
Run them via: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

    An explicit HYPOTHESIS_PROFILE wins; CI=true selects the short,
    reproducible "ci" profile; anything else is a local "dev" run.
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: arbitrary-input engine properties (run with: pytest -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless they were asked for.

    They run when the marker expression mentions "fuzz", or when
    tests/fuzz/test_parsing_property.py is named on the command line.
    Everything else in a plain run stays fast enough for each commit.
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    if any("test_parsing_property" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
