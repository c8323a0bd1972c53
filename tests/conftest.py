"""Pytest configuration and shared fixtures for layout tests."""

from __future__ import annotations

import pytest

from woodcut.domain import BoardSize, EdgeMargins, WoodPiece


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST API end to end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def standard_board() -> BoardSize:
    """Create the default 244x122 cm board."""
    return BoardSize()


@pytest.fixture
def single_piece() -> WoodPiece:
    """Create a single 100x50 piece without trim."""
    return WoodPiece(id="shelf", length=100.0, width=50.0)


@pytest.fixture
def trimmed_pieces() -> list[WoodPiece]:
    """Create ten 50x40 units with a 1 cm top margin."""
    return [
        WoodPiece(
            id="slat",
            length=50.0,
            width=40.0,
            quantity=10,
            category="Slat",
            edge_margins=EdgeMargins(top=1.0),
        )
    ]


@pytest.fixture
def mixed_pieces() -> list[WoodPiece]:
    """Create a realistic mixed piece list for a small bookcase."""
    return [
        WoodPiece(id="side", length=180.0, width=30.0, quantity=2, category="Side"),
        WoodPiece(
            id="shelf",
            length=80.0,
            width=28.0,
            quantity=5,
            category="Shelf",
            edge_margins=EdgeMargins.on_edges(0.5, ["top", "bottom"]),
        ),
        WoodPiece(id="back", length=120.0, width=80.0, category="Back"),
        WoodPiece(
            id="kick",
            length=80.0,
            width=8.0,
            quantity=2,
            category="Kick",
            edge_margins=EdgeMargins(left=1.0, right=1.0),
        ),
    ]
