"""Shared test fixtures."""

import pytest

from schoolcup.controller import TournamentController
from schoolcup.storage import StateStore


@pytest.fixture
def store(tmp_path) -> StateStore:
    """Sqlite-backed store in a per-test temp directory."""
    return StateStore(db_path=tmp_path / "cup.db")


@pytest.fixture
def controller(store) -> TournamentController:
    return TournamentController(store)
