import pytest
from pathlib import Path

from flashcli.deck_manager import DeckManager
from flashcli.models import Deck
from flashcli.storage import DeckStorage


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir.

    The default decks directory is relative (`data/decks`), so this keeps
    every test's deck files inside its own temporary directory.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture
def decks_dir(tmp_path: Path) -> Path:
    """
    Provide a decks directory path inside the test's temporary directory.

    The directory itself is not created, so tests can exercise the
    missing-directory case.
    """
    return tmp_path / "data" / "decks"


@pytest.fixture
def storage(decks_dir: Path) -> DeckStorage:
    return DeckStorage(decks_dir)


@pytest.fixture
def manager(storage: DeckStorage):
    """
    Provide a DeckManager with an empty registry, cleared on teardown.
    """
    deck_manager = DeckManager(storage=storage)
    try:
        yield deck_manager
    finally:
        deck_manager.clear()


@pytest.fixture
def test_deck(manager: DeckManager) -> Deck:
    """Register a deck named "TestDeck" and select it as current."""
    deck = manager.create_deck("TestDeck")
    manager.select_deck("TestDeck")
    return deck
