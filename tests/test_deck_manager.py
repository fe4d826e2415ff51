from unittest.mock import MagicMock

import pytest

from flashcli.deck_manager import DeckManager
from flashcli.exceptions import (
    DeckNotFoundError,
    InvalidArgumentError,
    NotFoundError,
)
from flashcli.models import Deck
from flashcli.storage import DeckStorage


class TestCreateDeck:
    def test_create_deck_registers_without_selecting(self, manager):
        deck = manager.create_deck("Math")

        assert isinstance(deck, Deck)
        assert manager.decks == {"Math": deck}
        assert manager.current_deck is None
        assert manager.current_deck_name is None

    def test_create_deck_trims_name(self, manager):
        deck = manager.create_deck("  Math  ")
        assert deck.name == "Math"
        assert "Math" in manager.decks

    def test_create_deck_with_invalid_name_raises(self, manager):
        with pytest.raises(InvalidArgumentError):
            manager.create_deck("Invalid/Name")
        with pytest.raises(InvalidArgumentError):
            manager.create_deck("Invalid\\Name")
        assert manager.decks == {}

    def test_create_deck_with_existing_name_raises(self, manager):
        manager.create_deck("Math")
        with pytest.raises(InvalidArgumentError, match="already exists"):
            manager.create_deck("Math")

    def test_create_deck_over_existing_file_raises(self, manager, decks_dir):
        decks_dir.mkdir(parents=True)
        (decks_dir / "Cafe.txt").write_bytes(b"Q: caf\xe9\nA: coffee\n\n")

        with pytest.raises(InvalidArgumentError, match="deck file for 'Cafe'"):
            manager.create_deck("Cafe")
        assert manager.decks == {}

    def test_create_deck_does_not_write_a_file(self, manager, decks_dir):
        manager.create_deck("Math")
        assert not decks_dir.exists()


class TestSelection:
    def test_select_deck_sets_current(self, manager):
        deck = manager.create_deck("Math")
        assert manager.select_deck("Math") is deck
        assert manager.current_deck is deck
        assert manager.require_current_deck() is deck

    def test_select_unknown_deck_raises_not_found(self, manager):
        manager.create_deck("Math")
        manager.select_deck("Math")
        with pytest.raises(DeckNotFoundError, match="Deck 'Physics' does not exist."):
            manager.select_deck("Physics")
        assert manager.current_deck_name == "Math"

    def test_require_current_deck_without_selection(self, manager):
        with pytest.raises(NotFoundError, match="No deck is currently selected"):
            manager.require_current_deck()

    def test_current_deck_can_be_reassigned(self, manager):
        manager.create_deck("A")
        b = manager.create_deck("B")
        manager.select_deck("A")
        manager.select_deck("B")
        assert manager.current_deck is b

    def test_get_deck_unknown_raises(self, manager):
        with pytest.raises(DeckNotFoundError):
            manager.get_deck("Nope")


class TestDeleteDeck:
    def test_delete_current_deck_unsets_selection(self, manager, test_deck, decks_dir):
        manager.save_deck("TestDeck")
        assert (decks_dir / "TestDeck.txt").exists()

        removed = manager.delete_deck("TestDeck")

        assert removed is test_deck
        assert "TestDeck" not in manager.decks
        assert manager.current_deck is None
        assert manager.current_deck_name is None
        assert not (decks_dir / "TestDeck.txt").exists()

    def test_delete_other_deck_keeps_selection(self, manager, test_deck):
        manager.create_deck("Other")
        manager.delete_deck("Other")
        assert manager.current_deck is test_deck

    def test_delete_unsaved_deck(self, manager):
        manager.create_deck("Unsaved")
        manager.delete_deck("Unsaved")
        assert manager.decks == {}

    def test_delete_unknown_deck_raises(self, manager):
        with pytest.raises(DeckNotFoundError):
            manager.delete_deck("Ghost")


class TestRenameDeck:
    def test_rename_rekeys_registry_and_file(self, manager, test_deck, decks_dir):
        test_deck.create_flashcard("What is Java?", "A language.")
        manager.save_deck("TestDeck")

        renamed = manager.rename_deck("TestDeck", "RenamedDeck")

        assert renamed is test_deck
        assert renamed.name == "RenamedDeck"
        assert list(manager.decks) == ["RenamedDeck"]
        assert manager.current_deck is test_deck
        assert manager.current_deck_name == "RenamedDeck"
        assert not (decks_dir / "TestDeck.txt").exists()
        assert (decks_dir / "RenamedDeck.txt").exists()

        loaded = manager.storage.load_all_decks()
        assert list(loaded) == ["RenamedDeck"]

    def test_rename_preserves_registry_order(self, manager):
        manager.create_deck("A")
        manager.create_deck("B")
        manager.create_deck("C")
        manager.rename_deck("B", "Z")
        assert list(manager.decks) == ["A", "Z", "C"]

    def test_rename_unsaved_deck_renames_in_memory_only(self, manager, decks_dir):
        manager.create_deck("Draft")
        manager.rename_deck("Draft", "Final")
        assert list(manager.decks) == ["Final"]
        assert not decks_dir.exists()

    def test_rename_non_current_deck_keeps_selection(self, manager, test_deck):
        manager.create_deck("Other")
        manager.rename_deck("Other", "Renamed")
        assert manager.current_deck_name == "TestDeck"

    @pytest.mark.parametrize("new_name", ["bad/name", "bad\\name", "   "])
    def test_rename_to_invalid_name_raises(self, manager, test_deck, new_name):
        with pytest.raises(InvalidArgumentError):
            manager.rename_deck("TestDeck", new_name)
        assert list(manager.decks) == ["TestDeck"]

    def test_rename_to_taken_name_raises(self, manager, test_deck):
        manager.create_deck("Other")
        with pytest.raises(InvalidArgumentError, match="already exists"):
            manager.rename_deck("TestDeck", "Other")

    def test_rename_onto_skipped_file_keeps_it(self, manager, decks_dir):
        a_deck = Deck(name="A")
        a_deck.create_flashcard("What is A?", "The first letter.")
        manager.storage.save_deck("A", a_deck)
        # not UTF-8, so load_decks skips it
        original = b"Q: caf\xe9\nA: coffee\nLearned: true\n\n"
        (decks_dir / "B.txt").write_bytes(original)
        manager.load_decks()
        assert list(manager.decks) == ["A"]

        with pytest.raises(InvalidArgumentError, match="already exists"):
            manager.rename_deck("A", "B")

        assert list(manager.decks) == ["A"]
        assert (decks_dir / "A.txt").is_file()
        assert (decks_dir / "B.txt").read_bytes() == original

    def test_rename_unknown_deck_raises(self, manager):
        with pytest.raises(DeckNotFoundError):
            manager.rename_deck("Ghost", "Other")

    def test_rename_file_failure_leaves_registry_untouched(self, test_deck):
        storage = MagicMock(spec=DeckStorage)
        storage.deck_file_exists.side_effect = lambda name: name == "TestDeck"
        storage.rename_deck_file.side_effect = OSError("disk error")
        manager = DeckManager(storage=storage)
        manager.install_decks({"TestDeck": test_deck})
        manager.select_deck("TestDeck")

        with pytest.raises(OSError, match="disk error"):
            manager.rename_deck("TestDeck", "RenamedDeck")

        assert list(manager.decks) == ["TestDeck"]
        assert test_deck.name == "TestDeck"
        assert manager.current_deck_name == "TestDeck"


class TestLifecycle:
    def test_load_decks_installs_storage_contents(self, manager, test_deck):
        test_deck.create_flashcard("Q", "A")
        manager.save_deck("TestDeck")
        manager.clear()

        loaded = manager.load_decks()

        assert list(loaded) == ["TestDeck"]
        assert manager.current_deck is None
        assert manager.get_deck("TestDeck").get_flashcards()[0].question == "Q"

    def test_load_decks_with_missing_directory(self, manager):
        assert manager.load_decks() == {}

    def test_clear_empties_registry_and_selection(self, manager, test_deck):
        manager.clear()
        assert manager.decks == {}
        assert manager.current_deck is None

    def test_managers_do_not_share_state(self, storage):
        first = DeckManager(storage=storage)
        second = DeckManager(storage=storage)
        first.create_deck("Only In First")
        assert second.decks == {}

    def test_default_storage(self):
        manager = DeckManager()
        assert isinstance(manager.storage, DeckStorage)

    def test_save_current_deck_requires_selection(self, manager):
        manager.create_deck("Math")
        with pytest.raises(DeckNotFoundError):
            manager.save_current_deck()

    def test_save_current_deck_writes_file(self, manager, test_deck, decks_dir):
        test_deck.create_flashcard("2+2?", "4")
        manager.save_current_deck()
        assert (decks_dir / "TestDeck.txt").read_text(encoding="utf-8") == (
            "Q: 2+2?\nA: 4\nLearned: false\n\n"
        )
