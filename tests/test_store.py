"""
tests/test_store.py
────────────────────
Tests for the SQLite preferences store (in-memory database).
"""
import pytest

from src.data import store
from src.i18n.preferences import LanguageStore


@pytest.fixture(autouse=True)
def fresh_db():
    store.close_db()
    store.initialize_db()
    yield
    store.close_db()


class TestPreferences:
    def test_unset_key(self):
        assert store.get_item("lang") is None

    def test_set_and_get(self):
        store.set_item("lang", "en")
        assert store.get_item("lang") == "en"

    def test_overwrite(self):
        store.set_item("lang", "en")
        store.set_item("lang", "zh")
        assert store.get_item("lang") == "zh"

    def test_remove(self):
        store.set_item("lang", "en")
        store.remove_item("lang")
        assert store.get_item("lang") is None

    def test_initialize_is_idempotent(self):
        store.set_item("lang", "en")
        store.initialize_db()
        assert store.get_item("lang") == "en"


class TestPreferenceStorage:
    def test_language_persists_across_sessions(self):
        LanguageStore(store.PreferenceStorage(), locale=lambda: "zh-CN").set_lang("en")
        # New session: no in-memory cache, reads the persisted choice
        assert LanguageStore(store.PreferenceStorage(), locale=lambda: "zh-CN").get_lang() == "en"


class TestVisitorScope:
    def test_visitors_do_not_share_preferences(self):
        store.set_item("lang", "en", visitor_id="alice")
        assert store.get_item("lang", visitor_id="bob") is None
        assert store.get_item("lang") is None

    def test_switch_only_affects_that_visitor(self):
        LanguageStore(store.PreferenceStorage("alice"), locale=lambda: "zh-CN").set_lang("en")
        bob = LanguageStore(store.PreferenceStorage("bob"), locale=lambda: "zh-CN")
        assert bob.get_lang() == "zh"

    def test_new_visitor_ids_are_unique(self):
        assert store.new_visitor_id() != store.new_visitor_id()
