"""Tests for the session layer."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from goaltrack.adapters.file_store import FileObjectiveStore
from goaltrack.config import DEFAULT_DATA_FILE, Config
from goaltrack.core.errors import IndexOutOfRange, InvalidImportFormat
from goaltrack.core.model import Objective, Task
from goaltrack.session import PlanSession, get_store


@pytest.fixture
def store(tmp_path):
    return FileObjectiveStore(tmp_path / "objectives.json")


@pytest.fixture
def session(store):
    return PlanSession.open(store)


class TestGetStore:
    def test_uses_configured_file(self, tmp_path):
        store = get_store(Config(data_file=str(tmp_path / "mine.json")))
        assert store.path == tmp_path / "mine.json"

    def test_expands_user_path(self):
        store = get_store(Config(data_file="~/plans/goals.json"))
        assert store.path == Path.home() / "plans" / "goals.json"

    def test_falls_back_to_default(self):
        assert get_store(Config()).path == DEFAULT_DATA_FILE


class TestPlanSession:
    def test_open_loads_from_store(self, store):
        store.save([Objective(title="Saved")])
        session = PlanSession.open(store)
        assert [o.title for o in session.objectives] == ["Saved"]

    def test_every_mutation_persists(self, session, store):
        session.add_objective("Learn Rust")
        session.add_task(0, "Read book", priority="high")
        session.add_task(0, "Build project")
        session.toggle_task(0, 1)
        session.reorder_task(0, 1, 0)
        session.edit_task(0, 1, "Read the book")
        session.edit_objective(0, "description", "Ownership and lifetimes")

        reloaded = store.load()
        assert reloaded == session.objectives
        assert [t.text for t in reloaded[0].tasks] == ["Build project", "Read the book"]
        assert reloaded[0].tasks[0].done is True
        assert reloaded[0].description == "Ownership and lifetimes"

    def test_noop_still_rewrites(self):
        store = MagicMock()
        store.load.return_value = []
        session = PlanSession.open(store)

        assert session.add_objective("   ") is False
        store.save.assert_called_once_with([])

    def test_error_does_not_save(self):
        store = MagicMock()
        store.load.return_value = [Objective(title="Only")]
        session = PlanSession.open(store)

        with pytest.raises(IndexOutOfRange):
            session.delete_objective(4)
        store.save.assert_not_called()
        assert len(session.objectives) == 1

    def test_cross_objective_move_is_noop(self, session):
        session.add_objective("One")
        session.add_objective("Two")
        session.add_task(0, "Task")
        assert session.move_task(0, 0, 1, 0) is False
        assert [t.text for t in session.objectives[0].tasks] == ["Task"]
        assert session.objectives[1].tasks == []

    def test_delete_cascades(self, session, store):
        session.add_objective("Doomed")
        session.add_task(0, "Gone too")
        session.delete_objective(0)
        assert store.load() == []

    def test_replace_model(self, session, store):
        session.add_objective("Old")
        session.replace_model([{"title": "New", "tasks": [{"text": "t"}]}])
        assert store.load() == [Objective(title="New", tasks=[Task(text="t")])]

    def test_replace_model_rejects_bad_payload(self, session, store):
        session.add_objective("Keep me")
        with pytest.raises(InvalidImportFormat):
            session.replace_model({"foo": 1})
        assert [o.title for o in store.load()] == ["Keep me"]
        assert [o.title for o in session.objectives] == ["Keep me"]
