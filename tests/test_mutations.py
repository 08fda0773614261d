"""Tests for model mutations."""

import copy
from datetime import date

import pytest

from goaltrack.core.errors import IndexOutOfRange, InvalidImportFormat
from goaltrack.core.model import Objective, Priority, Task
from goaltrack.core.mutations import (
    add_objective,
    add_task,
    delete_objective,
    delete_task,
    edit_objective,
    edit_task,
    move_task,
    reorder_task,
    replace_model,
    toggle_task,
)
from goaltrack.core.query import overall_stats


@pytest.fixture
def model():
    return [
        Objective(
            title="Learn Rust",
            description="Systems",
            tasks=[Task(text="A"), Task(text="B"), Task(text="C")],
        ),
        Objective(title="Run", tasks=[Task(text="Stretch")]),
    ]


def texts(objective):
    return [t.text for t in objective.tasks]


class TestAddObjective:
    def test_appends_trimmed(self):
        model = []
        assert add_objective(model, "  Learn Rust ", "  notes  ") is True
        assert model == [Objective(title="Learn Rust", description="notes")]

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_noop(self, model, title):
        before = copy.deepcopy(model)
        assert add_objective(model, title, "x") is False
        assert model == before


class TestDeleteObjective:
    def test_removes_with_tasks(self, model):
        delete_objective(model, 0)
        assert [o.title for o in model] == ["Run"]

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_bad_index(self, model, index):
        with pytest.raises(IndexOutOfRange):
            delete_objective(model, index)
        assert len(model) == 2


class TestTasks:
    def test_add_task(self, model):
        assert add_task(model, 1, " Hill repeats ", date(2026, 3, 15), "high") is True
        added = model[1].tasks[-1]
        assert added == Task(
            text="Hill repeats", done=False, due_date=date(2026, 3, 15), priority=Priority.HIGH
        )

    def test_add_task_blank_is_noop(self, model):
        assert add_task(model, 1, "  ") is False
        assert texts(model[1]) == ["Stretch"]

    def test_add_task_bad_objective(self, model):
        with pytest.raises(IndexOutOfRange):
            add_task(model, 5, "x")

    def test_toggle_flips_both_ways(self, model):
        toggle_task(model, 0, 1)
        assert model[0].tasks[1].done is True
        toggle_task(model, 0, 1)
        assert model[0].tasks[1].done is False

    @pytest.mark.parametrize("obj_index,task_index", [(0, 3), (2, 0), (1, -1)])
    def test_toggle_bad_index(self, model, obj_index, task_index):
        with pytest.raises(IndexOutOfRange):
            toggle_task(model, obj_index, task_index)

    def test_delete_task(self, model):
        delete_task(model, 0, 0)
        assert texts(model[0]) == ["B", "C"]

    def test_delete_task_bad_index(self, model):
        with pytest.raises(IndexOutOfRange):
            delete_task(model, 1, 1)

    def test_edit_task(self, model):
        assert edit_task(model, 0, 2, "  Cee ") is True
        assert texts(model[0]) == ["A", "B", "Cee"]

    def test_edit_task_blank_keeps_text(self, model):
        assert edit_task(model, 0, 2, "") is False
        assert texts(model[0]) == ["A", "B", "C"]


class TestEditObjective:
    def test_title(self, model):
        edit_objective(model, 0, "title", "  Learn Go ")
        assert model[0].title == "Learn Go"

    def test_blank_title_keeps_prior(self, model):
        assert edit_objective(model, 0, "title", "   ") is False
        assert model[0].title == "Learn Rust"

    def test_blank_description_clears(self, model):
        assert edit_objective(model, 0, "description", "  ") is True
        assert model[0].description == ""

    def test_unknown_field(self, model):
        with pytest.raises(ValueError):
            edit_objective(model, 0, "tasks", "x")

    def test_bad_index(self, model):
        with pytest.raises(IndexOutOfRange):
            edit_objective(model, 3, "title", "x")


class TestReorderTask:
    def test_first_to_last(self, model):
        reorder_task(model, 0, 0, 2)
        assert texts(model[0]) == ["B", "C", "A"]

    def test_last_to_first(self, model):
        reorder_task(model, 0, 2, 0)
        assert texts(model[0]) == ["C", "A", "B"]

    def test_middle_down(self, model):
        reorder_task(model, 0, 1, 2)
        assert texts(model[0]) == ["A", "C", "B"]

    def test_same_position_is_noop(self, model):
        assert reorder_task(model, 0, 1, 1) is False
        assert texts(model[0]) == ["A", "B", "C"]

    @pytest.mark.parametrize("from_index,to_index", [(3, 0), (0, 3), (-1, 0)])
    def test_bad_index(self, model, from_index, to_index):
        with pytest.raises(IndexOutOfRange):
            reorder_task(model, 0, from_index, to_index)
        assert texts(model[0]) == ["A", "B", "C"]


class TestMoveTask:
    def test_within_objective(self, model):
        assert move_task(model, 0, 0, 0, 2) is True
        assert texts(model[0]) == ["B", "C", "A"]

    def test_drop_on_own_position_is_noop(self, model):
        assert move_task(model, 0, 1, 0, 1) is False
        assert texts(model[0]) == ["A", "B", "C"]

    def test_across_objectives_is_noop(self, model):
        before = copy.deepcopy(model)
        assert move_task(model, 0, 0, 1, 0) is False
        assert model == before


class TestReplaceModel:
    def test_replaces_in_place(self, model):
        ref = model
        replace_model(model, [{"title": "Imported", "tasks": [{"text": "t", "done": True}]}])
        assert ref is model
        assert model == [Objective(title="Imported", tasks=[Task(text="t", done=True)])]

    @pytest.mark.parametrize("payload", [{"foo": 1}, "[]", None, [{"title": ""}], [1, 2]])
    def test_invalid_payload_leaves_model(self, model, payload):
        before = copy.deepcopy(model)
        with pytest.raises(InvalidImportFormat):
            replace_model(model, payload)
        assert model == before


def test_learn_rust_scenario():
    model = []
    add_objective(model, "Learn Rust", "")
    add_task(model, 0, "Read book", None, "high")
    add_task(model, 0, "Build project", None, "low")
    toggle_task(model, 0, 1)

    stats = overall_stats(model)
    assert stats.total_objectives == 1
    assert stats.total_tasks == 2
    assert stats.completed_tasks == 1
    assert stats.percent == 50
