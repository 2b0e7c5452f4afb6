"""
Tests for the Task Pydantic model.
"""

import pytest
from datetime import datetime
from uuid import uuid4

from pydantic import ValidationError

from taskpad.models import Task


def _task(**overrides):
    fields = dict(
        id=uuid4(),
        title="Buy milk",
        description="2%",
        created_at=datetime(2025, 1, 14, 10, 0, 0),
    )
    fields.update(overrides)
    return Task(**fields)


class TestTaskModel:
    """Tests for Task validation."""

    def test_valid_task(self):
        task = _task()
        assert task.title == "Buy milk"
        assert task.has_description

    def test_description_optional(self):
        task = _task(description=None)
        assert task.description is None
        assert not task.has_description

    def test_empty_description_has_no_description(self):
        assert not _task(description="").has_description

    def test_id_parsed_from_string(self):
        task_id = uuid4()
        assert _task(id=str(task_id)).id == task_id

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            _task(title="")

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            _task(title="   ")

    def test_long_title_and_description_accepted(self):
        task = _task(title="x" * 2000, description="y" * 20000)
        assert len(task.title) == 2000
        assert len(task.description) == 20000

    def test_task_is_frozen(self):
        task = _task()
        with pytest.raises(ValidationError):
            task.title = "Changed"

    def test_equal_fields_compare_equal(self):
        task = _task()
        assert Task(**task.model_dump()) == task
