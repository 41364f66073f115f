"""Enums are stored by symbolic name through explicit mapping tables."""

import pytest

from taskmanager.domain.enums import (
    TASK_PRIORITY_FROM_NAME,
    TASK_PRIORITY_ORDER,
    TASK_PRIORITY_TO_NAME,
    TASK_STATUS_FROM_NAME,
    TASK_STATUS_ORDER,
    TASK_STATUS_TO_NAME,
    TaskPriority,
    TaskStatus,
)
from taskmanager.infrastructure.persistence.models.types import NamedEnumType


def test_mapping_tables_cover_every_member() -> None:
    assert set(TASK_STATUS_TO_NAME) == set(TaskStatus)
    assert set(TASK_PRIORITY_TO_NAME) == set(TaskPriority)
    assert set(TASK_STATUS_ORDER) == set(TaskStatus)
    assert set(TASK_PRIORITY_ORDER) == set(TaskPriority)


def test_declared_order() -> None:
    assert sorted(TaskStatus, key=TASK_STATUS_ORDER.__getitem__) == [
        TaskStatus.TODO,
        TaskStatus.IN_PROGRESS,
        TaskStatus.DONE,
    ]
    assert sorted(TaskPriority, key=TASK_PRIORITY_ORDER.__getitem__) == [
        TaskPriority.LOW,
        TaskPriority.MEDIUM,
        TaskPriority.HIGH,
    ]


def test_column_type_binds_names_and_loads_members() -> None:
    col_type = NamedEnumType(TASK_STATUS_TO_NAME, TASK_STATUS_FROM_NAME)
    assert col_type.process_bind_param(TaskStatus.IN_PROGRESS, None) == "InProgress"
    assert col_type.process_result_value("Done", None) is TaskStatus.DONE
    assert col_type.process_bind_param(None, None) is None
    assert col_type.process_result_value(None, None) is None


def test_column_type_rejects_unknown_names() -> None:
    col_type = NamedEnumType(TASK_PRIORITY_TO_NAME, TASK_PRIORITY_FROM_NAME)
    with pytest.raises(ValueError):
        col_type.process_result_value("Urgent", None)
    with pytest.raises(ValueError):
        col_type.process_bind_param("Urgent", None)
