"""Domain enumerations for tasks.

Status and priority are closed sets. They are persisted by symbolic name
through the explicit mapping tables below (never by ordinal), so reordering
members does not change stored data. The *_ORDER tables define sort order.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


class TaskPriority(str, Enum):
    """Task priority."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Stored name <-> member. Edit these, not the member values, to rename storage.
TASK_STATUS_TO_NAME: dict[TaskStatus, str] = {
    TaskStatus.TODO: "Todo",
    TaskStatus.IN_PROGRESS: "InProgress",
    TaskStatus.DONE: "Done",
}
TASK_STATUS_FROM_NAME: dict[str, TaskStatus] = {
    name: member for member, name in TASK_STATUS_TO_NAME.items()
}

TASK_PRIORITY_TO_NAME: dict[TaskPriority, str] = {
    TaskPriority.LOW: "Low",
    TaskPriority.MEDIUM: "Medium",
    TaskPriority.HIGH: "High",
}
TASK_PRIORITY_FROM_NAME: dict[str, TaskPriority] = {
    name: member for member, name in TASK_PRIORITY_TO_NAME.items()
}

TASK_STATUS_ORDER: dict[TaskStatus, int] = {
    TaskStatus.TODO: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.DONE: 2,
}
TASK_PRIORITY_ORDER: dict[TaskPriority, int] = {
    TaskPriority.LOW: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.HIGH: 2,
}
