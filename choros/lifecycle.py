"""Robot run lifecycle and dependency-ordered task scheduling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import IntEnum


class TaskResult(IntEnum):
    """Outcome of a single task execution."""

    SUCCESS = 1
    RETRYABLE_FAILURE = 0
    FATAL_FAILURE = -1


class Task(ABC):
    """A unit of robot behaviour scheduled by a :class:`Lifecycle`."""

    @abstractmethod
    def execute(self, lifecycle: Lifecycle) -> TaskResult:
        """Run the task and report how it went."""


class Lifecycle(ABC):
    """Orchestrates the phases of a robot run.

    The phases are, in order: declare, calibrate, wait, task execution,
    clean and reset. Tasks form a dependency graph and are run in
    breadth-first topological order.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._dependencies: dict[str, list[str]] = {}
        self._in_degree: dict[str, int] = {}
        self._completed: set[str] = set()

    def add_task(self, task_id: str, task: Task) -> None:
        """Register ``task`` under ``task_id``, replacing any earlier one."""
        self._tasks[task_id] = task

    def add_dependency(self, source: str, target: str) -> None:
        """Make ``target`` wait until ``source`` has completed."""
        self._dependencies.setdefault(source, []).append(target)

    def run(self) -> None:
        """Run every lifecycle phase in order."""
        self.declare()
        self.calibrate()
        self.wait()
        self.execute_tasks()
        self.clean()
        self.reset()

    def is_task_completed(self, task_id: str) -> bool:
        """Return whether the task has finished (successfully or fatally)."""
        return task_id in self._completed

    @abstractmethod
    def declare(self) -> None:
        """Declare goals, configuration or metadata."""

    @abstractmethod
    def calibrate(self) -> None:
        """Calibrate sensors and actuators."""

    @abstractmethod
    def wait(self) -> None:
        """Wait for the start condition."""

    @abstractmethod
    def clean(self) -> None:
        """Perform post-run cleanup."""

    @abstractmethod
    def reset(self) -> None:
        """Reset state for a rerun or shutdown."""

    def _build_in_degree(self) -> None:
        self._in_degree = {task_id: 0 for task_id in self._tasks}
        for targets in self._dependencies.values():
            for target in targets:
                self._in_degree[target] = self._in_degree.get(target, 0) + 1

    def _ready_tasks(self) -> list[str]:
        return [
            task_id
            for task_id, degree in self._in_degree.items()
            if degree == 0 and task_id not in self._completed
        ]

    def execute_tasks(self) -> None:
        """Execute tasks once all their prerequisites have completed.

        A retryable failure puts the task back at the end of the queue;
        success or a fatal failure marks it completed and releases its
        dependents.
        """
        self._build_in_degree()
        queue = deque(self._ready_tasks())

        while queue:
            current = queue.popleft()
            try:
                task = self._tasks[current]
            except KeyError:
                raise KeyError(f"unknown task: {current}") from None

            result = task.execute(self)

            if result in (TaskResult.SUCCESS, TaskResult.FATAL_FAILURE):
                self._completed.add(current)
                for dependent in self._dependencies.get(current, ()):
                    self._in_degree[dependent] = self._in_degree.get(dependent, 0) - 1
                    if self._in_degree[dependent] == 0:
                        queue.append(dependent)
            elif result == TaskResult.RETRYABLE_FAILURE:
                queue.append(current)