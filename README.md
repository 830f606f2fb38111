# choros

A small framework for structuring a robot's run: a fixed sequence of lifecycle
phases around a dependency graph of tasks, plus a navigation graph for
shortest-path planning across a field.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Lifecycle and tasks (`choros.lifecycle`)

Subclass `Lifecycle` and implement its phases: `declare`, `calibrate`, `wait`,
`clean` and `reset`. Calling `run()` performs them in that order, with
`execute_tasks()` between `wait` and `clean`.

Tasks subclass `Task` and return a `TaskResult` from `execute(lifecycle)`:

- `TaskResult.SUCCESS`: the task is marked completed and its dependents are released.
- `TaskResult.RETRYABLE_FAILURE`: the task is put back at the end of the queue and tried again.
- `TaskResult.FATAL_FAILURE`: the task is marked completed and is not retried;
  its dependents are released just as on success.

`add_task(task_id, task)` registers a task (replacing any earlier one with the
same id). `add_dependency(source, target)` makes `target` wait until `source`
has completed. Tasks are run breadth-first in topological order; a task that
sits on a dependency cycle never becomes ready and is not run.
`is_task_completed(task_id)` tells whether a task has finished, successfully
or fatally. If a dependency names a task that was never added, `execute_tasks`
raises `KeyError` when it reaches it.

```python
from choros.lifecycle import Lifecycle, Task, TaskResult


class Drive(Task):
    def execute(self, lifecycle):
        print("driving")
        return TaskResult.SUCCESS


class Score(Task):
    def execute(self, lifecycle):
        print("scoring")
        return TaskResult.SUCCESS


class Robot(Lifecycle):
    def declare(self):
        self.add_task("drive", Drive())
        self.add_task("score", Score())
        self.add_dependency("drive", "score")  # score runs after drive

    def calibrate(self):
        pass

    def wait(self):
        pass

    def clean(self):
        pass

    def reset(self):
        pass


robot = Robot()
robot.run()
assert robot.is_task_completed("score")
```

## Navigation (`choros.navigation`)

`Navigation` holds a graph of named nodes joined by weighted edges that point
in a cardinal `Direction` (`EAST`, `NORTH`, `WEST`, `SOUTH`, valued in
degrees; `Direction.reverse` gives the opposite one). Adding an edge also adds
the reverse edge, pointing the opposite way. A `NodeType.SECONDARY` node is a
terminal and may have only one edge; a `NodeType.PRIMARY` node is a full
intersection. `add_node` raises `ValueError` for a duplicate node, and
`add_edge` raises `ValueError` for an unknown node or a second edge on a
secondary node.

The robot's position is the `current_node` attribute (`None` until set).

```python
from choros.navigation import Direction, Navigation, NodeType

nav = Navigation()
nav.add_node("start", NodeType.SECONDARY)
nav.add_node("hub", NodeType.PRIMARY)
nav.add_node("goal", NodeType.SECONDARY)
nav.add_edge("start", "hub", 10.0, Direction.EAST)
nav.add_edge("hub", "goal", 5.0, Direction.NORTH)

nav.current_node = "start"
path = nav.find_path("goal")
for edge in path:
    print(edge.target, edge.weight, edge.direction, edge.orientation())
```

`find_path(target, blacklist=())` returns the list of `Edge` objects along
the shortest route from the current node. It returns `None` when no current
node is set or the target cannot be reached. Nodes in `blacklist` are never
passed through.

`get_node_type(node)` returns a node's `NodeType`, or `None` if it is
unknown. `get_edge(source, target)` returns the edge between two nodes, or
`None` if they are not joined, and raises `ValueError` if either node is
unknown. Edges returned by `find_path` and `get_edge` are copies.

Each `Edge` has `target`, `weight`, `direction` and four flags,
`intersection_east`, `intersection_north`, `intersection_west` and
`intersection_south`, which record side branches met at the node it leads
from, so that line-following code can count crossings. `orientation()` gives
`EdgeOrientation.HORIZONTAL` for east/west edges and
`EdgeOrientation.VERTICAL` otherwise.

## What it does not do

The package only plans and schedules. It does not drive motors, read sensors
or talk to any robot hardware; those belong in your `Lifecycle` phases and
`Task.execute` implementations. It has no command-line tool.