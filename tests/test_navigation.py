import pytest

from choros.navigation import Direction, Edge, EdgeOrientation, Navigation, NodeType


@pytest.fixture
def triangle():
    nav = Navigation()
    for name in ("A", "B", "C"):
        nav.add_node(name, NodeType.PRIMARY)
    nav.add_edge("A", "B", 1.0, Direction.EAST)
    nav.add_edge("B", "C", 1.0, Direction.EAST)
    nav.add_edge("A", "C", 5.0, Direction.NORTH)
    nav.current_node = "A"
    return nav


def test_duplicate_node_raises():
    nav = Navigation()
    nav.add_node("A", NodeType.PRIMARY)
    with pytest.raises(ValueError, match="Node already exists: A"):
        nav.add_node("A", NodeType.SECONDARY)


def test_edge_requires_both_nodes():
    nav = Navigation()
    nav.add_node("A", NodeType.PRIMARY)
    with pytest.raises(ValueError):
        nav.add_edge("A", "B", 1.0, Direction.EAST)


def test_secondary_node_allows_one_edge():
    nav = Navigation()
    nav.add_node("A", NodeType.PRIMARY)
    nav.add_node("B", NodeType.PRIMARY)
    nav.add_node("S", NodeType.SECONDARY)
    nav.add_edge("A", "S", 1.0, Direction.EAST)
    with pytest.raises(ValueError, match="Secondary node 'S'"):
        nav.add_edge("B", "S", 1.0, Direction.WEST)
    with pytest.raises(ValueError, match="Secondary node 'S'"):
        nav.add_edge("S", "B", 1.0, Direction.EAST)


def test_reverse_edge_has_opposite_direction(triangle):
    forward = triangle.get_edge("A", "C")
    backward = triangle.get_edge("C", "A")
    assert forward.direction is Direction.NORTH
    assert backward.direction is Direction.SOUTH
    assert forward.weight == backward.weight == 5.0


def test_get_edge_missing_returns_none():
    nav = Navigation()
    nav.add_node("A", NodeType.PRIMARY)
    nav.add_node("B", NodeType.PRIMARY)
    assert nav.get_edge("A", "B") is None


def test_get_edge_unknown_node_raises(triangle):
    with pytest.raises(ValueError):
        triangle.get_edge("A", "Z")


def test_get_edge_returns_copy(triangle):
    edge = triangle.get_edge("A", "B")
    edge.weight = 99.0
    assert triangle.get_edge("A", "B").weight == 1.0


def test_orientation():
    assert Edge("X", 1.0, Direction.EAST).orientation() is EdgeOrientation.HORIZONTAL
    assert Edge("X", 1.0, Direction.WEST).orientation() is EdgeOrientation.HORIZONTAL
    assert Edge("X", 1.0, Direction.NORTH).orientation() is EdgeOrientation.VERTICAL
    assert Edge("X", 1.0, Direction.SOUTH).orientation() is EdgeOrientation.VERTICAL


def test_direction_values():
    assert [Direction(angle) for angle in (0, 90, 180, 270)] == [
        Direction.EAST,
        Direction.NORTH,
        Direction.WEST,
        Direction.SOUTH,
    ]
    with pytest.raises(ValueError):
        Direction(45)


def test_node_type_lookup(triangle):
    assert triangle.get_node_type("A") is NodeType.PRIMARY
    assert triangle.get_node_type("missing") is None


def test_find_path_without_current_node():
    nav = Navigation()
    nav.add_node("A", NodeType.PRIMARY)
    assert nav.find_path("A") is None


def test_find_path_prefers_cheaper_route(triangle):
    path = triangle.find_path("C")
    assert [edge.target for edge in path] == ["B", "C"]
    assert sum(edge.weight for edge in path) == 2.0


def test_find_path_respects_blacklist(triangle):
    path = triangle.find_path("C", {"B"})
    assert [edge.target for edge in path] == ["C"]
    assert path[0].direction is Direction.NORTH


def test_blacklisted_target_is_unreachable(triangle):
    assert triangle.find_path("C", {"C"}) is None


def test_path_to_current_node_is_none(triangle):
    assert triangle.find_path("A") is None


def test_unreachable_node_gives_none(triangle):
    triangle.add_node("D", NodeType.PRIMARY)
    assert triangle.find_path("D") is None


def test_current_node_can_move(triangle):
    triangle.current_node = "C"
    path = triangle.find_path("A")
    assert [edge.target for edge in path] == ["B", "A"]


def test_intersection_flags_mark_branch():
    nav = Navigation()
    for name in ("A", "B", "C"):
        nav.add_node(name, NodeType.PRIMARY)
    nav.add_edge("A", "B", 1.0, Direction.EAST)
    nav.add_edge("A", "C", 1.0, Direction.NORTH)
    towards_a = nav.get_edge("B", "A")
    assert towards_a.intersection_north is True
    assert towards_a.intersection_south is False
    assert nav.get_edge("A", "B").intersection_north is False