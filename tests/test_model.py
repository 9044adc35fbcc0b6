import pytest

from lemin.model import (
    Color,
    Graph,
    Path,
    Room,
    Simulation,
    VisualColors,
    blue_color,
    green_color,
    grey_color,
    init_problematic_nodes,
    new_ant,
    parse_room,
    red_color,
    white_color,
)


def test_palette_values():
    assert red_color() == Color(255, 126, 28, 41)
    assert white_color() == Color(255, 255, 255, 255)


def test_visual_colors_defaults():
    colors = VisualColors()
    assert colors.background == grey_color()
    assert colors.rooms == blue_color()
    assert colors.start == red_color()
    assert colors.end == green_color()
    assert colors.link == white_color()


def test_parse_room():
    room = parse_room("hall 3 -7")
    assert (room.name, room.x, room.y) == ("hall", 3, -7)
    assert room.neighbors == []
    assert not room.is_start and not room.is_end


def test_parse_room_skips_repeated_spaces():
    room = parse_room("a  4 5")
    assert (room.name, room.x, room.y) == ("a", 4, 5)


@pytest.mark.parametrize("line", ["a 1", "a 1 2 3", "a x y", ""])
def test_parse_room_rejects(line):
    assert parse_room(line) is None


def test_parse_room_accepts_one_valid_coordinate():
    room = parse_room("a 1 y")
    assert room.x == 1
    assert room.y == 0


def test_room_predicates():
    room = Room("a", neigh_size=3, used_in_path=2)
    assert room.is_multi_node()
    assert room.is_problematic()
    other = Room("b", neigh_size=2, used_in_path=1)
    assert not other.is_multi_node()
    assert not other.is_problematic()


def test_graph_lookup_and_reset():
    a, b = Room("a", 0, 0), Room("b", 1, 1)
    graph = Graph(rooms=[a, b])
    assert graph.num_rooms == 2
    assert graph.room_named("b") is b
    assert graph.room_named("z") is None
    a.seen = b.in_queue = True
    a.used_in_path = 3
    graph.reset_search()
    assert not a.seen and not b.in_queue
    assert a.used_in_path == 3
    a.seen = True
    graph.reset_all()
    assert a.used_in_path == 0 and not a.seen


def test_new_ant_starts_on_first_room():
    path = Path(rooms=[Room("s", 2, 9), Room("e", 5, 5)], color=red_color())
    ant = new_ant(7, path)
    assert ant.number == 7
    assert ant.room is path.rooms[0]
    assert (ant.x, ant.y) == (2.0, 9.0)
    assert ant.color == red_color()
    assert not ant.moved


def test_simulation_incomplete():
    simulation = Simulation()
    assert simulation.is_incomplete()
    simulation.room_names.append("a")
    assert not simulation.is_incomplete()
    other = Simulation()
    other.graph.start = Room("s")
    assert not other.is_incomplete()


def test_init_problematic_nodes():
    shared = Room("m", neigh_size=3, used_in_path=2)
    lone = Room("n", neigh_size=3, used_in_path=1)
    crowded = Path(rooms=[Room("s"), shared, Room("e")], multi_rooms=[shared], size=3)
    clear = Path(rooms=[Room("s"), lone, Room("e")], multi_rooms=[lone], size=3)
    init_problematic_nodes([[crowded], [clear]])
    assert crowded.problematic_rooms == [shared]
    assert crowded.pb_count == 1
    assert not crowded.unique
    assert clear.problematic_rooms == []
    assert clear.unique
    assert clear.heuristic > crowded.heuristic > 0


def test_heuristic_of_unique_path_is_inverse_size():
    path = Path(size=4)
    init_problematic_nodes([[path]])
    assert path.heuristic == pytest.approx(1 / path.size)