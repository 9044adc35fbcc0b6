from lemin.model import Graph, Path, Room, Simulation, new_ant
from lemin.printer import (
    format_ant,
    format_graph,
    format_path,
    format_paths,
    format_room,
    format_simulation,
)

YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"
RESET = "\033[0m"


def field(prefix, value):
    return f"{YELLOW}{prefix}{RESET}{BLUE}{value}{RESET}\n"


def linked_rooms():
    first = Room("r1", 3, 4)
    second = Room("r2", 5, 6)
    third = Room("r3", 7, 8)
    first.neighbors.extend([second, third])
    first.neigh_size = 2
    return first, second, third


def test_room_block_fields():
    first, _, _ = linked_rooms()
    text = format_room(first)
    assert text.startswith(f"{MAGENTA}\n---\nRoom : \n{RESET}")
    assert field("Name : ", "r1") in text
    assert field("Start : ", "false") in text
    assert f"{BLUE} X = 3 Y = 4{RESET}\n" in text
    assert f"{BLUE}r2{RESET} | {BLUE}r3{RESET}\n" in text


def test_room_start_flag():
    room = Room("s", is_start=True)
    assert field("Start : ", "true") in format_room(room)


def test_path_block_fields():
    rooms = list(linked_rooms())
    path = Path(rooms=rooms, size=len(rooms))
    text = format_path(path)
    assert field("Path Size : ", len(rooms)) in text
    assert field("Heuristic : ", "-42000.000000") in text
    assert field("Unique : ", "false") in text
    assert field("Total Weigh : ", 1) in text


def test_paths_block_holds_each_path():
    paths = [Path(size=n) for n in (2, 3, 4)]
    text = format_paths(paths)
    assert text.count("Path Size : ") == len(paths)
    for path in paths:
        assert format_path(path) in text


def test_ant_shows_remaining_rooms():
    rooms = list(linked_rooms())
    path = Path(rooms=rooms, size=len(rooms))
    ant = new_ant(7, path)
    ant.position = 1
    text = format_ant(ant)
    assert field("ant number :", 7) in text
    assert "r1" not in text
    assert f"{BLUE}r2{RESET} | {BLUE}r3{RESET}\n" in text
    assert field("ant posX:", "3.000000") in text


def test_graph_lists_every_room():
    rooms = list(linked_rooms())
    text = format_graph(Graph(rooms=rooms))
    assert field("Number of Rooms : ", len(rooms)) in text
    assert text.count("Room : \n") == len(rooms)


def test_simulation_lists_names():
    rooms = list(linked_rooms())
    sim = Simulation(graph=Graph(rooms=rooms), ants=5, room_names=["r1", "r2", "r3"])
    text = format_simulation(sim)
    assert field("Number of Ants : ", 5) in text
    assert f"{BLUE}r1{RESET} | {BLUE}r2{RESET} | {BLUE}r3{RESET}\n" in text
    assert text.endswith(format_graph(sim.graph))