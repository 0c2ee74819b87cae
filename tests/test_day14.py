import pytest

from aoc24.day14 import (
    HEIGHT,
    WIDTH,
    Robot,
    has_long_run,
    main,
    parse_robots,
    render,
    safety_factor,
    tree_candidates,
)

EXAMPLE = """p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_robots_reads_fields():
    robots = parse_robots("p=2,4 v=2,-3\np=10,3 v=-1,2\n")
    assert robots == [Robot(2, 4, 2, -3), Robot(10, 3, -1, 2)]


@pytest.mark.parametrize("text", ["", "p=1,2 v=3\n", "p=-1,2 v=3,4\n", "q=1,2 v=3,4\n"])
def test_parse_robots_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_robots(text)


def test_position_after_zero_seconds_is_start():
    robot = Robot(5, 6, -7, 8)
    assert robot.position_after(0) == (5, 6)


def test_position_repeats_after_full_cycle():
    robot = Robot(5, 6, -7, 8)
    assert robot.position_after(37 + WIDTH * HEIGHT) == robot.position_after(37)


def test_position_stays_in_room():
    for robot in parse_robots(EXAMPLE):
        for seconds in range(20):
            x, y = robot.position_after(seconds, 11, 7)
            assert 0 <= x < 11 and 0 <= y < 7


def test_worked_example_position():
    assert Robot(2, 4, 2, -3).position_after(5, 11, 7) == (1, 3)


def test_worked_example_safety_factor():
    assert safety_factor(parse_robots(EXAMPLE), 100, 11, 7) == 12


def test_safety_factor_scales_with_duplicates():
    robots = parse_robots(EXAMPLE)
    single = safety_factor(robots, 100, 11, 7)
    assert safety_factor(robots * 2, 100, 11, 7) == single * 2**4


def test_safety_factor_ignores_middle_lines():
    robots = parse_robots(EXAMPLE)
    middle = [Robot(5, y, 0, 0) for y in range(7)]
    assert safety_factor(robots + middle, 100, 11, 7) == safety_factor(robots, 100, 11, 7)


@pytest.mark.parametrize("width,height", [(10, 7), (11, 8), (0, 7)])
def test_safety_factor_needs_odd_dimensions(width, height):
    with pytest.raises(ValueError):
        safety_factor([Robot(0, 0, 1, 1)], 100, width, height)


def test_render_shape_and_marks():
    positions = [(0, 0), (3, 2), (3, 2), (10, 6)]
    picture = render(positions, 11, 7)
    rows = picture.split("\n")
    assert len(rows) == 7
    assert all(len(row) == 11 for row in rows)
    assert picture.count("#") == len(set(positions))
    assert rows[2][3] == "#"


def test_long_run_found():
    positions = [(x, 1) for x in range(10)]
    assert has_long_run(positions, 20, 5)


def test_short_run_not_found():
    positions = [(x, 1) for x in range(9)]
    assert not has_long_run(positions, 20, 5)


def test_run_spanning_rows_counts():
    positions = [(x, 0) for x in range(15, 20)] + [(x, 1) for x in range(5)]
    assert has_long_run(positions, 20, 5)


def test_run_at_end_of_room_does_not_count():
    positions = [(x, 4) for x in range(10, 20)]
    assert not has_long_run(positions, 20, 5)


def test_tree_candidates_with_still_robots():
    robots = [Robot(x, 2, 0, 0) for x in range(12)]
    seconds = [s for s, _ in tree_candidates(robots, 3, 20, 5)]
    assert seconds == [0, 1, 2]


def test_tree_candidates_report_positions():
    robots = [Robot(x, 2, 0, 0) for x in range(12)]
    (found,) = list(tree_candidates(robots, 1, 20, 5))
    assert sorted(found[1]) == sorted((robot.x, robot.y) for robot in robots)


def test_tree_candidates_none_without_runs():
    robots = [Robot(0, 0, 1, 1), Robot(5, 3, -1, 2)]
    assert list(tree_candidates(robots, 50, 11, 7)) == []


def test_main_prints_safety_factor(tmp_path, capsys):
    text = "p=0,0 v=1,1\np=50,60 v=-2,3\n"
    path = tmp_path / "robots.txt"
    path.write_text(text)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == str(safety_factor(parse_robots(text)))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Failed to open file" in capsys.readouterr().out