import pytest

from aoc24.day13 import (
    PART_TWO_OFFSET,
    Machine,
    cheapest_by_search,
    cheapest_by_solving,
    main,
    parse_machines,
    total_tokens_search,
    total_tokens_solving,
)

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


def test_parse_first_machine():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == Machine(94, 34, 22, 67, 8400, 5400)


def test_parse_applies_offset():
    plain = parse_machines(EXAMPLE)
    moved = parse_machines(EXAMPLE, PART_TWO_OFFSET)
    for a, b in zip(plain, moved):
        assert b.prize_x == a.prize_x + PART_TWO_OFFSET
        assert b.prize_y == a.prize_y + PART_TWO_OFFSET
        assert (b.ax, b.ay, b.bx, b.by) == (a.ax, a.ay, a.bx, a.by)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Button A: X+94, Y+34\nButton B: X+22, Y+67\n",
        "Button A: X+4, Y+34\nButton B: X+22, Y+67\nPrize: X=8400, Y=5400",
        "Button A: X+94, Y+34\nButton B: X+22, Y+67\nPrize: X=8400 Y=5400",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_machines(text)


def test_search_example_total():
    assert total_tokens_search(parse_machines(EXAMPLE)) == 480


def test_search_first_machine():
    assert cheapest_by_search(parse_machines(EXAMPLE)[0]) == 280


def test_unwinnable_machines_give_none():
    machines = parse_machines(EXAMPLE)
    assert cheapest_by_search(machines[1]) is None
    assert cheapest_by_search(machines[3]) is None
    assert cheapest_by_solving(machines[1]) is None
    assert cheapest_by_solving(machines[3]) is None


def test_solving_agrees_with_search():
    machines = parse_machines(EXAMPLE)
    for machine in machines:
        assert cheapest_by_solving(machine) == cheapest_by_search(machine)
    assert total_tokens_solving(machines) == total_tokens_search(machines)


def test_part_two_winnable_machines():
    machines = parse_machines(EXAMPLE, PART_TWO_OFFSET)
    results = [cheapest_by_solving(machine) for machine in machines]
    assert results[0] is None
    assert results[2] is None
    assert all(cost is not None and cost > 0 for cost in (results[1], results[3]))
    assert total_tokens_solving(machines) == results[1] + results[3]


def test_search_respects_press_limit():
    machine = Machine(10, 10, 20, 21, 10 * 150, 10 * 150)
    assert cheapest_by_search(machine, 100) is None
    assert cheapest_by_search(machine, 150) == 450
    assert cheapest_by_solving(machine) == 450


def test_negative_presses_are_not_solutions():
    machine = Machine(10, 20, 20, 10, 10, 50)
    assert cheapest_by_solving(machine) is None


def test_parallel_buttons_raise():
    machine = Machine(10, 10, 20, 20, 100, 100)
    with pytest.raises(ValueError):
        cheapest_by_solving(machine)


def test_main_prints_both_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="ascii")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected_two = total_tokens_solving(parse_machines(EXAMPLE, PART_TWO_OFFSET))
    assert lines == ["480", str(expected_two)]


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Expected filename to be given\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().out == "Failed to open file\n"