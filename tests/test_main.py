import pytest

from algorithms import ALGORITHMS, ALIASES, lookup
from main import RecursionLab, main


@pytest.fixture
def lab():
    return RecursionLab()

def test_every_alias_resolves():
    for alias, name in ALIASES.items():
        assert lookup(alias) is ALGORITHMS[name]
    assert lookup("FACTORIAL") is ALGORITHMS["factorial"]
    assert lookup("nope") is None

def test_run_command(lab, capsys):
    assert lab.process_command("factorial 5") is True
    assert "factorial(5) = 120" in capsys.readouterr().out

def test_run_command_with_alias_and_text(lab, capsys):
    lab.process_command("remove banana a")
    assert "remove_char('banana', 'a') = 'bnn'" in capsys.readouterr().out
    lab.process_command("palindrome Racecar")
    assert "= True" in capsys.readouterr().out

def test_run_command_with_list(lab, capsys):
    lab.process_command("max 45,12,78")
    assert "find_max([45, 12, 78]) = 78" in capsys.readouterr().out

def test_library_errors_are_reported(lab, capsys):
    assert lab.process_command("factorial -1") is True
    assert "Error: n must be non-negative" in capsys.readouterr().out

def test_argument_errors_are_reported(lab, capsys):
    assert lab.process_command("gcd 4") is True
    assert "Error: Missing int argument" in capsys.readouterr().out

def test_unknown_algorithm(lab, capsys):
    lab.process_command("frobnicate 3")
    assert "Unknown algorithm: frobnicate" in capsys.readouterr().out

def test_search_command(lab, capsys):
    lab.process_command("search 23 in 2,5,8,12,16,23,38,45,56,67,78")
    assert "23 found at index 5" in capsys.readouterr().out
    lab.process_command("search 99 in 2,5,8")
    assert "99 not found" in capsys.readouterr().out

def test_search_rejects_unsorted_values(lab, capsys):
    lab.process_command("search 3 in 5,1,3")
    assert "sorted in ascending order" in capsys.readouterr().out

def test_compare_command(lab, capsys):
    lab.process_command("compare fib 15")
    out = capsys.readouterr().out
    assert "fibonacci(15)" in out
    assert "results match" in out

def test_compare_without_iterative_form(lab, capsys):
    lab.process_command("compare gcd 4 6")
    assert "no iterative counterpart" in capsys.readouterr().out

def test_trace_command(lab, capsys):
    lab.process_command("trace factorial 4")
    assert "factorial(4) = 24" in capsys.readouterr().out

def test_demo_command_unknown_topic(lab, capsys):
    lab.process_command("demo graphs")
    assert "Unknown demo 'graphs'" in capsys.readouterr().out

def test_list_command(lab, capsys):
    lab.process_command("list")
    out = capsys.readouterr().out
    for name in ALGORITHMS:
        assert name in out

def test_quit_command(lab):
    assert lab.process_command("quit") is False

def test_run_loop_reads_until_quit(lab, monkeypatch, capsys):
    commands = iter(["", "fibonacci 10", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    lab.run()
    out = capsys.readouterr().out
    assert "fibonacci(10) = 55" in out
    assert "Goodbye!" in out

def test_main_single_command(capsys):
    assert main(["fibonacci", "10"]) == 0
    assert "fibonacci(10) = 55" in capsys.readouterr().out

def test_main_single_command_failure(capsys):
    assert main(["factorial", "-3"]) == 1
    assert "Error:" in capsys.readouterr().out

def test_main_unknown_command():
    assert main(["!!!"]) == 1

def test_naive_call_budget_is_reported(lab, capsys):
    assert lab.process_command("fibonacci 50") is True
    assert "use fibonacci_iterative instead" in capsys.readouterr().out
    lab.process_command("compare fib 50")
    assert "Error: fibonacci needs" in capsys.readouterr().out

def test_main_rejects_naive_call_over_budget(capsys):
    assert main(["fibonacci", "50"]) == 1
    assert "Error: fibonacci needs" in capsys.readouterr().out
