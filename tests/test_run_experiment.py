import sys
import os
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from experiments.run_experiment import parse_args


def test_defaults():
    args = parse_args([])
    assert args.puzzle == "crossing"
    assert args.order == "bfs"
    assert args.cost is None
    assert not args.debug
    assert args.plot is None


def test_plot_with_debug_is_accepted():
    args = parse_args(["--debug", "--plot", "search.png"])
    assert args.debug
    assert args.plot == "search.png"


def test_plot_without_debug_is_rejected(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--plot", "search.png"])
    assert "--plot requires --debug" in capsys.readouterr().err


def test_cost_only_for_family_puzzle(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--puzzle", "crossing", "--cost", "depth"])
    assert "family puzzle" in capsys.readouterr().err
    assert parse_args(["--puzzle", "family", "--cost", "depth"]).cost == "depth"
