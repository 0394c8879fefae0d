import pytest

from concpatterns.cli import main, usage

FLAGS = [
    "pipeline",
    "fan",
    "pools",
    "producer-consumer",
    "supervisor",
    "pubsub",
    "timeout-cancellation",
    "rate-limiting",
    "mapreduce",
    "singleflight",
    "event-loop",
    "resource-pooling",
]


def test_usage_starts_with_title():
    lines = usage().splitlines()
    assert lines[0] == "Concurrency Model Patterns Examples"
    assert lines[1] == "=" * len(lines[0])
    assert lines[2] == "Usage:"


def test_usage_pipeline_line_matches_layout():
    assert "  cmp-pattern --pipeline           - Run pipeline pattern example" in usage().splitlines()


def test_usage_lists_every_flag_in_order():
    text = usage()
    positions = [text.index(f"./cmp-pattern --{flag}") for flag in FLAGS]
    assert positions == sorted(positions)
    for flag in FLAGS:
        assert f"  cmp-pattern --{flag}" in text


def test_no_flags_prints_usage_and_fails(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.strip() == usage().strip()


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--nonexistent"])
    assert excinfo.value.code == 2


def test_mapreduce_flag_runs_example(capsys):
    assert main(["--mapreduce"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Running MapReduce Pattern Example...\n")
    assert "=== MapReduce Pattern Example ===" in out
    assert "  hello: 3" in out
    assert out.rstrip().endswith("MapReduce example completed!")


def test_first_selected_example_wins(capsys):
    assert main(["--mapreduce", "--pipeline"]) == 0
    out = capsys.readouterr().out
    assert "Running Pipeline Pattern Example..." in out
    assert "MapReduce" not in out
    assert out.count("Result: ") == 10