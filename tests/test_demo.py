import pytest

from exprtree.demo import run_demo
from exprtree.snippets import TUTORIAL_SCENARIOS
from exprtree.writer import TraceWriter


def test_demo_prints_every_scenario(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo(TraceWriter(debug=False))

    output = capsys.readouterr().out
    assert "STRUCTURAL EVALUATION" in output
    for title, _, expected in TUTORIAL_SCENARIOS:
        assert title in output
        assert f" -> {expected}\n" in output
