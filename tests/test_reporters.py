import io

import pytest

from threebody import StepReporter, format_step, sample_steps


def test_format_step(reference_state):
    assert format_step(reference_state) == "(0.3090, 0.4237) (-0.5000, 0.0000) (0.5000, 0.0000)"


def test_sample_steps(reference_run):
    assert [s.step for s in sample_steps(reference_run, 2)] == [0, 2, 4]
    assert [s.step for s in sample_steps(reference_run, 1)] == [0, 1, 2, 3, 4]


def test_sample_steps_bad_stride(reference_run):
    with pytest.raises(ValueError):
        list(sample_steps(reference_run, 0))


def test_reporter_writes_every_interval(reference_run):
    buf = io.StringIO()
    reporter = StepReporter(2, stream=buf)
    for s in reference_run:
        reporter(s)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 3
    assert reporter.lines_written == 3
    assert lines[0] == format_step(reference_run[0])
    assert lines[2] == format_step(reference_run[4])


def test_reporter_defaults_to_stdout(reference_state, capsys):
    StepReporter(1000)(reference_state)
    assert capsys.readouterr().out.strip() == format_step(reference_state)


def test_reporter_bad_interval():
    with pytest.raises(ValueError):
        StepReporter(0)
