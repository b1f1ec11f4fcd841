import io

import pytest
from ascent_sim import render
from ascent_sim.config import create_test_config
from ascent_sim.pacing import RealTimePacer
from ascent_sim.simulation import AscentSimulation


@pytest.fixture
def snapshot():
    return AscentSimulation(create_test_config()).tick()


def test_stage_indicator():
    assert render.format_stage_indicator(2, 3) == "Stage: [ ][#][ ]"
    assert render.format_stage_indicator(1, 1) == "Stage: [#]"


def test_progress_bar():
    bar = render.format_progress_bar(12000.0)
    assert "[##" in bar
    assert "###" not in bar
    assert bar.endswith("12000 m")


def test_progress_bar_below_ground():
    assert "#" not in render.format_progress_bar(-100.0)


def test_console_renderer_output(snapshot):
    stream = io.StringIO()
    r = render.ConsoleRenderer(stream=stream, clear=False)
    r.render(snapshot)
    out = stream.getvalue()
    assert "Stage: [#]" in out
    assert "Telemetry" in out
    assert "Altitude" in out
    assert "Troposphere" in out
    assert render.CLEAR_SCREEN not in out


def test_console_renderer_clears(snapshot):
    stream = io.StringIO()
    render.ConsoleRenderer(stream=stream, clear=True).render(snapshot)
    assert stream.getvalue().startswith(render.CLEAR_SCREEN)


def test_console_renderer_jettison_message():
    stream = io.StringIO()
    render.ConsoleRenderer(stream=stream, clear=False).stage_jettisoned(1, 3)
    assert "Stage 1 of 3 jettisoned" in stream.getvalue()


def test_console_renderer_full_run():
    stream = io.StringIO()
    cfg = create_test_config(orbit_altitude=500.0)
    result = AscentSimulation(cfg).run(renderer=render.ConsoleRenderer(stream=stream, clear=False))
    out = stream.getvalue()
    assert "Orbit achieved" in out
    assert "Simulation finished." in out
    assert out.count("Telemetry") == result.ticks


def test_real_time_pacer_scales_delay():
    slept = []
    pacer = RealTimePacer(time_scale=10.0, sleep=slept.append)
    pacer.pause(2.0)
    pacer.pause(0.0)
    assert slept == [pytest.approx(0.2)]


def test_real_time_pacer_rejects_bad_scale():
    with pytest.raises(ValueError):
        RealTimePacer(time_scale=0.0)
