import asyncio

from core.config import DEFAULT_CONFIG
from scenarios.intensity import PolicyIntensityVector
from session.state import SimulatorSession


def _session(**kw):
    return SimulatorSession(config=DEFAULT_CONFIG.with_delay(0), **kw)


def test_preset_then_reset_yields_zero_vector():
    s = _session()
    s.apply_preset("balanced")
    s.reset()
    assert s.intensities == PolicyIntensityVector.zeros()
    assert s.intensities.is_zero


def test_reset_discards_results():
    s = _session()
    s.apply_preset("aggressive")
    s.run()
    assert s.results
    s.reset()
    assert s.results == {}
    assert not s.is_running


def test_single_and_compare_runs():
    s = _session()
    s.select_country("japan")
    assert list(s.run()) == ["japan"]
    s.set_compare_mode(True)
    assert set(s.run()) == {"south_korea", "japan"}


def test_new_run_replaces_results_wholesale():
    s = _session()
    s.set_compare_mode(True)
    s.run()
    s.set_compare_mode(False)
    s.run()
    assert list(s.results) == ["south_korea"]


def test_run_uses_snapshot_taken_at_start():
    s = _session()
    s.apply_preset("low")
    ticket = s.begin_run()
    s.set_intensity("ai_education", 100)
    results = s.finish_run(ticket)
    assert results["south_korea"].intensities["ai_education"] == 20


def test_superseded_ticket_is_discarded():
    s = _session()
    stale = s.begin_run()
    s.apply_preset("aggressive")
    fresh = s.begin_run()
    assert s.finish_run(fresh) is not None
    committed = s.results
    assert s.finish_run(stale) is None
    assert s.results is committed


def test_slow_delayed_run_cannot_overwrite_newer_one():
    async def scenario():
        s = _session()
        s.apply_preset("low")
        slow = asyncio.create_task(s.run_delayed(0.05))
        await asyncio.sleep(0)  # let the slow run take its ticket
        s.apply_preset("aggressive")
        fast = await s.run_delayed(0.0)
        return s, await slow, fast

    s, slow_result, fast_result = asyncio.run(scenario())
    assert slow_result is None
    assert fast_result is not None
    assert s.results["south_korea"].intensities["housing_ai"] == 100


def test_reset_cancels_in_flight_run():
    async def scenario():
        s = _session()
        s.apply_preset("balanced")
        pending = asyncio.create_task(s.run_delayed(0.02))
        await asyncio.sleep(0)
        assert s.is_running
        s.reset()
        return s, await pending

    s, result = asyncio.run(scenario())
    assert result is None
    assert s.results == {}


def test_run_delayed_default_delay_from_config():
    s = _session()
    results = asyncio.run(s.run_delayed())
    assert results is not None
    assert s.results == results
