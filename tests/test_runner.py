import logging

import pytest

from engine.projection import project
from engine.runner import project_country, run_projection
from scenarios.presets import apply_preset


def test_single_country(korea):
    v = apply_preset("balanced")
    results = run_projection(v, ["south_korea"])
    assert list(results) == ["south_korea"]
    assert results["south_korea"] == project(korea, v)


def test_compare_mode_keeps_requested_order():
    v = apply_preset("aggressive")
    results = run_projection(v, ["japan", "south_korea", "japan"])
    assert list(results) == ["japan", "south_korea"]
    # same policy mix, same raw impact, different baselines
    assert results["japan"].total_raw_impact == pytest.approx(results["south_korea"].total_raw_impact)
    assert results["japan"].total_cost == results["south_korea"].total_cost
    assert results["japan"].projected_rate > results["south_korea"].projected_rate


def test_empty_country_set_is_rejected():
    with pytest.raises(ValueError):
        run_projection(apply_preset("low"), [])


def test_unknown_country_is_rejected():
    with pytest.raises(KeyError):
        run_projection(apply_preset("low"), ["atlantis"])
    with pytest.raises(KeyError):
        project_country("atlantis", apply_preset("low"))


def test_run_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="engine.runner")
    run_projection(apply_preset("low"), ["south_korea", "japan"])
    assert "Projected 2 countries" in caplog.text
