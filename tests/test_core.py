import logging
import math

import numpy as np
import pytest

from core import logging_config
from core.config import DEFAULT_CONFIG, SimulatorConfig
from core.utils import excel_round, ramp_progress, safe_ratio, saturating_increase


def test_default_config_values():
    cfg = SimulatorConfig()
    assert cfg == DEFAULT_CONFIG
    assert (cfg.start_year, cfg.horizon_years, cfg.ramp_years) == (2025, 20, 10)
    assert (cfg.rate_ceiling, cfg.target_rate) == (2.5, 2.1)


def test_with_delay():
    cfg = DEFAULT_CONFIG.with_delay(0)
    assert cfg.simulate_delay_seconds == 0.0
    assert DEFAULT_CONFIG.simulate_delay_seconds == 2.0
    with pytest.raises(ValueError):
        DEFAULT_CONFIG.with_delay(-1)


def test_saturating_increase():
    assert saturating_increase(0) == 0
    assert saturating_increase(-0.3) == 0
    assert saturating_increase(0.45) == pytest.approx(0.45 * (1 - math.exp(-0.9)))
    assert saturating_increase(10.0) == pytest.approx(10.0)
    assert saturating_increase(0.2) < saturating_increase(0.3)


def test_ramp_progress():
    ramp = ramp_progress(20, 10)
    assert len(ramp) == 21
    assert ramp[0] == 0.0
    assert ramp[5] == pytest.approx(0.5)
    np.testing.assert_array_equal(ramp[10:], np.ones(11))


def test_excel_round_half_away_from_zero():
    assert excel_round(0.125, 2) == pytest.approx(0.13)
    assert excel_round(-2.5, 0) == -3.0
    assert excel_round(2.5, 0) == 3.0
    np.testing.assert_allclose(excel_round([0.1234, 0.9876], 2), [0.12, 0.99])


def test_safe_ratio():
    assert safe_ratio(6, 3) == 2
    assert math.isnan(safe_ratio(1, 0))
    assert math.isnan(safe_ratio(0, 0))


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logging_config, "_LOGGING_CONFIGURED", False)
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging_is_idempotent(fresh_logging):
    logging_config.configure_logging("debug")
    assert fresh_logging.level == logging.DEBUG
    handlers = list(fresh_logging.handlers)
    logging_config.configure_logging("warning")
    assert fresh_logging.handlers == handlers
    assert fresh_logging.level == logging.DEBUG
    logging_config.configure_logging("warning", force=True)
    assert fresh_logging.level == logging.WARNING
    assert len(fresh_logging.handlers) == 1


def test_configure_logging_rejects_unknown_level(fresh_logging):
    before = list(fresh_logging.handlers)
    with pytest.raises(ValueError):
        logging_config.configure_logging("chatty")
    assert fresh_logging.handlers == before


def test_slider_step_is_not_a_runtime_setting():
    assert not hasattr(DEFAULT_CONFIG, "intensity_step")
