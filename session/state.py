"""
SimulatorSession — the explicit state container owned by the presentation layer.

Holds the slider vector, the selected country / compare flag, and the results
of the latest committed run. The engine never sees this object; it only
receives the snapshot taken when a run starts.

Runs are two-phase so the dashboard can show a "simulating" delay:
  1. begin_run()  -> RunTicket (new generation number + input snapshot)
  2. finish_run() -> computes and commits, but ONLY if the ticket is still current

Any later begin_run() or reset() bumps the generation, so a superseded run that
finishes late is discarded instead of overwriting newer results.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from core.config import DEFAULT_CONFIG, SimulatorConfig
from core.schema import COUNTRY_IDS
from engine.projection import ProjectionResult
from engine.runner import run_projection
from profiles.countries import COUNTRY_PROFILES, CountryProfile
from profiles.interventions import INTERVENTIONS, InterventionDefinition
from scenarios.intensity import PolicyIntensityVector
from scenarios.presets import apply_preset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunTicket:
    generation: int
    intensities: PolicyIntensityVector
    country_ids: Tuple[str, ...]


@dataclass
class SimulatorSession:
    profiles: Mapping[str, CountryProfile] = field(default_factory=lambda: COUNTRY_PROFILES)
    interventions: Mapping[str, InterventionDefinition] = field(default_factory=lambda: INTERVENTIONS)
    config: SimulatorConfig = DEFAULT_CONFIG

    intensities: PolicyIntensityVector = field(default_factory=PolicyIntensityVector.zeros)
    selected_country: str = COUNTRY_IDS[0]
    compare_mode: bool = False
    results: Dict[str, ProjectionResult] = field(default_factory=dict)

    _generation: int = field(default=0, init=False, repr=False)
    _pending: Optional[RunTicket] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.selected_country not in self.profiles:
            raise KeyError(f"Unknown country id {self.selected_country!r}")

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def set_intensity(self, policy_id: str, value: int) -> None:
        self.intensities = self.intensities.with_intensity(policy_id, value)

    def set_intensities(self, intensities: PolicyIntensityVector) -> None:
        self.intensities = intensities

    def select_country(self, country_id: str) -> None:
        if country_id not in self.profiles:
            raise KeyError(f"Unknown country id {country_id!r}. Available: {sorted(self.profiles)}")
        self.selected_country = country_id

    def set_compare_mode(self, enabled: bool) -> None:
        self.compare_mode = bool(enabled)

    def apply_preset(self, name: str) -> PolicyIntensityVector:
        """Replace the whole vector with a preset; held results stay until the next run."""
        self.intensities = apply_preset(name)
        logger.debug("Applied preset %s -> %s", name, self.intensities.as_dict())
        return self.intensities

    def reset(self) -> None:
        """All sliders to zero, results discarded, any in-flight run invalidated."""
        self.intensities = PolicyIntensityVector.zeros()
        self.results = {}
        self._generation += 1
        self._pending = None
        logger.info("Session reset (generation %d)", self._generation)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    @property
    def country_ids_to_run(self) -> Tuple[str, ...]:
        if self.compare_mode:
            return tuple(self.profiles)
        return (self.selected_country,)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_running(self) -> bool:
        return self._pending is not None

    def begin_run(self) -> RunTicket:
        self._generation += 1
        ticket = RunTicket(
            generation=self._generation,
            intensities=self.intensities,
            country_ids=self.country_ids_to_run,
        )
        self._pending = ticket
        return ticket

    def finish_run(self, ticket: RunTicket) -> Optional[Dict[str, ProjectionResult]]:
        """
        Compute and commit the ticket's results.
        Returns None (and leaves state untouched) if the ticket was superseded.
        """
        if ticket.generation != self._generation:
            logger.debug(
                "Discarding superseded run %d (current generation %d)",
                ticket.generation,
                self._generation,
            )
            return None

        results = run_projection(
            ticket.intensities,
            ticket.country_ids,
            profiles=self.profiles,
            interventions=self.interventions,
            config=self.config,
        )
        self.results = results
        self._pending = None
        return results

    def run(self) -> Dict[str, ProjectionResult]:
        """Immediate run without the cosmetic delay."""
        results = self.finish_run(self.begin_run())
        assert results is not None  # nothing can supersede a synchronous run
        return results

    async def run_delayed(self, delay: Optional[float] = None) -> Optional[Dict[str, ProjectionResult]]:
        """
        Run with the "simulating" delay. Inputs are captured before the wait;
        if another run or a reset happens meanwhile, this one is dropped.
        """
        ticket = self.begin_run()
        wait = self.config.simulate_delay_seconds if delay is None else delay
        if wait > 0:
            await asyncio.sleep(wait)
        return self.finish_run(ticket)
