"""
Projection runner — evaluates one policy mix across a set of countries.

Single-country view and compare view both go through run_projection; the only
difference is how many country ids are passed.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

from core.config import DEFAULT_CONFIG, SimulatorConfig
from profiles.countries import COUNTRY_PROFILES, CountryProfile
from profiles.interventions import INTERVENTIONS, InterventionDefinition
from scenarios.intensity import PolicyIntensityVector

from .projection import ProjectionResult, project

logger = logging.getLogger(__name__)


def project_country(
    country_id: str,
    intensities: PolicyIntensityVector,
    *,
    profiles: Mapping[str, CountryProfile] = COUNTRY_PROFILES,
    interventions: Mapping[str, InterventionDefinition] = INTERVENTIONS,
    config: SimulatorConfig = DEFAULT_CONFIG,
) -> ProjectionResult:
    """Resolve a country id and project it."""
    if country_id not in profiles:
        raise KeyError(f"Unknown country id {country_id!r}. Available: {sorted(profiles)}")
    return project(profiles[country_id], intensities, interventions=interventions, config=config)


def run_projection(
    intensities: PolicyIntensityVector,
    country_ids: Iterable[str],
    *,
    profiles: Mapping[str, CountryProfile] = COUNTRY_PROFILES,
    interventions: Mapping[str, InterventionDefinition] = INTERVENTIONS,
    config: Optional[SimulatorConfig] = None,
) -> Dict[str, ProjectionResult]:
    """
    Run the projection for every requested country with the same intensities.

    Returns
    -------
    Dict[country_id, ProjectionResult] in the order the ids were given
    (duplicates collapsed).
    """
    cfg = config or DEFAULT_CONFIG
    ids = list(dict.fromkeys(country_ids))
    if not ids:
        raise ValueError("Must provide at least one country id.")

    unknown = [cid for cid in ids if cid not in profiles]
    if unknown:
        raise KeyError(f"Unknown country ids {unknown}. Available: {sorted(profiles)}")

    results: Dict[str, ProjectionResult] = {}
    for cid in ids:
        results[cid] = project(profiles[cid], intensities, interventions=interventions, config=cfg)

    logger.info(
        "Projected %d countr%s with intensities %s: %s",
        len(results),
        "y" if len(results) == 1 else "ies",
        intensities.as_dict(),
        ", ".join(f"{cid}={r.projected_rate:.3f}" for cid, r in results.items()),
    )
    return results
