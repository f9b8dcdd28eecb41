"""
Static model tables — country baselines, AI policy interventions, and their validation.
"""

from .countries import COUNTRY_PROFILES, CountryProfile, Demographics, get_country_profile
from .interventions import INTERVENTIONS, InterventionDefinition, get_intervention
from .validators import ValidationResult, validate_interventions, validate_profiles

__all__ = [
    "COUNTRY_PROFILES",
    "CountryProfile",
    "Demographics",
    "get_country_profile",
    "INTERVENTIONS",
    "InterventionDefinition",
    "get_intervention",
    "ValidationResult",
    "validate_interventions",
    "validate_profiles",
]
