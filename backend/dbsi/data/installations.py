"""SI 4 rule table — mandatory fire protection installations.

Each rule adds systems to the required set when its condition holds; the
rules are cumulative.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dbsi.models.enums import BuildingUse, ProtectionSystem, RiskLevel


@dataclass(frozen=True)
class InstallationRule:
    """Systems required when ``applies(use, area, height, risk)`` holds."""

    systems: tuple[ProtectionSystem, ...]
    applies: Callable[[BuildingUse, float, float, RiskLevel], bool]
    reason: str


_CARE_USES = frozenset({BuildingUse.HEALTHCARE, BuildingUse.HOTEL})
_SIGNAGE_USES = frozenset(
    {BuildingUse.EDUCATIONAL, BuildingUse.HEALTHCARE, BuildingUse.HOTEL}
)
_SMOKE_USES = frozenset({BuildingUse.COMMERCIAL, BuildingUse.INDUSTRIAL})

INSTALLATION_RULES: tuple[InstallationRule, ...] = (
    InstallationRule(
        (ProtectionSystem.EXTINGUISHERS,),
        lambda use, area, height, risk: True,
        "required in every building",
    ),
    InstallationRule(
        (ProtectionSystem.FIRE_HOSE_REELS,),
        lambda use, area, height, risk: area > 500 or height > 15,
        "area > 500 m² or height > 15 m",
    ),
    InstallationRule(
        (ProtectionSystem.DRY_RISER,),
        lambda use, area, height, risk: height > 28,
        "height > 28 m",
    ),
    InstallationRule(
        (ProtectionSystem.FIRE_DETECTION, ProtectionSystem.FIRE_ALARM),
        lambda use, area, height, risk: (
            use in _CARE_USES or (area > 1000 and risk == RiskLevel.HIGH)
        ),
        "healthcare/hotel use, or high risk with area > 1000 m²",
    ),
    InstallationRule(
        (ProtectionSystem.SPRINKLERS,),
        lambda use, area, height, risk: risk == RiskLevel.HIGH or area > 2000,
        "high risk or area > 2000 m²",
    ),
    InstallationRule(
        (ProtectionSystem.EMERGENCY_LIGHTING, ProtectionSystem.SIGNAGE),
        lambda use, area, height, risk: height > 15 or use in _SIGNAGE_USES,
        "height > 15 m or educational/healthcare/hotel use",
    ),
    InstallationRule(
        (ProtectionSystem.PUBLIC_ADDRESS,),
        lambda use, area, height, risk: area > 1500,
        "area > 1500 m²",
    ),
    InstallationRule(
        (ProtectionSystem.SMOKE_CONTROL,),
        lambda use, area, height, risk: use in _SMOKE_USES and area > 1000,
        "commercial/industrial use with area > 1000 m²",
    ),
)


def required_systems(
    use: BuildingUse, area: float, height: float, risk: RiskLevel,
) -> dict[ProtectionSystem, str]:
    """Map each required system, in rule order, to the reason of the first rule requiring it."""
    required: dict[ProtectionSystem, str] = {}
    for rule in INSTALLATION_RULES:
        if rule.applies(use, area, height, risk):
            for system in rule.systems:
                required.setdefault(system, rule.reason)
    return required
