"""Human-readable labels for enum values used in results and reports."""

from __future__ import annotations

from dbsi.models.enums import (
    BuildingLocation,
    BuildingUse,
    MaterialClass,
    ProtectionSystem,
    SectorLocation,
    StructureType,
)

BUILDING_USE_LABELS: dict[BuildingUse, str] = {
    BuildingUse.RESIDENTIAL: "Residential",
    BuildingUse.RESIDENTIAL_SINGLE: "Single-family dwelling",
    BuildingUse.OFFICE: "Office",
    BuildingUse.COMMERCIAL: "Commercial",
    BuildingUse.INDUSTRIAL: "Industrial",
    BuildingUse.EDUCATIONAL: "Educational",
    BuildingUse.HEALTHCARE: "Healthcare",
    BuildingUse.HOTEL: "Hotel",
    BuildingUse.ASSEMBLY: "Public assembly",
    BuildingUse.RESTAURANT: "Restaurant",
    BuildingUse.PARKING_EXCLUSIVE: "Parking (exclusive building)",
    BuildingUse.PARKING_UNDER: "Parking (below another use)",
}

LOCATION_LABELS: dict[BuildingLocation, str] = {
    BuildingLocation.URBAN: "Urban",
    BuildingLocation.RURAL: "Rural",
    BuildingLocation.INDUSTRIAL: "Industrial estate",
}

MATERIAL_LABELS: dict[MaterialClass, str] = {
    MaterialClass.A1: "A1",
    MaterialClass.A2: "A2-s1,d0",
    MaterialClass.B: "B-s1,d0",
    MaterialClass.C: "C-s2,d1",
    MaterialClass.D: "D-s3,d2",
}

SYSTEM_LABELS: dict[ProtectionSystem, str] = {
    ProtectionSystem.EXTINGUISHERS: "Portable extinguishers",
    ProtectionSystem.FIRE_HOSE_REELS: "Equipped fire hose reels (BIE)",
    ProtectionSystem.DRY_RISER: "Dry riser",
    ProtectionSystem.FIRE_DETECTION: "Automatic fire detection",
    ProtectionSystem.FIRE_ALARM: "Fire alarm",
    ProtectionSystem.SPRINKLERS: "Automatic sprinklers",
    ProtectionSystem.EMERGENCY_LIGHTING: "Emergency lighting",
    ProtectionSystem.SIGNAGE: "Evacuation signage",
    ProtectionSystem.PUBLIC_ADDRESS: "Public address system",
    ProtectionSystem.SMOKE_CONTROL: "Smoke control and extraction",
}

SECTOR_LOCATION_LABELS: dict[SectorLocation, str] = {
    SectorLocation.ABOVE_GRADE: "Above grade",
    SectorLocation.BASEMENT: "Below grade",
    SectorLocation.ROOF: "Roof",
}

STRUCTURE_LABELS: dict[StructureType, str] = {
    StructureType.CONCRETE: "Reinforced concrete",
    StructureType.STEEL: "Steel",
    StructureType.WOOD: "Timber",
    StructureType.MASONRY: "Masonry",
    StructureType.MIXED: "Mixed structure",
}
