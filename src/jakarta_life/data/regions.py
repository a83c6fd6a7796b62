"""Jakarta administrative regions and their flood-prone districts."""

from __future__ import annotations

from typing import Optional

from ..models.domain import Region, localize

JAKARTA_REGIONS: tuple[Region, ...] = (
    Region(
        id="jakarta-pusat",
        name={"en": "Central Jakarta", "id": "Jakarta Pusat"},
        coordinates=(-6.1864, 106.8347),
        flood_zones=("Tanah Abang", "Gambir", "Menteng", "Kemayoran"),
    ),
    Region(
        id="jakarta-utara",
        name={"en": "North Jakarta", "id": "Jakarta Utara"},
        coordinates=(-6.1219, 106.9042),
        flood_zones=("Penjaringan", "Pademangan", "Tanjung Priok", "Koja", "Cilincing"),
    ),
    Region(
        id="jakarta-barat",
        name={"en": "West Jakarta", "id": "Jakarta Barat"},
        coordinates=(-6.1681, 106.7636),
        flood_zones=("Cengkareng", "Grogol Petamburan", "Kalideres", "Kebon Jeruk"),
    ),
    Region(
        id="jakarta-selatan",
        name={"en": "South Jakarta", "id": "Jakarta Selatan"},
        coordinates=(-6.2615, 106.8106),
        flood_zones=("Kebayoran Lama", "Pesanggrahan", "Cilandak", "Pasar Minggu", "Jagakarsa"),
    ),
    Region(
        id="jakarta-timur",
        name={"en": "East Jakarta", "id": "Jakarta Timur"},
        coordinates=(-6.2250, 106.9004),
        flood_zones=("Cakung", "Jatinegara", "Duren Sawit", "Matraman", "Pulo Gadung"),
    ),
    Region(
        id="bekasi",
        name={"en": "Bekasi", "id": "Bekasi"},
        coordinates=(-6.2348, 106.9945),
        flood_zones=("Bekasi Utara", "Bekasi Timur", "Rawalumbu"),
    ),
    Region(
        id="tangerang",
        name={"en": "Tangerang", "id": "Tangerang"},
        coordinates=(-6.1783, 106.6319),
        flood_zones=("Cipondoh", "Karawaci", "Cibodas"),
    ),
    Region(
        id="depok",
        name={"en": "Depok", "id": "Depok"},
        coordinates=(-6.4025, 106.7942),
        flood_zones=("Cimanggis", "Sukmajaya", "Beji"),
    ),
)


def get_region_by_id(region_id: str) -> Optional[Region]:
    return next((region for region in JAKARTA_REGIONS if region.id == region_id), None)


def get_region_name(region: Region, language: str) -> str:
    return localize(region.name, language)
