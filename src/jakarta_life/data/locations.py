"""Static Jakarta catalog: office anchor, home, saved destinations and weekly pattern.

All coordinates are (latitude, longitude). Edit this module to customize the
office, destinations and the default weekly schedule.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..models.domain import (
    ActivityOption,
    Destination,
    OfficeConfig,
    Scenario,
    WeeklyActivity,
)

OFFICE = OfficeConfig(
    name={"en": "Sinarmas MSIG", "id": "Sinarmas MSIG"},
    full_address=(
        "Sinarmas MSIG Jl. Jenderal Sudirman No.21 Lt.7 Kav, RT.10/RW.1, Kuningan, Karet, "
        "Kecamatan Setiabudi, Kota Jakarta Selatan, Daerah Khusus Ibukota Jakarta 12920, Indonesia"
    ),
    short_address="Sinarmas MSIG, Sudirman",
    coordinates=(-6.210336881136443, 106.82226110946749),
    company_name="Sinarmas MSIG",
    icon="🏢",
)

HOME = Destination(
    id="home",
    name={"en": "Home", "id": "Rumah"},
    short_address="Pondok Indah, South Jakarta",
    full_address="Pondok Indah, Kebayoran Lama, South Jakarta",
    coordinates=(-6.2673, 106.7831),
    icon="🏠",
    category="home",
)


def _destination(
    destination_id: str,
    name_en: str,
    name_id: str,
    short_address: str,
    full_address: str,
    coordinates: tuple[float, float],
    icon: str,
    category: str,
) -> Destination:
    return Destination(
        id=destination_id,
        name={"en": name_en, "id": name_id},
        short_address=short_address,
        full_address=full_address,
        coordinates=coordinates,
        icon=icon,
        category=category,  # type: ignore[arg-type]
    )


SAVED_DESTINATIONS: tuple[Destination, ...] = (
    # Sports
    _destination("futsal-kemang", "Kemang Futsal Arena", "Arena Futsal Kemang", "Kemang, South Jakarta",
                 "Jl. Kemang Raya No. 45, Mampang Prapatan", (-6.2600, 106.8150), "⚽", "sports"),
    _destination("badminton-pi", "Pondok Indah Sports Club", "Pondok Indah Sports Club", "Pondok Indah, South Jakarta",
                 "Jl. Metro Pondok Indah Kav. IV", (-6.2690, 106.7850), "🏸", "sports"),
    _destination("padel-senopati", "Padel Club Senopati", "Padel Club Senopati", "Senopati, South Jakarta",
                 "Jl. Senopati No. 88, Kebayoran Baru", (-6.2290, 106.8050), "🎾", "sports"),
    _destination("gym-scbd", "Fitness First SCBD", "Fitness First SCBD", "SCBD, South Jakarta",
                 "Pacific Place Mall, SCBD Lot 3-5", (-6.2241, 106.8094), "💪", "sports"),
    _destination("golf-senayan", "Senayan Golf Course", "Lapangan Golf Senayan", "Senayan, Central Jakarta",
                 "Jl. Asia Afrika, Senayan", (-6.2191, 106.8028), "⛳", "sports"),
    # Dining
    _destination("dinner-scbd", "Social House SCBD", "Social House SCBD", "SCBD, South Jakarta",
                 "Pacific Place Mall, SCBD", (-6.2180, 106.8210), "🍽️", "dining"),
    _destination("dinner-pik", "PIK Avenue", "PIK Avenue", "PIK, North Jakarta",
                 "Pantai Indah Kapuk, Penjaringan", (-6.1090, 106.7450), "🍜", "dining"),
    _destination("dinner-menteng", "Plataran Menteng", "Plataran Menteng", "Menteng, Central Jakarta",
                 "Jl. HOS Cokroaminoto No. 42, Menteng", (-6.1920, 106.8320), "🍽️", "dining"),
    # Social
    _destination("drinks-sudirman", "Cloud Lounge & Living Room", "Cloud Lounge", "Sudirman, Central Jakarta",
                 "The Plaza Office Tower, Jl. MH Thamrin", (-6.1950, 106.8230), "🍸", "social"),
    _destination("coffee-menteng", "Tanamera Coffee", "Tanamera Coffee", "Menteng, Central Jakarta",
                 "Jl. Cikini Raya No. 60, Menteng", (-6.1920, 106.8420), "☕", "social"),
    _destination("bar-senopati", "Cork & Screw", "Cork & Screw", "Senopati, South Jakarta",
                 "Jl. Senopati No. 39, Kebayoran Baru", (-6.2275, 106.8065), "🍷", "social"),
    # Shopping and entertainment
    _destination("mall-gi", "Grand Indonesia", "Grand Indonesia", "Thamrin, Central Jakarta",
                 "Jl. MH Thamrin No.1", (-6.1954, 106.8203), "🛍️", "other"),
    _destination("movies-pi", "Pondok Indah Mall XXI", "Pondok Indah Mall XXI", "Pondok Indah, South Jakarta",
                 "Pondok Indah Mall 2", (-6.2650, 106.7830), "🎬", "other"),
    # Family
    _destination("parents-house", "Parents' House", "Rumah Orang Tua", "Menteng, Central Jakarta",
                 "Jl. Teuku Cik Ditiro, Menteng", (-6.1980, 106.8350), "👨‍👩‍👧", "family"),
    # Religious
    _destination("mosque-istiqlal", "Istiqlal Mosque", "Masjid Istiqlal", "Central Jakarta",
                 "Jl. Taman Wijaya Kusuma, Pasar Baru", (-6.1702, 106.8311), "🕌", "other"),
)

DEFAULT_WEEKLY_PATTERN: tuple[WeeklyActivity, ...] = (
    WeeklyActivity(
        id="monday-padel",
        day_of_week=1,
        destination_id="padel-senopati",
        activity_name={"en": "Padel", "id": "Padel"},
        scheduled_time="19:00",
        notes={
            "en": "Weekly game with colleagues at Senopati",
            "id": "Permainan mingguan dengan rekan kerja di Senopati",
        },
    ),
    WeeklyActivity(
        id="tuesday-dinner",
        day_of_week=2,
        destination_id="dinner-scbd",
        activity_name={"en": "Dinner at SCBD", "id": "Makan Malam di SCBD"},
        scheduled_time="19:30",
        notes={
            "en": "Dinner with friends at Social House",
            "id": "Makan malam dengan teman di Social House",
        },
    ),
    WeeklyActivity(
        id="wednesday-home",
        day_of_week=3,
        destination_id="home",
        activity_name={"en": "Straight Home", "id": "Langsung Pulang"},
        scheduled_time="18:00",
        notes={"en": "Early home for family time", "id": "Pulang awal untuk waktu keluarga"},
    ),
    WeeklyActivity(
        id="thursday-badminton",
        day_of_week=4,
        destination_id="badminton-pi",
        activity_name={"en": "Badminton", "id": "Badminton"},
        scheduled_time="18:30",
        notes={
            "en": "Weekly doubles at Pondok Indah Sports Club",
            "id": "Permainan ganda mingguan di Pondok Indah Sports Club",
        },
    ),
    WeeklyActivity(
        id="friday-drinks",
        day_of_week=5,
        destination_id="drinks-sudirman",
        activity_name={"en": "Friday Drinks", "id": "Hangout Jumat"},
        scheduled_time="20:00",
        notes={"en": "End of week drinks at Cloud Lounge", "id": "Minuman akhir pekan di Cloud Lounge"},
    ),
)

DEFAULT_ACTIVITY = WeeklyActivity(
    id="default-home",
    day_of_week=0,
    destination_id="home",
    activity_name={"en": "Go Home", "id": "Pulang ke Rumah"},
    scheduled_time="18:00",
)

SCENARIOS: Mapping[str, Scenario] = MappingProxyType(
    {
        "normal": Scenario(
            id="normal",
            name={"en": "Normal Day", "id": "Hari Normal"},
            icon="☀️",
            description={"en": "Typical Jakarta conditions", "id": "Kondisi Jakarta biasa"},
            flood_multiplier=1.0,
            traffic_multiplier=1.0,
        ),
        "heavy-rain": Scenario(
            id="heavy-rain",
            name={"en": "Heavy Rain Day", "id": "Hari Hujan Lebat"},
            icon="🌧️",
            description={
                "en": "Flooding in low-lying areas, traffic delays",
                "id": "Banjir di daerah rendah, penundaan lalu lintas",
            },
            flood_multiplier=2.5,
            traffic_multiplier=1.8,
        ),
    }
)

# category -> language -> pool
MOTIVATIONAL_MESSAGES: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "earlyDeparture": MappingProxyType(
            {
                "en": (
                    "Beat the rush! Leave now and arrive stress-free 🏃",
                    "Smart move - you'll thank yourself later ✨",
                    "Early bird gets the parking spot! 🅿️",
                ),
                "id": (
                    "Hindari macet! Berangkat sekarang dan tiba tanpa stres 🏃",
                    "Langkah cerdas - Anda akan berterima kasih nanti ✨",
                    "Yang awal dapat tempat parkir! 🅿️",
                ),
            }
        ),
        "optimalTime": MappingProxyType(
            {
                "en": (
                    "Perfect timing! Roads are clearing up 🛣️",
                    "This is your window - traffic is light 🟢",
                    "Ideal departure - smooth sailing ahead ⛵",
                ),
                "id": (
                    "Waktu sempurna! Jalanan mulai lengang 🛣️",
                    "Ini kesempatan Anda - lalu lintas lancar 🟢",
                    "Keberangkatan ideal - perjalanan mulus ⛵",
                ),
            }
        ),
        "floodWarning": MappingProxyType(
            {
                "en": (
                    "Heads up! Flooding reported on your route 🌊",
                    "Take the alternate route to stay dry 🚗",
                    "Water on the roads - we've got a safer path 🗺️",
                ),
                "id": (
                    "Perhatian! Banjir dilaporkan di rute Anda 🌊",
                    "Ambil rute alternatif agar tetap kering 🚗",
                    "Air di jalan - kami punya jalur yang lebih aman 🗺️",
                ),
            }
        ),
        "weekendVibes": MappingProxyType(
            {
                "en": (
                    "Friday calls! Time to celebrate the week 🎉",
                    "You've earned this - enjoy your evening! 🌟",
                    "Weekend mode: activated 🎊",
                ),
                "id": (
                    "Jumat memanggil! Saatnya merayakan minggu ini 🎉",
                    "Anda pantas mendapatkan ini - nikmati malam Anda! 🌟",
                    "Mode akhir pekan: diaktifkan 🎊",
                ),
            }
        ),
        "sportsTime": MappingProxyType(
            {
                "en": (
                    "Game time! Get there fresh, not stressed 🎾",
                    "Your court is waiting - leave now! 🏸",
                    "Champions arrive on time ⏰",
                ),
                "id": (
                    "Waktunya main! Tiba dengan segar, bukan stres 🎾",
                    "Lapangan Anda menunggu - berangkat sekarang! 🏸",
                    "Juara tiba tepat waktu ⏰",
                ),
            }
        ),
    }
)

DAY_NAMES: tuple[dict[str, str], ...] = (
    {"en": "Sunday", "id": "Minggu"},
    {"en": "Monday", "id": "Senin"},
    {"en": "Tuesday", "id": "Selasa"},
    {"en": "Wednesday", "id": "Rabu"},
    {"en": "Thursday", "id": "Kamis"},
    {"en": "Friday", "id": "Jumat"},
    {"en": "Saturday", "id": "Sabtu"},
)


def _option(
    activity_type: str,
    name_en: str,
    name_id: str,
    icon: str,
    category: str,
    destination_id: str,
    location_en: str,
    location_id: str,
) -> ActivityOption:
    return ActivityOption(
        type=activity_type,
        name={"en": name_en, "id": name_id},
        icon=icon,
        category=category,  # type: ignore[arg-type]
        destination_id=destination_id,
        location_name={"en": location_en, "id": location_id},
    )


ACTIVITY_OPTIONS: tuple[ActivityOption, ...] = (
    _option("home", "Home", "Pulang ke Rumah", "🏠", "home", "home", "Pondok Indah", "Pondok Indah"),
    _option("futsal", "Futsal", "Futsal", "⚽", "sports", "futsal-kemang", "Kemang Futsal Arena", "Arena Futsal Kemang"),
    _option("badminton", "Badminton", "Badminton", "🏸", "sports", "badminton-pi",
            "Pondok Indah Sports Club", "Pondok Indah Sports Club"),
    _option("tennis", "Tennis", "Tenis", "🎾", "sports", "padel-senopati", "Senopati Club", "Senopati Club"),
    _option("padel", "Padel", "Padel", "🏓", "sports", "padel-senopati", "Padel Club Senopati", "Padel Club Senopati"),
    _option("gym", "Gym/Fitness", "Gym/Fitness", "💪", "sports", "gym-scbd", "Fitness First SCBD", "Fitness First SCBD"),
    _option("swimming", "Swimming", "Berenang", "🏊", "sports", "badminton-pi",
            "Pondok Indah Sports Club", "Pondok Indah Sports Club"),
    _option("golf", "Golf/Driving Range", "Golf/Driving Range", "⛳", "sports", "golf-senayan",
            "Senayan Golf Course", "Lapangan Golf Senayan"),
    _option("dinner", "Dinner", "Makan Malam", "🍽️", "dining", "dinner-scbd", "Social House SCBD", "Social House SCBD"),
    _option("drinks", "Drinks/Bar", "Minuman/Bar", "🍸", "social", "drinks-sudirman",
            "Cloud Lounge Sudirman", "Cloud Lounge Sudirman"),
    _option("coffee", "Coffee Meetup", "Ngopi", "☕", "social", "coffee-menteng",
            "Tanamera Coffee Menteng", "Tanamera Coffee Menteng"),
    _option("shopping", "Shopping", "Belanja", "🛍️", "other", "mall-gi", "Grand Indonesia", "Grand Indonesia"),
    _option("movies", "Movies", "Bioskop", "🎬", "other", "movies-pi", "Pondok Indah Mall XXI", "Pondok Indah Mall XXI"),
    _option("family", "Family Visit", "Kunjungan Keluarga", "👨‍👩‍👧", "family", "parents-house",
            "Parents' House Menteng", "Rumah Orang Tua Menteng"),
    _option("religious", "Religious", "Keagamaan", "🕌", "other", "mosque-istiqlal", "Istiqlal Mosque", "Masjid Istiqlal"),
    _option("other", "Other", "Lainnya", "📍", "other", "home", "Custom Location", "Lokasi Lainnya"),
)


def get_destination_by_id(destination_id: str) -> Optional[Destination]:
    if destination_id == HOME.id:
        return HOME
    return next((dest for dest in SAVED_DESTINATIONS if dest.id == destination_id), None)


def get_all_destinations() -> tuple[Destination, ...]:
    return (HOME, *SAVED_DESTINATIONS)


def get_activity_for_day(
    day_of_week: int,
    pattern: tuple[WeeklyActivity, ...] = DEFAULT_WEEKLY_PATTERN,
) -> Optional[WeeklyActivity]:
    return next((activity for activity in pattern if activity.day_of_week == day_of_week), None)
