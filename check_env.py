#!/usr/bin/env python3
"""Check provider API keys and write a template .env when none exists."""

import sys
from pathlib import Path

TEMPLATE = """# Google Maps (Directions + Places). Leave as-is to use straight-line fallbacks.
JKT_GOOGLE_MAPS_API_KEY=your_key_here

# WeatherAPI.com. Leave as-is to use mock weather.
JKT_WEATHER_API_KEY=your_key_here

# API Configuration
JKT_API_PREFIX=/api
# JSON array or comma-separated: http://localhost:3000,http://127.0.0.1:3000
# JKT_FRONTEND_ALLOWED_ORIGINS=
"""


def _mask(value: str) -> str:
    return value[:6] + "..." + value[-4:] if len(value) > 12 else "***"


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"Created template .env at {env_file}; add your API keys and restart the backend.")
        return 1

    sys.path.insert(0, str(project_root / "src"))
    from jakarta_life.config import settings

    ok = True
    for label, key, configured in (
        ("JKT_GOOGLE_MAPS_API_KEY", settings.google_maps_api_key, settings.google_maps_configured),
        ("JKT_WEATHER_API_KEY", settings.weather_api_key, settings.weather_api_configured),
    ):
        if configured:
            print(f"✅ {label}: {_mask(key)}")
        else:
            print(f"❌ {label} is missing or still a placeholder")
            ok = False
    if not ok:
        print("Unconfigured providers fall back to mock or straight-line data.")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
