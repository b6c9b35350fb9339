from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherboard.settings")
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("OPENWEATHER_API_URL", "https://weather.test/data/2.5/weather")
os.environ.setdefault("COUNTRIES_API_URL", "https://countries.test/v3.1/all")

django.setup()
