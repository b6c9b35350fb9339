from __future__ import annotations

from typing import Dict, List

import pytest

from weatherboard.core.abstractions import Country, Temperature, WeatherSnapshot
from weatherboard.core.errors import UpstreamError
from weatherboard.dashboard.state import DashboardController, DashboardState

GERMANY = Country(name="Germany", capital="Berlin", code="DE")
FRANCE = Country(name="France", capital="Paris", code="FR")

BERLIN = WeatherSnapshot(temperature=Temperature(min=10, max=15), humidity=60, pressure=1012, wind_speed=3.5)
PARIS = WeatherSnapshot(temperature=Temperature(min=12, max=19), humidity=55, pressure=1016, wind_speed=2.1)


class FakeBackend:
    def __init__(self) -> None:
        self.countries: List[Country] = [GERMANY, FRANCE]
        self.snapshots: Dict[str, WeatherSnapshot] = {"Berlin": BERLIN, "Paris": PARIS}
        self.fail_countries = False
        self.fail_weather = False
        self.calls: List[tuple] = []

    def list_countries(self) -> List[Country]:
        self.calls.append(("countries",))
        if self.fail_countries:
            raise UpstreamError("Failed to fetch countries: Bad Gateway")
        return list(self.countries)

    def fetch_weather(self, capital: str) -> WeatherSnapshot:
        self.calls.append(("weather", capital))
        if self.fail_weather:
            raise UpstreamError(f'Failed to fetch weather data for "{capital}"', expose=False)
        return self.snapshots[capital]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def mounted(backend: FakeBackend) -> DashboardController:
    controller = DashboardController(backend)
    controller.mount()
    return controller


def test_mount_loads_countries_then_default_weather(mounted: DashboardController, backend: FakeBackend) -> None:
    state = mounted.state

    assert state.countries == [GERMANY, FRANCE]
    assert state.selected_code == "DE"
    assert state.snapshot == BERLIN
    assert state.loading is False
    assert state.error_message is None
    assert backend.calls == [("countries",), ("weather", "Berlin")]


def test_mount_with_requested_country(backend: FakeBackend) -> None:
    controller = DashboardController(backend)

    controller.mount("FR")

    assert controller.state.selected_code == "FR"
    assert controller.state.snapshot == PARIS
    assert backend.calls == [("countries",), ("weather", "Paris")]


def test_mount_country_failure_leaves_empty_list(backend: FakeBackend) -> None:
    backend.fail_countries = True
    controller = DashboardController(backend)

    controller.mount()

    assert controller.state.countries == []
    assert controller.state.error_message == "Failed to load countries. Please try again later."
    assert controller.state.snapshot is None
    assert ("weather", "Berlin") not in backend.calls


def test_select_country_fetches_its_capital(mounted: DashboardController, backend: FakeBackend) -> None:
    assert mounted.select_country("FR") is True

    assert mounted.state.snapshot == PARIS
    assert backend.calls[-1] == ("weather", "Paris")


def test_unknown_country_is_rejected(mounted: DashboardController, backend: FakeBackend) -> None:
    calls = len(backend.calls)

    assert mounted.select_country("ZZ") is False

    assert mounted.state.selected_code == "DE"
    assert mounted.state.selected_country() == GERMANY
    assert mounted.state.snapshot == BERLIN
    assert len(backend.calls) == calls


def test_mount_with_unknown_country_falls_back_to_default(backend: FakeBackend) -> None:
    controller = DashboardController(backend)

    controller.mount("ZZ")

    assert controller.state.selected_code == "DE"
    assert controller.state.snapshot == BERLIN


def test_weather_failure_clears_snapshot(mounted: DashboardController, backend: FakeBackend) -> None:
    backend.fail_weather = True

    mounted.select_country("FR")

    assert mounted.state.snapshot is None
    assert mounted.state.loading is False
    assert mounted.state.error_message == "Failed to load weather data. Please refresh or try again later."


def test_loading_flag_is_set_while_fetching(backend: FakeBackend) -> None:
    controller = DashboardController(backend)
    controller.load_countries()
    seen = []
    original = backend.fetch_weather

    def spy(capital: str) -> WeatherSnapshot:
        seen.append(controller.state.loading)
        return original(capital)

    backend.fetch_weather = spy  # type: ignore[assignment]
    controller.load_weather()

    assert seen == [True]
    assert controller.state.loading is False


def test_weather_without_resolved_country_drops_snapshot(backend: FakeBackend) -> None:
    state = DashboardState(snapshot=BERLIN)
    controller = DashboardController(backend, state)

    controller.load_weather()

    assert state.snapshot is None
    assert backend.calls == []
