"""Unit tests for the in-memory collaborators: locations, routes, clients."""

import math

import pytest

from cabbooking.domain.cards import is_valid_card_format, mask_card_number, normalize_card_number
from cabbooking.domain.entities import Client, Location, Route
from cabbooking.domain.errors import (
    ClientNotFoundError,
    InvalidClientError,
    LocationInvalidError,
    LocationNotFoundError,
    RouteInvalidError,
)
from cabbooking.domain.ports import ClientDirectory, RouteProvider
from cabbooking.services.clients import InMemoryClientDirectory
from cabbooking.services.locations import WASHINGTON_DC_LOCATIONS, LocationService
from cabbooking.services.routes import RouteService

from tests.conftest import CAPITOL, WHITE_HOUSE


class TestLocationService:
    def setup_method(self):
        self.service = LocationService()
        self.service.initialize_washington_dc_locations()

    def test_catalog_seeded(self):
        assert len(self.service.available_locations()) == len(WASHINGTON_DC_LOCATIONS)

    def test_reinitialising_does_not_duplicate(self):
        self.service.initialize_washington_dc_locations()
        assert len(self.service.available_locations()) == len(WASHINGTON_DC_LOCATIONS)

    def test_find_by_name(self):
        found = self.service.find_location_by_name("Union Station")
        assert found == Location.at(38.8973, -77.0063, name="Union Station")

    @pytest.mark.parametrize("name", [None, "", "  ", "Atlantis"])
    def test_find_missing_returns_none(self, name):
        assert self.service.find_location_by_name(name) is None

    def test_get_missing_raises(self):
        with pytest.raises(LocationNotFoundError):
            self.service.get_location("Atlantis")

    def test_create_location(self):
        created = self.service.create_location("Nationals Park", 38.8730, -77.0074)
        assert self.service.get_location("Nationals Park") == created

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_create_requires_name(self, name):
        with pytest.raises(LocationInvalidError, match="name cannot be null or empty"):
            self.service.create_location(name, 38.0, -77.0)

    @pytest.mark.parametrize(
        "lat, lng, message",
        [
            (91.0, 0.0, "Latitude must be between -90 and 90"),
            (-90.5, 0.0, "Latitude must be between -90 and 90"),
            (0.0, 180.1, "Longitude must be between -180 and 180"),
            (math.nan, 0.0, "cannot be NaN"),
            (0.0, math.inf, "cannot be infinite"),
        ],
    )
    def test_create_rejects_bad_coordinates(self, lat, lng, message):
        with pytest.raises(LocationInvalidError, match=message):
            self.service.create_location("Nowhere", lat, lng)

    def test_boundary_coordinates_allowed(self):
        self.service.create_location("North Pole", 90.0, 180.0)

    def test_update_location(self):
        updated = self.service.update_location("Union Station", "Union Station (Main Hall)", 38.8975, -77.0060)
        assert self.service.find_location_by_name("Union Station") is None
        assert self.service.get_location("Union Station (Main Hall)") == updated

    def test_update_unknown_location(self):
        with pytest.raises(LocationNotFoundError):
            self.service.update_location("Atlantis", "Atlantis", 0.0, 0.0)


class TestRouteService:
    def setup_method(self):
        self.service = RouteService()

    def test_is_a_route_provider(self):
        assert isinstance(self.service, RouteProvider)

    def test_create_route_computes_miles(self):
        route = self.service.create_route(WHITE_HOUSE, CAPITOL)
        assert 1.4 < route.distance < 1.7
        assert route.origin == WHITE_HOUSE
        assert route.destination == CAPITOL

    def test_zero_distance_route_is_legal(self):
        assert self.service.create_route(WHITE_HOUSE, WHITE_HOUSE).distance == 0.0

    def test_create_route_requires_endpoints(self):
        with pytest.raises(RouteInvalidError):
            self.service.create_route(WHITE_HOUSE, None)

    def test_accessors(self):
        route = Route(origin=WHITE_HOUSE, destination=CAPITOL, distance=2.0)
        assert self.service.location_from(route) is WHITE_HOUSE
        assert self.service.location_to(route) is CAPITOL
        assert self.service.route_distance(route) == 2.0

    def test_missing_endpoint_raises(self):
        with pytest.raises(RouteInvalidError):
            self.service.location_to(Route(origin=WHITE_HOUSE))

    @pytest.mark.parametrize("distance", [-1.0, math.nan, math.inf])
    def test_bad_distance_raises(self, distance):
        with pytest.raises(RouteInvalidError):
            self.service.route_distance(Route(WHITE_HOUSE, CAPITOL, distance))


class TestClientDirectory:
    def setup_method(self):
        self.directory = InMemoryClientDirectory()

    def _add_john(self) -> Client:
        return self.directory.add(
            name="John Doe", email="john@example.com", credit_card="4111-1111-1111-1111"
        )

    def test_is_a_client_directory(self):
        assert isinstance(self.directory, ClientDirectory)

    def test_ids_start_at_one(self):
        assert self._add_john().id == 1
        assert self.directory.add(name="Jane", email="jane@example.com").id == 2

    def test_find_by_id(self):
        john = self._add_john()
        assert self.directory.find_by_id(john.id) == john

    @pytest.mark.parametrize("client_id", [0, -1, 42])
    def test_find_missing(self, client_id):
        assert self.directory.find_by_id(client_id) is None

    def test_returned_clients_are_copies(self):
        john = self._add_john()
        john.name = "Changed"
        assert self.directory.find_by_id(john.id).name == "John Doe"

    @pytest.mark.parametrize("name, email", [("", "a@b.c"), ("Ann", " ")])
    def test_add_requires_name_and_email(self, name, email):
        with pytest.raises(InvalidClientError):
            self.directory.add(name=name, email=email)

    def test_update(self):
        john = self._add_john()
        john.phone = "555-0199"
        self.directory.update(john)
        assert self.directory.find_by_id(john.id).phone == "555-0199"

    def test_update_unknown(self):
        with pytest.raises(ClientNotFoundError):
            self.directory.update(Client(id=9, name="Ghost", email="ghost@example.com"))

    def test_delete(self):
        john = self._add_john()
        self.directory.delete(john.id)
        assert self.directory.find_all() == []
        with pytest.raises(ClientNotFoundError):
            self.directory.delete(john.id)


class TestCards:
    def test_normalize(self):
        assert normalize_card_number("4111 1111-1111 1111") == "4111111111111111"

    @pytest.mark.parametrize(
        "card, ok",
        [
            ("4111-1111-1111-1111", True),
            ("4222222222222", True),  # 13 digits
            ("4" * 19, True),
            ("4" * 12, False),
            ("4" * 20, False),
            ("4111-1111-1111-111x", False),
            (None, False),
            ("", False),
        ],
    )
    def test_format(self, card, ok):
        assert is_valid_card_format(card) is ok

    @pytest.mark.parametrize(
        "card, masked",
        [("4111-1111-1111-1234", "****1234"), ("12", "****"), (None, "****")],
    )
    def test_mask(self, card, masked):
        assert mask_card_number(card) == masked
