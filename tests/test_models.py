"""
Tests for the domain models and their row mapping.
"""

from decimal import Decimal

import pytest

from models.property import Property
from models.result import QueryResult, QueryStatus
from models.search import PropertySearchOptions
from models.user import User
from tests.conftest import property_row


class TestProperty:

    def test_price_per_night_in_whole_units(self, sample_property):
        assert sample_property.price_per_night == pytest.approx(930.61)

    def test_from_dict_ignores_unknown_columns(self):
        prop = Property.from_dict(property_row(guest_id=3, extra="x"))
        assert prop.id == 1
        assert not hasattr(prop, "extra")

    def test_average_rating_decimal_is_converted(self):
        prop = Property.from_dict(property_row(average_rating=Decimal("4.5000000000000000")))
        assert prop.average_rating == 4.5
        assert isinstance(prop.average_rating, float)

    def test_str(self):
        text = str(Property.from_dict(property_row()))
        assert "Speed lamp" in text
        assert "930.61" in text


class TestUser:

    def test_from_dict(self):
        user = User.from_dict({"id": 5, "name": "Ana", "email": "ana@example.com", "password": "h"})
        assert user.id == 5
        assert str(user) == "#5 Ana <ana@example.com>"

    def test_missing_field(self):
        with pytest.raises(KeyError):
            User.from_dict({"name": "Ana"})


class TestPropertySearchOptions:

    def test_empty_by_default(self):
        assert PropertySearchOptions().is_empty()
        assert PropertySearchOptions.from_dict(None).is_empty()
        assert PropertySearchOptions.from_dict({}).is_empty()

    def test_blank_strings_are_empty(self):
        assert PropertySearchOptions(city="", minimum_rating="").is_empty()

    def test_zero_is_a_value(self):
        assert not PropertySearchOptions(minimum_rating=0).is_empty()

    def test_unknown_keys_are_ignored(self):
        options = PropertySearchOptions.from_dict({"owner_id": 4, "city": "Banff"})
        assert options == PropertySearchOptions(city="Banff")

    def test_only_unknown_keys_is_empty(self):
        assert PropertySearchOptions.from_dict({"owner_id": 4}).is_empty()


class TestQueryResult:

    def test_found(self):
        result = QueryResult.found([1])
        assert result.status is QueryStatus.FOUND
        assert result.unwrap() == [1]

    def test_not_found_unwraps_to_none(self):
        assert QueryResult.not_found().unwrap() is None

    def test_failed(self):
        error = RuntimeError("boom")
        result = QueryResult.failed(error)
        assert not result.ok
        with pytest.raises(RuntimeError):
            result.unwrap()
