"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures for the controller and its
collaborators, and configures Hypothesis profiles for the test suite.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import Verbosity, settings

from address_lookup import AddressLookupController, InMemoryRecordStore, WidgetConfig
from tests.fakes import RECORD_ID, FakeLookupService

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def service() -> FakeLookupService:
    return FakeLookupService()


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore(
        {
            RECORD_ID: {
                "BillingPostalCode": "EC1A 1BB",
                "BillingStreet": "1 Old Street",
                "BillingCity": "London",
                "Name": "Acme",
            }
        }
    )


@pytest.fixture
def config() -> WidgetConfig:
    return WidgetConfig(
        object_type="Account",
        record_id=RECORD_ID,
        title="Billing Address",
        postcode_field="BillingPostalCode",
        street_field="BillingStreet",
        city_field="BillingCity",
        county_field="BillingState",
        country_field="BillingCountry",
    )


@pytest.fixture
def make_controller(
    config: WidgetConfig, service: FakeLookupService, store: InMemoryRecordStore
) -> Callable[..., AddressLookupController]:
    def factory(**overrides: Any) -> AddressLookupController:
        widget_config = config.model_copy(update=overrides) if overrides else config
        return AddressLookupController(widget_config, service, store)

    return factory


@pytest.fixture
def controller(
    make_controller: Callable[..., AddressLookupController],
) -> AddressLookupController:
    return make_controller()

