import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from storefront.domain import storefront

    storefront.init()
    storefront.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from storefront.notifications import reset_mailer
    from storefront.payments import reset_gateway
    from storefront.storage import reset_blob_store

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    # Drop adapters swapped in by tests
    reset_gateway()
    reset_mailer()
    reset_blob_store()


# ---------------------------------------------------------------------------
# Fake adapters
# ---------------------------------------------------------------------------
@pytest.fixture
def fake_gateway():
    from storefront.payments import set_gateway
    from storefront.payments.fake_adapter import FakeGateway

    gateway = FakeGateway()
    set_gateway(gateway)
    return gateway


@pytest.fixture
def fake_mailer():
    from storefront.notifications import set_mailer
    from storefront.notifications.fake_email import FakeMailer

    mailer = FakeMailer()
    set_mailer(mailer)
    return mailer


@pytest.fixture
def fake_blob_store():
    from storefront.storage import set_blob_store
    from storefront.storage.fake_adapter import FakeBlobStore

    store = FakeBlobStore()
    set_blob_store(store)
    return store


# ---------------------------------------------------------------------------
# Registered users
# ---------------------------------------------------------------------------
@pytest.fixture
def seller():
    from storefront.account.registration import register_user

    return register_user(name="Sam Seller", email="seller@example.com", password="secret1")


@pytest.fixture
def buyer():
    from storefront.account.registration import register_user

    return register_user(name="Bea Buyer", email="buyer@example.com", password="secret1")
