import pytest

from fakes import FakeClock, ManualScheduler, make_store


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return ManualScheduler(clock)


@pytest.fixture
def store():
    db, state_store = make_store()
    yield state_store
    db.close()
