import random

import pytest

from videostore.config import load_config
from videostore.models import Customer, Movie
from videostore.pricing import PriceCategory


@pytest.fixture(autouse=True)
def deterministic_seed():
    random.seed(1337)


@pytest.fixture(autouse=True)
def clear_videostore_env(monkeypatch):
    for key in ["VIDEOSTORE_DEFAULT_FORMAT", "VIDEOSTORE_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def customer():
    return Customer("Curly")


@pytest.fixture
def movies():
    return {
        "regular": Movie("Casablanca", PriceCategory.REGULAR),
        "new_release": Movie("Dune: Part Two", PriceCategory.NEW_RELEASE),
        "children": Movie("Paddington", PriceCategory.CHILDREN),
    }
