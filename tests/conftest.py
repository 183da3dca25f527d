"""Shared test fixtures."""
import pytest

from numeric_entry.models.formatting import FormattingConfig
from numeric_entry.pipeline import NumericPipeline
from numeric_entry.utils.regex_cache import clear_pattern_cache
from tests.factories import make_config, make_european_config


@pytest.fixture
def default_config():
    return FormattingConfig()


@pytest.fixture
def change_config():
    """Western grouping applied on every keystroke."""
    return make_config()


@pytest.fixture
def european_config():
    return make_european_config()


@pytest.fixture
def change_pipeline(change_config):
    return NumericPipeline(change_config)


@pytest.fixture
def fresh_pattern_cache():
    clear_pattern_cache()
    yield
    clear_pattern_cache()
