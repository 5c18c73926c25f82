import pytest

from clictx.logger import logger
from clictx.models import Config
from clictx.storage.context_storage import ContextStorage


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep loguru handlers from leaking between tests"""
    yield
    logger.remove()
    logger.disable("clictx")


@pytest.fixture
def storage_dir(tmp_path):
    """A context directory that does not exist yet"""
    return tmp_path / "contexts"


@pytest.fixture
def storage(storage_dir):
    return ContextStorage(storage_dir)


@pytest.fixture
def plain_storage(storage_dir):
    """Storage that never creates symlinks"""
    return ContextStorage(storage_dir, disable_symlinks=True)


@pytest.fixture
def config():
    return Config(b"x=1")
