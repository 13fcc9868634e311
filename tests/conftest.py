import pytest

from clove.types.environment import Environment
from clove.reader.parser import read, read_all
from clove.session import Session

# Every test gets a fresh Environment, so symbol ids never leak between tests.
# `parse` reads the first form of a source string and `parse_many` reads all
# of them, both interning through that environment; comparing two parsed
# trees in one test therefore compares symbols from the same table.


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def parse(env):
    return lambda source: read(source, env)


@pytest.fixture
def parse_many(env):
    return lambda source: read_all(source, env)


@pytest.fixture
def session():
    return Session()
