import random
from pathlib import Path

import pytest

from gamegraphics.handler import FormatHandler, Metadata


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def random_bytes():
    '''Return a function generating reproducible random data.'''
    def _random_bytes(length, seed=0xcafe):
        rnd = random.Random(seed)
        return bytes(rnd.randrange(256) for _ in range(length))

    return _random_bytes


@pytest.fixture
def fake_handler():
    '''Return a function building handlers with a fixed identification result,
    each call to identify() is recorded in the "calls" list passed.'''
    def _fake_handler(id, confidence, calls=None):
        class FakeHandler(FormatHandler):

            @classmethod
            def metadata(cls):
                return Metadata(id=id, title=f'Fake format {id}')

            @classmethod
            def identify(cls, content):
                if calls is not None:
                    calls.append(id)
                return confidence

        return FakeHandler

    return _fake_handler
