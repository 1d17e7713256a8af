import os

import pytest

from keydirectory.deriver import KeyDeriver
from keydirectory.encoding import TESTNET
from keydirectory.keyspace import Keyspace


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("KEYDIR_"):
            monkeypatch.delenv(name)


@pytest.fixture
def keyspace() -> Keyspace:
    return Keyspace.create()


@pytest.fixture
def deriver(keyspace) -> KeyDeriver:
    return KeyDeriver(keyspace)


@pytest.fixture
def testnet_deriver(keyspace) -> KeyDeriver:
    return KeyDeriver(keyspace, TESTNET)
