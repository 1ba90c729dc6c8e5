"""Service test fixtures — UserService wired to in-memory collaborators.

Invariants:
    - Every test gets a fresh InMemoryUserRepository (no shared state)
    - The clock advances one second per reading, so updated_at ordering is strict
"""

import pytest

from user_registry.services.user_mapper import UserMapper
from user_registry.services.user_service import UserService
from tests.fakes import FakePasswordHasher, InMemoryUserRepository, SteppingClock


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return FakePasswordHasher()


@pytest.fixture
def service(repository, hasher):
    return UserService(repository, UserMapper(), hasher, clock=SteppingClock())
