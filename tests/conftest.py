import sys
import os
from datetime import datetime

import pytest
from faker import Faker

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.exceptions import RandomSourceError
from utils.ids import IdGenerator
from utils.password import PasswordHasher


FIXED_NOW = datetime(2026, 10, 17, 9, 30, 5)


class FailingRandomSource:
    """항상 실패하는 난수 소스 (OS 난수 소스 장애 시뮬레이션)."""

    def __init__(self):
        self.calls = 0

    def read(self, n: int) -> bytes:
        self.calls += 1
        raise RandomSourceError("random source unavailable")


class ShortRandomSource:
    """요청보다 적은 바이트를 반환하는 난수 소스."""

    def read(self, n: int) -> bytes:
        return bytes(n - 1)


class FixedRandomSource:
    """미리 정한 바이트 패턴을 반복해서 반환하는 난수 소스."""

    def __init__(self, pattern: bytes):
        self.pattern = pattern

    def read(self, n: int) -> bytes:
        repeated = self.pattern * (n // len(self.pattern) + 1)
        return repeated[:n]


@pytest.fixture
def fake():
    return Faker("id_ID")


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def generator(fixed_clock):
    """시계가 고정된 실제 보안 난수 생성기."""
    return IdGenerator(clock=fixed_clock)


@pytest.fixture
def failing_source():
    return FailingRandomSource()


@pytest.fixture
def failing_generator(failing_source, fixed_clock):
    return IdGenerator(random_source=failing_source, clock=fixed_clock)


@pytest.fixture
def hasher():
    """테스트 속도를 위해 최소 cost(4)를 사용하는 해셔."""
    return PasswordHasher(rounds=4)
