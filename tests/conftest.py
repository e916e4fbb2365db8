"""
テスト共通フィクスチャ
"""

import random

import pytest

from src.netcount.models import NameRecord


@pytest.fixture
def peter_andrew() -> list[NameRecord]:
    """2名だけのデータ（2名グループの合計は常に153）"""
    return [NameRecord("Andrew", 50), NameRecord("Peter", 103)]


@pytest.fixture
def small_records() -> list[NameRecord]:
    """出現回数の異なる4名のデータ"""
    return [
        NameRecord("A", 1),
        NameRecord("B", 2),
        NameRecord("C", 3),
        NameRecord("D", 4),
    ]


@pytest.fixture
def rng() -> random.Random:
    """シード固定の乱数生成器"""
    return random.Random(12345)
