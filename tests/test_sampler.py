"""
テスト - ランダムグループ抽選
"""

import random
from collections import Counter

import pytest

from src.netcount.errors import InvalidRangeError, PoolExhaustionError
from src.netcount.pool import build_pool
from src.netcount.sampler import draw_group, shuffle, validate_range


class TestShuffle:
    """shuffle() のテスト"""

    def test_returns_same_list(self, rng):
        """インプレースで並べ替え、同じリストを返すこと"""
        items = list(range(10))
        assert shuffle(items, rng) is items

    def test_is_permutation(self, rng):
        """要素が失われたり増えたりしないこと"""
        items = ["a", "b", "b", "c", "d", "d", "d"]
        result = shuffle(list(items), rng)
        assert sorted(result) == sorted(items)

    def test_empty_and_single(self, rng):
        assert shuffle([], rng) == []
        assert shuffle(["x"], rng) == ["x"]

    def test_uniform_positions(self, rng):
        """各要素の最終位置がほぼ一様に分布すること"""
        runs = 4000
        positions = Counter()
        for _ in range(runs):
            items = shuffle([0, 1, 2, 3], rng)
            positions[items.index(0)] += 1

        # 期待値は各位置 1000 回
        for pos in range(4):
            assert 800 < positions[pos] < 1200, f"位置{pos}: {positions[pos]}回"

    def test_default_rng(self):
        """乱数生成器を省略しても動作すること"""
        items = list(range(5))
        assert sorted(shuffle(items)) == list(range(5))


class TestValidateRange:
    """validate_range() のテスト"""

    def test_valid(self):
        validate_range(2, 2)
        validate_range(2, 7)

    def test_min_below_two(self):
        with pytest.raises(InvalidRangeError, match="最小グループサイズ"):
            validate_range(1, 5)

    def test_max_below_two(self):
        with pytest.raises(InvalidRangeError, match="最大グループサイズは"):
            validate_range(2, 1)

    def test_max_less_than_min(self):
        with pytest.raises(InvalidRangeError, match="最小より小さい"):
            validate_range(5, 3)


class TestDrawGroup:
    """draw_group() のテスト"""

    def test_size_in_range(self, small_records, rng):
        """グループサイズが範囲内であること"""
        pool = build_pool(small_records)
        for _ in range(200):
            group = draw_group(pool, 2, 4, rng)
            assert 2 <= len(group) <= 4

    def test_no_duplicates(self, small_records, rng):
        """出現回数の多い名前でもグループ内で重複しないこと"""
        pool = build_pool(small_records)
        for _ in range(200):
            group = draw_group(pool, 2, 4, rng)
            assert len(set(group)) == len(group), f"重複あり: {group}"

    def test_names_from_pool(self, small_records, rng):
        """プールに存在する名前だけが選ばれること"""
        pool = build_pool(small_records)
        names = set(pool)
        for _ in range(100):
            assert set(draw_group(pool, 2, 3, rng)) <= names

    def test_all_sizes_reachable(self, small_records, rng):
        """最小・最大の両端を含むすべてのサイズが出ること"""
        pool = build_pool(small_records)
        sizes = {len(draw_group(pool, 2, 4, rng)) for _ in range(300)}
        assert sizes == {2, 3, 4}

    def test_fixed_size(self, small_records, rng):
        """min == max の場合は常にそのサイズ"""
        pool = build_pool(small_records)
        for _ in range(50):
            assert len(draw_group(pool, 3, 3, rng)) == 3

    def test_pool_not_mutated(self, small_records, rng):
        """抽選によってプールが減らないこと"""
        pool = build_pool(small_records)
        before = list(pool)
        for _ in range(20):
            draw_group(pool, 2, 4, rng)
        assert pool == before

    def test_weighted_bias(self, rng):
        """出現回数の多い名前が先に選ばれやすいこと"""
        pool = ["heavy"] * 1000 + ["x", "y", "z"]
        first = Counter(draw_group(pool, 2, 2, rng)[0] for _ in range(100))
        assert first["heavy"] > 90, f"heavy の先頭出現: {first['heavy']}/100"

    def test_single_name_exhausted(self, rng):
        """1名しかいないプールで2名グループを作るとPoolExhaustionError"""
        pool = ["Peter"] * 103
        with pytest.raises(PoolExhaustionError, match="異なる名前が足りません"):
            draw_group(pool, 2, 2, rng)

    def test_empty_pool(self, rng):
        with pytest.raises(PoolExhaustionError):
            draw_group([], 2, 3, rng)

    def test_invalid_range(self, small_records, rng):
        pool = build_pool(small_records)
        with pytest.raises(InvalidRangeError):
            draw_group(pool, 4, 2, rng)

    def test_reproducible_with_seed(self, small_records):
        """同じシードなら同じ抽選結果になること"""
        pool = build_pool(small_records)
        a = [draw_group(pool, 2, 4, random.Random(7)) for _ in range(5)]
        b = [draw_group(pool, 2, 4, random.Random(7)) for _ in range(5)]
        assert a == b
