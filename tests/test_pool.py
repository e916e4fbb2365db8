"""
テスト - 重み付きプール
"""

import pytest

from src.netcount.errors import InvalidDataError, RecordLookupError
from src.netcount.models import NameRecord
from src.netcount.pool import build_pool, count_distinct, find_total


class TestBuildPool:
    """build_pool() のテスト"""

    def test_pool_length_equals_total_sum(self, small_records):
        """プールの長さが出現回数の合計と一致すること"""
        pool = build_pool(small_records)
        assert len(pool) == sum(r.total for r in small_records)

    def test_multiplicity(self, small_records):
        """各名前が出現回数ぶん含まれること"""
        pool = build_pool(small_records)
        for rec in small_records:
            assert pool.count(rec.name) == rec.total

    def test_zero_total_contributes_nothing(self):
        """出現回数0の名前はプールに入らないこと"""
        pool = build_pool([NameRecord("A", 0), NameRecord("B", 2)])
        assert pool == ["B", "B"]

    def test_empty_records(self):
        """空データで空のプールを返すこと"""
        assert build_pool([]) == []

    def test_negative_total(self):
        """負の出現回数でInvalidDataError"""
        with pytest.raises(InvalidDataError, match="負の値"):
            build_pool([NameRecord("A", 3), NameRecord("B", -1)])

    def test_non_integer_total(self):
        """整数でない出現回数でInvalidDataError"""
        with pytest.raises(InvalidDataError, match="整数ではありません"):
            build_pool([NameRecord("A", 1.5)])

    def test_invalid_data_is_value_error(self):
        """InvalidDataErrorはValueErrorとしても捕捉できること"""
        with pytest.raises(ValueError):
            build_pool([NameRecord("A", -5)])

    def test_does_not_mutate_records(self, small_records):
        """入力データを変更しないこと"""
        before = list(small_records)
        build_pool(small_records)
        assert small_records == before


class TestFindTotal:
    """find_total() のテスト"""

    def test_basic(self, peter_andrew):
        assert find_total(peter_andrew, "Peter") == 103
        assert find_total(peter_andrew, "Andrew") == 50

    def test_first_match_wins(self):
        """同名のレコードがある場合は最初の行を返すこと"""
        records = [NameRecord("John", 30), NameRecord("John", 99)]
        assert find_total(records, "John") == 30

    def test_idempotent(self, small_records):
        """同じ名前を2回引いても同じ値を返すこと"""
        assert find_total(small_records, "C") == find_total(small_records, "C")

    def test_missing_name(self, small_records):
        """存在しない名前でRecordLookupError"""
        with pytest.raises(RecordLookupError, match="見つかりません"):
            find_total(small_records, "Z")

    def test_missing_name_is_lookup_error(self, small_records):
        with pytest.raises(LookupError):
            find_total(small_records, "Z")


def test_count_distinct(small_records):
    """プール内の異なる名前の数"""
    assert count_distinct(build_pool(small_records)) == 4
