"""
ネットカウント - 重み付きプール

各名前を出現回数ぶん並べたフラットなプールを構築し、
名前から出現回数を引くための検索関数を提供する。
"""

from src.netcount.errors import InvalidDataError, RecordLookupError
from src.netcount.models import NameRecord


def build_pool(records: list[NameRecord]) -> list[str]:
    """
    レコードの並びから重み付きプールを構築する。

    出現回数0のレコードはプールに何も追加しない。
    プール内の順序は抽選前にシャッフルされるため意味を持たない。

    Args:
        records: NameRecord のリスト

    Returns:
        各名前を total 回繰り返した名前のリスト

    Raises:
        InvalidDataError: total が負または整数でない場合
    """
    pool: list[str] = []

    for rec in records:
        # bool は int のサブクラスなので明示的に除外
        if not isinstance(rec.total, int) or isinstance(rec.total, bool):
            raise InvalidDataError(f"出現回数が整数ではありません: {rec.name!r} = {rec.total!r}")
        if rec.total < 0:
            raise InvalidDataError(f"出現回数が負の値です: {rec.name!r} = {rec.total}")
        pool.extend([rec.name] * rec.total)

    return pool


def find_total(records: list[NameRecord], name: str) -> int:
    """
    名前に一致する最初のレコードの出現回数を返す。

    Raises:
        RecordLookupError: 一致するレコードがない場合（プールとデータの不整合）
    """
    for rec in records:
        if rec.name == name:
            return rec.total
    raise RecordLookupError(f"名前 {name!r} に対応する出現回数がデータに見つかりません")


def count_distinct(pool: list[str]) -> int:
    """プール内の異なる名前の数"""
    return len(set(pool))
