"""
ネットカウント - ランダムグループ抽選

Fisher–Yates シャッフルを使い、プールから重複のない名前のグループを抽選する。
"""

import random
from typing import Optional

from src.common import MIN_GROUP_SIZE
from src.netcount.errors import InvalidRangeError, PoolExhaustionError


def shuffle(items: list, rng: Optional[random.Random] = None) -> list:
    """
    Fisher–Yates によるインプレースシャッフル。

    末尾から順に、[0, i] の一様乱数位置の要素と交換する。

    Args:
        items: シャッフルするリスト（直接書き換えられる）
        rng: 乱数生成器（省略時は random モジュール）

    Returns:
        引数と同じリスト
    """
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def validate_range(min_size: int, max_size: int) -> None:
    """グループサイズの範囲を検証する"""
    if min_size < MIN_GROUP_SIZE:
        raise InvalidRangeError(f"最小グループサイズは{MIN_GROUP_SIZE}以上が必要です: {min_size}")
    if max_size < MIN_GROUP_SIZE:
        raise InvalidRangeError(f"最大グループサイズは{MIN_GROUP_SIZE}以上が必要です: {max_size}")
    if max_size < min_size:
        raise InvalidRangeError(f"最大グループサイズが最小より小さいです: min={min_size}, max={max_size}")


def draw_group(
    pool: list[str],
    min_size: int,
    max_size: int,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """
    プールから min_size〜max_size 人のグループを抽選する。

    毎ラウンド、残りの候補をシャッフルしてから一様に1つ選び、
    選んだ名前を候補から「すべて」取り除く。
    これにより出現回数の多い名前でもグループ内で重複しない。
    プール自体は変更しないため、毎回の抽選は独立である。

    Args:
        pool: build_pool() の戻り値
        min_size: 最小グループサイズ（2以上）
        max_size: 最大グループサイズ（min_size以上）
        rng: 乱数生成器（省略時は random モジュール）

    Returns:
        抽選順の名前のリスト

    Raises:
        InvalidRangeError: サイズ範囲が不正な場合
        PoolExhaustionError: 途中で候補が尽きた場合
    """
    validate_range(min_size, max_size)
    rng = rng or random

    size = rng.randint(min_size, max_size)
    candidates = list(pool)
    group: list[str] = []

    for _ in range(size):
        if not candidates:
            raise PoolExhaustionError(
                f"異なる名前が足りません: グループサイズ {size} に対して {len(group)} 名しか選べません"
            )
        shuffle(candidates, rng)
        chosen = candidates[rng.randrange(len(candidates))]
        group.append(chosen)
        candidates = [name for name in candidates if name != chosen]

    return group
