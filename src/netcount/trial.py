"""
ネットカウント - 試行ランナー

グループ抽選を繰り返し、出現回数の合計が目標値と一致するまでの
全抽選を記録する。
"""

import random
import time
from typing import Callable, Optional

from src.netcount.errors import TrialLimitExceededError
from src.netcount.models import DrawRecord, NameRecord, Trial
from src.netcount.pool import find_total
from src.netcount.sampler import draw_group


def make_trial_id(pool: list[str], target: int) -> str:
    """試行IDを生成する（例: "TRIAL-1130-153"）"""
    return f"TRIAL-{len(pool)}-{target}"


def run_trial(
    records: list[NameRecord],
    pool: list[str],
    target: int,
    min_size: int,
    max_size: int,
    rng: Optional[random.Random] = None,
    max_tries: Optional[int] = None,
    draw_callback: Optional[Callable[[DrawRecord], None]] = None,
) -> Trial:
    """
    合計が目標値と完全一致するまで抽選を繰り返す。

    終了条件は合計 == target のみ（以上・以下ではない）。
    max_tries を省略すると上限なしで抽選を続けるため、
    到達不能な目標値を与えると終了しない。

    Args:
        records: 出現回数の検索元データ
        pool: build_pool(records) の戻り値
        target: 目標合計値
        min_size: 最小グループサイズ
        max_size: 最大グループサイズ
        rng: 乱数生成器
        max_tries: 抽選回数の上限（None=無制限）
        draw_callback: 各抽選の直後に呼ばれる関数 fn(draw)

    Returns:
        全抽選記録を持つ Trial（最後の抽選の合計は必ず target）

    Raises:
        RecordLookupError: 抽選された名前がデータにない場合
        TrialLimitExceededError: max_tries 回で目標値に届かなかった場合
    """
    trial = Trial(id=make_trial_id(pool, target))
    start_time = time.perf_counter()

    while True:
        if max_tries is not None and trial.tries >= max_tries:
            raise TrialLimitExceededError(target, max_tries)

        group = draw_group(pool, min_size, max_size, rng)
        mentions = tuple(find_total(records, name) for name in group)

        draw = DrawRecord(
            try_number=trial.tries + 1,
            group_names=tuple(group),
            breakdown=mentions,
        )
        trial.draws.append(draw)

        if draw_callback:
            draw_callback(draw)

        if draw.total_mentions == target:
            break

    trial.elapsed = time.perf_counter() - start_time
    return trial
