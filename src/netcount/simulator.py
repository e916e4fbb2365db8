"""
ネットカウント - 複数試行シミュレーター

同じデータ・パラメータで試行ランナーを逐次N回実行し、
各試行の抽選回数と平均を集計する。
"""

import random
from functools import partial
from typing import Callable, Optional

from src.netcount.errors import InvalidDataError, PoolExhaustionError
from src.netcount.models import AggregateResult, DrawRecord, NameRecord, Trial, average_tries
from src.netcount.pool import build_pool, count_distinct
from src.netcount.sampler import validate_range
from src.netcount.trial import run_trial

__all__ = ["NetCountSimulator", "run_trials", "average_tries"]


class NetCountSimulator:
    """
    「合計が目標値になるまで何回かかるか」を複数回試行するシミュレーター。

    プールは初期化時に一度だけ構築し、全試行で読み取り専用として共有する。
    試行は並行させず、常に1つずつ順番に実行する。

    使用例:
        >>> records = load_name_records("names.csv")
        >>> sim = NetCountSimulator(records, target=153, min_size=2, max_size=7, trials=3)
        >>> result = sim.run()
        >>> result.average
    """

    def __init__(
        self,
        records: list[NameRecord],
        target: int,
        min_size: int,
        max_size: int,
        trials: int = 3,
        seed: Optional[int] = None,
        max_tries: Optional[int] = None,
    ) -> None:
        """
        Args:
            records: データセット
            target: 目標合計値（正の整数）
            min_size: 最小グループサイズ（2以上）
            max_size: 最大グループサイズ（min_size以上）
            trials: 試行回数（正の整数）
            seed: 乱数シード（省略時は再現性なし）
            max_tries: 1試行あたりの抽選回数上限（None=無制限）
        """
        if target <= 0:
            raise ValueError(f"目標値は正の整数が必要です: {target}")
        if trials <= 0:
            raise ValueError(f"試行回数は正の整数が必要です: {trials}")
        if max_tries is not None and max_tries <= 0:
            raise ValueError(f"抽選回数上限は正の整数が必要です: {max_tries}")
        validate_range(min_size, max_size)

        if not records:
            raise InvalidDataError("データが空です")

        self.records = records
        self.pool: list[str] = build_pool(records)

        # 途中で候補が尽きる組み合わせは開始前に弾く
        distinct = count_distinct(self.pool)
        if distinct < max_size:
            raise PoolExhaustionError(
                f"異なる名前が {distinct} 名しかなく、最大グループサイズ {max_size} を満たせません"
            )

        self.target = target
        self.min_size = min_size
        self.max_size = max_size
        self.trials = trials
        self.max_tries = max_tries
        self.rng = random.Random(seed)

    def run(
        self,
        progress_callback: Optional[Callable[[int, int], None]] = None,
        draw_callback: Optional[Callable[[int, DrawRecord], None]] = None,
        trial_callback: Optional[Callable[[int, Trial], None]] = None,
    ) -> AggregateResult:
        """
        全試行を順番に実行する。

        Args:
            progress_callback: 各試行の完了ごとに呼ばれる関数 fn(current, total)
            draw_callback: 各抽選ごとに呼ばれる関数 fn(試行番号, draw)
            trial_callback: 各試行の完了直後に呼ばれる関数 fn(試行番号, trial)

        Returns:
            AggregateResult
        """
        result = AggregateResult()

        for i in range(self.trials):
            trial_no = i + 1
            on_draw = partial(draw_callback, trial_no) if draw_callback else None

            trial = run_trial(
                self.records,
                self.pool,
                self.target,
                self.min_size,
                self.max_size,
                rng=self.rng,
                max_tries=self.max_tries,
                draw_callback=on_draw,
            )
            result.trials.append(trial)

            if trial_callback:
                trial_callback(trial_no, trial)
            if progress_callback:
                progress_callback(trial_no, self.trials)

        return result


def run_trials(
    n: int,
    records: list[NameRecord],
    target: int,
    min_size: int,
    max_size: int,
    **kwargs,
) -> AggregateResult:
    """NetCountSimulator を生成して n 回試行する関数形式のショートカット"""
    progress_callback = kwargs.pop("progress_callback", None)
    draw_callback = kwargs.pop("draw_callback", None)
    trial_callback = kwargs.pop("trial_callback", None)
    sim = NetCountSimulator(records, target, min_size, max_size, trials=n, **kwargs)
    return sim.run(
        progress_callback=progress_callback,
        draw_callback=draw_callback,
        trial_callback=trial_callback,
    )
