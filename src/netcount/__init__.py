"""
ネットカウント - 重み付きランダム抽選シミュレーション モジュール

名前の出現回数の合計が目標値（既定: 153）と一致するまで
ランダムなグループ抽選を繰り返し、必要な抽選回数の平均を求める。

使用方法:
    python -m src.netcount [データファイル] [目標値] [最小] [最大] [試行回数] [-d]
"""

from src.netcount.errors import (
    NetCountError,
    InvalidDataError,
    InvalidRangeError,
    RecordLookupError,
    PoolExhaustionError,
    TrialLimitExceededError,
)
from src.netcount.models import NameRecord, DrawRecord, Trial, AggregateResult
from src.netcount.pool import build_pool, find_total
from src.netcount.sampler import shuffle, draw_group
from src.netcount.trial import run_trial
from src.netcount.simulator import NetCountSimulator, run_trials, average_tries
from src.netcount.analyzer import print_report, summarize_trials
from src.netcount.exporter import export_results, export_json
from src.netcount.visualizer import generate_report_html

__all__ = [
    "NetCountError",
    "InvalidDataError",
    "InvalidRangeError",
    "RecordLookupError",
    "PoolExhaustionError",
    "TrialLimitExceededError",
    "NameRecord",
    "DrawRecord",
    "Trial",
    "AggregateResult",
    "build_pool",
    "find_total",
    "shuffle",
    "draw_group",
    "run_trial",
    "NetCountSimulator",
    "run_trials",
    "average_tries",
    "print_report",
    "summarize_trials",
    "export_results",
    "export_json",
    "generate_report_html",
]
