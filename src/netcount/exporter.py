"""
ネットカウント - 試行結果エクスポーター

試行ごとの抽選記録と全試行の要約をCSV/JSON形式でファイルに保存する。
"""

import csv
import json
import os
from datetime import datetime
from typing import Optional

from src.netcount.analyzer import CSV_HEADER, format_average_lines, format_draw_row, summarize_trials
from src.netcount.models import AggregateResult, Trial


def _ensure_output_dir(output_dir: str) -> None:
    """出力ディレクトリが存在しない場合は作成する"""
    os.makedirs(output_dir, exist_ok=True)


def _generate_timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def results_dir(result: AggregateResult, output_dir: str, timestamp: Optional[str] = None) -> str:
    """試行結果の保存先ディレクトリ（<output_dir>/<試行ID>-<タイムスタンプ>）"""
    timestamp = timestamp or _generate_timestamp()
    return os.path.join(output_dir, f"{result.trials[-1].id}-{timestamp}")


def export_trial_csv(trial: Trial, filepath: str) -> str:
    """
    1試行の全抽選記録をCSVに保存する。

    Returns:
        保存したファイルのパス
    """
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for draw in trial.draws:
            writer.writerow(format_draw_row(draw))

    return filepath


def export_summary_csv(
    result: AggregateResult,
    target: int,
    min_size: int,
    max_size: int,
    filepath: str,
) -> str:
    """
    全試行の要約をCSVに保存する。

    出力ファイルは3つのセクションを含む:
    1. メタデータ
    2. 各試行で目標値に到達した抽選
    3. 平均抽選回数
    """
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)

        # ── メタデータ ──
        writer.writerow(["# メタデータ"])
        writer.writerow(["目標値", target])
        writer.writerow(["グループサイズ", f"{min_size}-{max_size}"])
        writer.writerow(["試行回数", len(result.trials)])
        writer.writerow(["実行日時", datetime.now().strftime("%Y-%m-%d %H:%M:%S")])
        writer.writerow([])

        # ── 各試行の到達行 ──
        writer.writerow(["# 試行結果"])
        writer.writerows(summarize_trials(result))
        writer.writerow([])

        # ── 平均 ──
        writer.writerow(["# 平均"])
        for line in format_average_lines(result, target):
            writer.writerow([line])

    return filepath


def export_results(
    result: AggregateResult,
    target: int,
    min_size: int,
    max_size: int,
    output_dir: str = "output",
    timestamp: Optional[str] = None,
) -> list[str]:
    """
    試行ごとのCSV（trial1.csv, trial2.csv, ...）と要約CSV（trials.csv）を保存する。

    Args:
        result: NetCountSimulator.run() の戻り値
        target: 目標合計値
        min_size: 最小グループサイズ
        max_size: 最大グループサイズ
        output_dir: 出力先の親ディレクトリ
        timestamp: ディレクトリ名に付けるタイムスタンプ（省略時は現在時刻）

    Returns:
        保存したファイルのパスのリスト（要約CSVが最後）
    """
    dirpath = results_dir(result, output_dir, timestamp)
    _ensure_output_dir(dirpath)

    paths = [
        export_trial_csv(trial, os.path.join(dirpath, f"trial{i}.csv"))
        for i, trial in enumerate(result.trials, 1)
    ]
    paths.append(export_summary_csv(result, target, min_size, max_size, os.path.join(dirpath, "trials.csv")))
    return paths


def export_json(
    result: AggregateResult,
    target: int,
    min_size: int,
    max_size: int,
    output_dir: str = "output",
    filepath: Optional[str] = None,
) -> str:
    """
    集計結果をJSONファイルに保存する。

    Returns:
        保存したファイルのパス
    """
    _ensure_output_dir(output_dir)

    if filepath is None:
        filepath = os.path.join(output_dir, f"netcount_{target}_{_generate_timestamp()}.json")

    data = {
        "metadata": {
            "target": target,
            "min_size": min_size,
            "max_size": max_size,
            "trials": len(result.trials),
            "timestamp": datetime.now().isoformat(),
        },
        "try_counts": result.try_counts,
        "trial_sum": result.trial_sum,
        "average": result.average,
        "trials": [
            {
                "number": i,
                "id": trial.id,
                "tries": trial.tries,
                "elapsed": round(trial.elapsed, 6),
                "group_names": list(trial.last_draw.group_names),
                "breakdown": list(trial.last_draw.breakdown),
            }
            for i, trial in enumerate(result.trials, 1)
        ],
    }

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return filepath
