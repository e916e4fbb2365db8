"""
ネットカウント - 試行結果の整形・レポート

抽選記録をCSV行に整形し、集計結果をコンソールに出力する。
"""

from src.netcount.models import AggregateResult, DrawRecord, Trial

CSV_HEADER: list[str] = ["Trial #", "Group Size", "Group Names", "Total Mentions", "Total Breakdown"]

BAR = "=" * 80


def format_breakdown(draw: DrawRecord) -> str:
    """内訳を "(= 50 + 103)" の形式にする"""
    return f"(= {' + '.join(str(m) for m in draw.breakdown)})"


def format_draw_row(draw: DrawRecord) -> list:
    """
    1回の抽選をCSVの1行に変換する。

    Returns:
        [抽選番号, グループサイズ, 名前（空白区切り）, 合計, 内訳]
    """
    return [
        draw.try_number,
        draw.group_size,
        " ".join(draw.group_names),
        draw.total_mentions,
        format_breakdown(draw),
    ]


def summarize_trials(result: AggregateResult) -> list[list]:
    """
    全試行の要約行を返す。

    先頭にヘッダー、以降は各試行の最後の抽選（目標値に到達した行）。
    """
    rows: list[list] = [list(CSV_HEADER)]
    for trial in result.trials:
        rows.append(format_draw_row(trial.last_draw))
    return rows


def format_average_lines(result: AggregateResult, target: int) -> list[str]:
    """平均抽選回数の説明文（2行）"""
    counts = result.try_counts
    return [
        f"{result.average} tries on average required after {len(counts)} trial(s) "
        f"ran to obtain total of {target} mentions:",
        f"({' + '.join(str(c) for c in counts)} = {result.trial_sum} / {len(counts)} = {result.average})",
    ]


def format_trial_footer(trial: Trial, target: int) -> str:
    """1試行の完了報告"""
    return (
        f"TRIAL RESULTS: Total trial runs: {trial.tries} trial(s), "
        f"Target value reached: {target}, Total names: {trial.name_count}, "
        f"Elapsed: {trial.elapsed:.3f}s"
    )


def print_report(result: AggregateResult, target: int) -> None:
    """
    集計結果のレポートをコンソールに出力する。

    Args:
        result: NetCountSimulator.run() の戻り値
        target: 目標合計値
    """
    print()
    print(BAR)
    print(f"  🐟 ネットカウント 試行結果（目標値: {target}）")
    print(BAR)

    print(f"  {'試行':>4}  {'抽選回数':>10}  {'所要時間':>10}  到達したグループ")
    print(f"  {'─' * 4}  {'─' * 10}  {'─' * 10}  {'─' * 40}")
    for i, trial in enumerate(result.trials, 1):
        names = ", ".join(trial.last_draw.group_names)
        print(f"  {i:>4}  {trial.tries:>10,}  {trial.elapsed:>9.3f}s  {names}")

    print()
    for line in format_average_lines(result, target):
        print(f"  {line}")
    print(BAR)
