"""
ネットカウント - インタラクティブ可視化モジュール

plotly を使用して試行結果をインタラクティブなHTMLグラフとして出力する。
"""

import os
from datetime import datetime
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from src.netcount.models import AggregateResult

# ── カラーパレット ──
BG_COLOR = "#0d1117"
CARD_COLOR = "#161b22"
TEXT_COLOR = "#e6edf3"
ACCENT_COLOR = "#58a6ff"
GRID_COLOR = "#30363d"
HIT_COLOR = "#ff6b6b"
MISS_COLOR = "#4ecdc4"


def _ensure_output_dir(output_dir: str) -> None:
    """出力ディレクトリが存在しない場合は作成する"""
    os.makedirs(output_dir, exist_ok=True)


def draw_total_counts(result: AggregateResult) -> np.ndarray:
    """
    全試行の全抽選について、合計値ごとの出現回数を数える。

    Returns:
        添字=合計値、値=その合計になった抽選の回数
    """
    totals = np.array([d.total_mentions for t in result.trials for d in t.draws], dtype=np.int64)
    return np.bincount(totals)


def _base_layout(title: str, x_title: str, y_title: str) -> dict:
    return dict(
        title=dict(text=title, font=dict(size=20, color=TEXT_COLOR), x=0.5),
        xaxis=dict(title=x_title, gridcolor=GRID_COLOR, color=TEXT_COLOR),
        yaxis=dict(title=y_title, gridcolor=GRID_COLOR, color=TEXT_COLOR),
        plot_bgcolor=CARD_COLOR,
        paper_bgcolor=BG_COLOR,
        font=dict(color=TEXT_COLOR),
        hoverlabel=dict(bgcolor=CARD_COLOR, font_size=13, font_color=TEXT_COLOR),
        margin=dict(l=60, r=30, t=60, b=40),
        height=450,
    )


def generate_report_html(
    result: AggregateResult,
    target: int,
    min_size: int,
    max_size: int,
    output_dir: str = "output",
    filepath: Optional[str] = None,
) -> str:
    """
    試行結果のインタラクティブHTMLレポートを生成する。

    含まれるグラフ:
    1. 試行ごとの抽選回数（棒グラフ + 平均線）
    2. 抽選ごとの合計値の分布（目標値を強調）

    Args:
        result: NetCountSimulator.run() の戻り値
        target: 目標合計値
        min_size: 最小グループサイズ
        max_size: 最大グループサイズ
        output_dir: 出力ディレクトリ
        filepath: 出力ファイルパス（省略時は自動生成）

    Returns:
        保存したHTMLファイルのパス
    """
    _ensure_output_dir(output_dir)

    if filepath is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(output_dir, f"netcount_{target}_{timestamp}.html")

    # ═══════════════════════════════════════
    # グラフ1: 試行ごとの抽選回数
    # ═══════════════════════════════════════
    trial_numbers = list(range(1, len(result.trials) + 1))
    fig_tries = go.Figure()

    fig_tries.add_hline(
        y=result.average,
        line_dash="dash",
        line_color="#8b949e",
        line_width=1,
        annotation_text=f"平均 ({result.average:,})",
        annotation_position="top right",
        annotation_font_color="#8b949e",
    )

    fig_tries.add_trace(
        go.Bar(
            x=trial_numbers,
            y=result.try_counts,
            marker_color=ACCENT_COLOR,
            marker_line_width=0,
            hovertemplate="<b>試行 %{x}</b><br>抽選回数: %{y:,}<extra></extra>",
        )
    )
    fig_tries.update_layout(**_base_layout("🐟 試行ごとの抽選回数", "試行", "抽選回数"))
    fig_tries.update_xaxes(tickmode="linear", dtick=1)

    # ═══════════════════════════════════════
    # グラフ2: 合計値の分布
    # ═══════════════════════════════════════
    counts = draw_total_counts(result)
    totals = np.nonzero(counts)[0]
    bar_colors = [HIT_COLOR if t == target else MISS_COLOR for t in totals]

    fig_totals = go.Figure()
    fig_totals.add_trace(
        go.Bar(
            x=totals.tolist(),
            y=counts[totals].tolist(),
            marker_color=bar_colors,
            marker_line_width=0,
            hovertemplate="<b>合計 %{x}</b><br>抽選回数: %{y:,}<extra></extra>",
        )
    )
    fig_totals.update_layout(**_base_layout("🎣 抽選ごとの合計値", "合計値", "抽選回数"))

    # ═══════════════════════════════════════
    # HTML結合
    # ═══════════════════════════════════════
    timestamp_str = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    tries_html = fig_tries.to_html(full_html=False, include_plotlyjs=False)
    totals_html = fig_totals.to_html(full_html=False, include_plotlyjs=False)

    html_content = f"""<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>ネットカウント 試行結果</title>
    <script src="https://cdn.plot.ly/plotly-3.0.1.min.js"></script>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            background: {BG_COLOR};
            color: {TEXT_COLOR};
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
            padding: 20px;
        }}
        .header {{
            text-align: center;
            padding: 30px 0;
            border-bottom: 1px solid {GRID_COLOR};
            margin-bottom: 30px;
        }}
        .header .meta {{ color: #8b949e; font-size: 0.9em; }}
        .stats {{
            display: flex;
            justify-content: center;
            gap: 40px;
            margin: 20px 0;
            flex-wrap: wrap;
        }}
        .stat-card {{
            background: {CARD_COLOR};
            border: 1px solid {GRID_COLOR};
            border-radius: 8px;
            padding: 15px 25px;
            text-align: center;
        }}
        .stat-card .label {{ color: #8b949e; font-size: 0.85em; margin-bottom: 5px; }}
        .stat-card .value {{ font-size: 1.5em; font-weight: bold; color: {ACCENT_COLOR}; }}
        .chart-section {{
            background: {CARD_COLOR};
            border: 1px solid {GRID_COLOR};
            border-radius: 12px;
            padding: 20px;
            margin-bottom: 25px;
        }}
    </style>
</head>
<body>
    <div class="header">
        <h1>🐟 ネットカウント 試行結果</h1>
        <p class="meta">実行日時: {timestamp_str}</p>
    </div>

    <div class="stats">
        <div class="stat-card">
            <div class="label">目標値</div>
            <div class="value">{target}</div>
        </div>
        <div class="stat-card">
            <div class="label">グループサイズ</div>
            <div class="value">{min_size} 〜 {max_size}</div>
        </div>
        <div class="stat-card">
            <div class="label">試行回数</div>
            <div class="value">{len(result.trials):,}</div>
        </div>
        <div class="stat-card">
            <div class="label">平均抽選回数</div>
            <div class="value">{result.average:,}</div>
        </div>
    </div>

    <div class="chart-section">
        {tries_html}
    </div>

    <div class="chart-section">
        {totals_html}
    </div>
</body>
</html>"""

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(html_content)

    return filepath
