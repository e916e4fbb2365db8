"""
ネットカウント - CLIエントリーポイント

「シモン・ペトロが網を陸へ引き上げると、百五十三匹もの大きな魚でいっぱいであった」
（ヨハネ21:11）。福音書に登場する名前の言及数をランダムに組み合わせ、
合計が153になるまでに何回の抽選が必要かを試す。

使用方法:
    python -m src.netcount [データファイル] [目標値] [最小] [最大] [試行回数] [オプション]

実行例:
    # 引数なしは使い方を表示して終了
    python -m src.netcount

    # デフォルト値で実行
    python -m src.netcount names.csv 153 2 7 3

    # 抽選ごとの詳細ログを表示
    python -m src.netcount names.csv 153 2 7 3 -d

    # シード固定、1試行あたり最大100万回で打ち切り、HTMLグラフも生成
    python -m src.netcount names.csv 153 2 5 10 --seed 42 --max-tries 1000000 --visualize
"""

import argparse
import sys
import time

from src.common import MIN_GROUP_SIZE, NETCOUNT_CONFIG
from src.common.data_loader import load_name_records
from src.netcount.analyzer import BAR, CSV_HEADER, format_draw_row, format_trial_footer, print_report
from src.netcount.errors import NetCountError
from src.netcount.exporter import export_json, export_results
from src.netcount.models import DrawRecord, Trial
from src.netcount.simulator import NetCountSimulator
from src.netcount.visualizer import generate_report_html

BANNER = """
            ~~^#######1##5###3######^~~
               ## ><> ## <><  <>< ##
            ~~~# N E T  C o u n t  #~~~
               ## <>< ## ><>  ><> ##
            ~~^######1##6##1##1#####^~~
"""


def _parse_args() -> argparse.Namespace:
    """コマンドライン引数を解析する"""
    parser = argparse.ArgumentParser(
        prog="python -m src.netcount",
        description="ネットカウント 名前の言及数が目標値になるまでのランダム抽選",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        default=NETCOUNT_CONFIG["data_file"],
        help=f"名前と出現回数のCSV（デフォルト: {NETCOUNT_CONFIG['data_file']}）",
    )
    parser.add_argument(
        "target",
        nargs="?",
        type=int,
        default=NETCOUNT_CONFIG["target"],
        help=f"目標合計値（デフォルト: {NETCOUNT_CONFIG['target']}）",
    )
    parser.add_argument(
        "min_size",
        nargs="?",
        type=int,
        default=NETCOUNT_CONFIG["min_size"],
        help=f"最小グループサイズ（デフォルト: {NETCOUNT_CONFIG['min_size']}）",
    )
    parser.add_argument(
        "max_size",
        nargs="?",
        type=int,
        default=NETCOUNT_CONFIG["max_size"],
        help=f"最大グループサイズ（デフォルト: {NETCOUNT_CONFIG['max_size']}）",
    )
    parser.add_argument(
        "trial_count",
        nargs="?",
        type=int,
        default=NETCOUNT_CONFIG["trial_count"],
        help=f"試行回数（デフォルト: {NETCOUNT_CONFIG['trial_count']}）",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="抽選ごとの詳細ログを表示する",
    )
    parser.add_argument(
        "--name-col",
        type=str,
        default=NETCOUNT_CONFIG["name_col"],
        help=f"名前の列名（デフォルト: {NETCOUNT_CONFIG['name_col']}）",
    )
    parser.add_argument(
        "--total-col",
        type=str,
        default=NETCOUNT_CONFIG["total_col"],
        help=f"出現回数の列名（デフォルト: {NETCOUNT_CONFIG['total_col']}）",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=NETCOUNT_CONFIG["encoding"],
        help=f"CSVの文字コード（デフォルト: {NETCOUNT_CONFIG['encoding']}）",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=NETCOUNT_CONFIG["output_dir"],
        help=f"出力ディレクトリ（デフォルト: {NETCOUNT_CONFIG['output_dir']}）",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="乱数シード（省略時: 毎回異なる結果）",
    )
    parser.add_argument(
        "--max-tries",
        type=int,
        default=None,
        help="1試行あたりの抽選回数上限（省略時: 目標値に届くまで無制限）",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="集計結果をJSONでも保存する",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="インタラクティブHTMLグラフを生成する",
    )
    if not sys.argv[1:]:
        print(BANNER)
        print(parser.format_help())
        sys.exit(0)

    args = parser.parse_args()

    if args.min_size < MIN_GROUP_SIZE:
        parser.error(f"Min group size must be {MIN_GROUP_SIZE} or greater")
    if args.max_size < MIN_GROUP_SIZE:
        parser.error(f"Max group size must be {MIN_GROUP_SIZE} or greater")
    if args.max_size < args.min_size:
        parser.error("Max group size must be greater than or equal to min group size")
    if args.target <= 0:
        parser.error("Target must be a positive integer value")
    if args.trial_count <= 0:
        parser.error("Trial count must be a positive integer value")
    if args.max_tries is not None and args.max_tries <= 0:
        parser.error("Max tries must be a positive integer value")

    return args


def _print_trial_log_header(args: argparse.Namespace, pool_size: int) -> None:
    """試行ログのヘッダーを表示（--debug 時）"""
    command = " ".join(
        str(v) for v in (args.data_file, args.target, args.min_size, args.max_size, args.trial_count)
    )
    print(BAR)
    print("TRIAL LOG".center(len(BAR)))
    print(BAR)
    print(f"Command: {command} -d")
    print(
        f"Data file: {args.data_file}, Encoding: {args.encoding}, "
        f"Min group size: {args.min_size}, Max group size: {args.max_size}, "
        f"Name Pool size: {pool_size}, Target value: {args.target}"
    )
    print(BAR)
    print(", ".join(CSV_HEADER))


def _draw_printer(trial_no: int, draw: DrawRecord) -> None:
    """抽選1回分の詳細をコンソールに表示（--debug 時）"""
    print(f"\n\tTrial {trial_no} / Group: {', '.join(draw.group_names)}")
    for name, mentions in zip(draw.group_names, draw.breakdown):
        print(f"\t\t{name}: {mentions}")
    print("\t" + ", ".join(str(col) for col in format_draw_row(draw)))


def main() -> None:
    """メイン処理"""
    args = _parse_args()

    print(f"\n🐟 ネットカウント（目標値: {args.target}）")
    print(f"   グループサイズ: {args.min_size}〜{args.max_size}  試行回数: {args.trial_count}")

    # 1. CSVデータの読み込み
    print(f"\n📂 データを読み込み中... {args.data_file} ({args.encoding})")
    try:
        records = load_name_records(
            args.data_file,
            name_col=args.name_col,
            total_col=args.total_col,
            encoding=args.encoding,
        )
        simulator = NetCountSimulator(
            records,
            target=args.target,
            min_size=args.min_size,
            max_size=args.max_size,
            trials=args.trial_count,
            seed=args.seed,
            max_tries=args.max_tries,
        )
    except (FileNotFoundError, UnicodeDecodeError, NetCountError) as e:
        print(f"\n❌ エラー: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"   {len(records):,}件の名前、プールサイズ {len(simulator.pool):,}")

    # 2. 試行の実行
    print(f"\n🎣 試行中...")
    if args.debug:
        _print_trial_log_header(args, len(simulator.pool))

    def _progress_printer(current: int, total: int) -> None:
        print(f"   試行 {current} / {total} 完了", flush=True)

    def _footer_printer(trial_no: int, trial: Trial) -> None:
        print(BAR)
        print(f"   Trial #{trial_no}: {format_trial_footer(trial, args.target)}")

    start_time = time.time()
    try:
        result = simulator.run(
            progress_callback=_progress_printer,
            draw_callback=_draw_printer if args.debug else None,
            trial_callback=_footer_printer if args.debug else None,
        )
    except NetCountError as e:
        print(f"\n❌ エラー: {e}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.time() - start_time

    print(f"   完了！ 実行時間: {elapsed:.2f}秒")

    # 3. 結果の表示
    print_report(result, args.target)

    # 4. 保存
    paths = export_results(result, args.target, args.min_size, args.max_size, output_dir=args.output_dir)
    print(f"\n💾 CSVを保存しました: {paths[-1]}（試行別 {len(paths) - 1} ファイル）")

    if args.json:
        path = export_json(result, args.target, args.min_size, args.max_size, output_dir=args.output_dir)
        print(f"💾 JSONを保存しました: {path}")

    if args.visualize:
        path = generate_report_html(result, args.target, args.min_size, args.max_size, output_dir=args.output_dir)
        print(f"📊 HTMLレポートを生成しました: {path}")


if __name__ == "__main__":
    main()
