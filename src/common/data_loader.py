"""
ネットカウント - CSVデータ読み込みモジュール

名前と出現回数のCSVファイルを読み込み、NameRecord のリストに変換する。
列は位置ではなくヘッダー名で参照し、読み込み時点で型を検証する。

CSV例:
    #,Name,Gospels
    1,Peter,103
    2,Andrew,12
"""

import csv
import os
from typing import Optional

from src.common import NETCOUNT_CONFIG
from src.netcount.errors import InvalidDataError
from src.netcount.models import NameRecord


def _parse_total(value: Optional[str], line_no: int, total_col: str) -> int:
    """出現回数の列を0以上の整数に変換する"""
    text = (value or "").strip()
    # isdigit() は "²" や "①" も真になるが int() で変換できない
    if not text.isdecimal():
        raise InvalidDataError(f"{line_no}行目: 列 '{total_col}' が0以上の整数ではありません: {value!r}")
    return int(text)


def load_name_records(
    csv_path: str,
    name_col: Optional[str] = None,
    total_col: Optional[str] = None,
    encoding: Optional[str] = None,
) -> list[NameRecord]:
    """
    CSVファイルを読み込み、名前と出現回数のレコードを返す。

    Args:
        csv_path: CSVファイルのパス
        name_col: 名前の列名（省略時: NETCOUNT_CONFIG["name_col"]）
        total_col: 出現回数の列名（省略時: NETCOUNT_CONFIG["total_col"]）
        encoding: 文字コード（省略時: NETCOUNT_CONFIG["encoding"]）

    Returns:
        ファイル内の順序どおりの NameRecord のリスト（他の列は捨てる）

    Raises:
        FileNotFoundError: CSVファイルが見つからない場合
        InvalidDataError: ヘッダー欠落・列欠落・不正な値がある場合
    """
    name_col = name_col or NETCOUNT_CONFIG["name_col"]
    total_col = total_col or NETCOUNT_CONFIG["total_col"]
    encoding = encoding or NETCOUNT_CONFIG["encoding"]

    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"CSVファイルが見つかりません: {csv_path}")

    records: list[NameRecord] = []
    with open(csv_path, encoding=encoding, newline="") as f:
        reader = csv.DictReader(f, skipinitialspace=True)

        if not reader.fieldnames:
            raise InvalidDataError(f"ヘッダー行がありません: {csv_path}")

        fieldnames = [col.strip() for col in reader.fieldnames]
        missing = [col for col in (name_col, total_col) if col not in fieldnames]
        if missing:
            raise InvalidDataError(f"必要な列がありません: {', '.join(missing)} (ヘッダー: {', '.join(fieldnames)})")
        reader.fieldnames = fieldnames

        for row in reader:
            # DictReader は空行を飛ばすが、区切りのみの行は残る
            if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
                continue

            line_no = reader.line_num
            name = (row.get(name_col) or "").strip()
            if not name:
                raise InvalidDataError(f"{line_no}行目: 列 '{name_col}' が空です")

            total = _parse_total(row.get(total_col), line_no, total_col)
            records.append(NameRecord(name=name, total=total))

    return records
