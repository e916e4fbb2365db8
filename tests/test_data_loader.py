"""
テスト - CSVデータ読み込みモジュール
"""

import pytest

from src.common.data_loader import load_name_records
from src.netcount.errors import InvalidDataError
from src.netcount.models import NameRecord


def _write(tmp_path, text: str, name: str = "names.csv") -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestLoadNameRecords:
    """load_name_records() のテスト"""

    def test_basic(self, tmp_path):
        """名前と出現回数を正常に読み込めること"""
        path = _write(tmp_path, "#,Name,Gospels\n1,Peter,103\n2,Andrew,12\n")
        records = load_name_records(path)
        assert records == [NameRecord("Peter", 103), NameRecord("Andrew", 12)]

    def test_extra_columns_ignored(self, tmp_path):
        """不要な列は無視されること"""
        path = _write(tmp_path, "#,Name,Acts,Gospels,Notes\n1,Peter,56,103,fisher\n")
        assert load_name_records(path) == [NameRecord("Peter", 103)]

    def test_column_order_independent(self, tmp_path):
        """列の位置ではなくヘッダー名で参照すること"""
        path = _write(tmp_path, "Gospels,Name\n103,Peter\n")
        assert load_name_records(path) == [NameRecord("Peter", 103)]

    def test_spaces_after_commas(self, tmp_path):
        path = _write(tmp_path, "#, Name, Gospels\n1, Peter, 103\n")
        assert load_name_records(path) == [NameRecord("Peter", 103)]

    def test_blank_lines_skipped(self, tmp_path):
        path = _write(tmp_path, "Name,Gospels\n\nPeter,103\n,\nAndrew,12\n\n")
        assert [r.name for r in load_name_records(path)] == ["Peter", "Andrew"]

    def test_zero_total(self, tmp_path):
        path = _write(tmp_path, "Name,Gospels\nBartholomew,0\n")
        assert load_name_records(path) == [NameRecord("Bartholomew", 0)]

    def test_custom_columns(self, tmp_path):
        path = _write(tmp_path, "who,count\nPeter,156\n")
        records = load_name_records(path, name_col="who", total_col="count")
        assert records == [NameRecord("Peter", 156)]

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="見つかりません"):
            load_name_records(str(tmp_path / "missing.csv"))

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")
        with pytest.raises(InvalidDataError, match="ヘッダー行"):
            load_name_records(path)

    def test_missing_column(self, tmp_path):
        path = _write(tmp_path, "Name,Acts\nPeter,56\n")
        with pytest.raises(InvalidDataError, match="必要な列がありません: Gospels"):
            load_name_records(path)

    def test_negative_total(self, tmp_path):
        path = _write(tmp_path, "Name,Gospels\nPeter,103\nJudas,-1\n")
        with pytest.raises(InvalidDataError, match="3行目"):
            load_name_records(path)

    def test_non_numeric_total(self, tmp_path):
        path = _write(tmp_path, "Name,Gospels\nPeter,many\n")
        with pytest.raises(InvalidDataError, match="0以上の整数"):
            load_name_records(path)

    @pytest.mark.parametrize("total", ["1²", "³", "①"])
    def test_superscript_and_circled_digits(self, tmp_path, total):
        """上付き数字や丸数字はInvalidDataErrorになること"""
        path = _write(tmp_path, f"Name,Gospels\nPeter,{total}\n")
        with pytest.raises(InvalidDataError, match="2行目"):
            load_name_records(path)

    def test_empty_name(self, tmp_path):
        path = _write(tmp_path, "Name,Gospels\n,5\n")
        with pytest.raises(InvalidDataError, match="'Name' が空"):
            load_name_records(path)
