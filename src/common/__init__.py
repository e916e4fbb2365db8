"""
ネットカウント - 共通設定

データファイル・列名・試行パラメータの既定値を定義する。
CLI引数が省略された場合はこの値が使われる。
"""

NETCOUNT_CONFIG: dict = {
    "data_file": "names.csv",      # 名前と出現回数のCSV
    "encoding": "utf-8",
    "name_col": "Name",            # 名前の列
    "total_col": "Gospels",        # 出現回数の列（福音書での言及数）
    "target": 153,                 # ヨハネ21:11 の魚の数
    "min_size": 2,                 # グループの最小人数
    "max_size": 7,                 # グループの最大人数
    "trial_count": 3,
    "output_dir": "output",
}

# min_size / max_size の下限
MIN_GROUP_SIZE: int = 2
