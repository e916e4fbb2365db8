"""
ネットカウント - 例外定義

試行を中断すべき不整合はすべてここで定義した例外で呼び出し元へ伝える。
"""


class NetCountError(Exception):
    """ネットカウントの全例外の基底クラス"""


class InvalidDataError(NetCountError, ValueError):
    """データ行が不正（列欠落・負の出現回数など）"""


class InvalidRangeError(NetCountError, ValueError):
    """グループサイズの範囲が不正（min > max、または下限未満）"""


class RecordLookupError(NetCountError, LookupError):
    """抽選された名前に対応するレコードがデータに存在しない"""


class PoolExhaustionError(NetCountError):
    """必要なグループサイズに対して異なる名前が足りない"""


class TrialLimitExceededError(NetCountError):
    """max_tries 回の抽選で目標値に到達しなかった"""

    def __init__(self, target: int, max_tries: int) -> None:
        self.target = target
        self.max_tries = max_tries
        super().__init__(f"{max_tries}回の抽選で目標値 {target} に到達しませんでした")
