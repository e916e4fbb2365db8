"""
ネットカウント - データモデル

データセットの1行、1回の抽選結果、1試行、複数試行の集計結果を表す。
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NameRecord:
    """データセットの1行（名前と出現回数のみ）"""

    name: str
    """名前"""

    total: int
    """出現回数（0以上）"""


@dataclass(frozen=True)
class DrawRecord:
    """1回の抽選（グループ1つ分）の記録"""

    try_number: int
    """試行内での抽選番号（1始まり）"""

    group_names: tuple[str, ...]
    """抽選されたグループ（重複なし、抽選順）"""

    breakdown: tuple[int, ...]
    """各名前の出現回数（group_names と同じ順）"""

    @property
    def group_size(self) -> int:
        return len(self.group_names)

    @property
    def total_mentions(self) -> int:
        return sum(self.breakdown)


@dataclass
class Trial:
    """目標値に到達するまでの1試行"""

    id: str
    """試行ID（"TRIAL-<プールサイズ>-<目標値>"）"""

    draws: list[DrawRecord] = field(default_factory=list)
    """抽選記録（追記のみ）"""

    elapsed: float = 0.0
    """所要時間（秒）"""

    @property
    def tries(self) -> int:
        """目標値到達までに要した抽選回数"""
        return len(self.draws)

    @property
    def last_draw(self) -> DrawRecord:
        return self.draws[-1]

    @property
    def name_count(self) -> int:
        """全抽選で選ばれた名前の延べ数"""
        return sum(d.group_size for d in self.draws)


@dataclass
class AggregateResult:
    """複数試行の集計結果"""

    trials: list[Trial] = field(default_factory=list)

    @property
    def try_counts(self) -> list[int]:
        return [t.tries for t in self.trials]

    @property
    def trial_sum(self) -> int:
        return sum(self.try_counts)

    @property
    def average(self) -> int:
        """平均抽選回数（切り捨て）"""
        return average_tries(self.try_counts)


def average_tries(try_counts: list[int]) -> int:
    """
    試行ごとの抽選回数の平均を切り捨てで返す。

    Raises:
        ValueError: try_counts が空の場合
    """
    if not try_counts:
        raise ValueError("試行結果が空です")
    return sum(try_counts) // len(try_counts)
