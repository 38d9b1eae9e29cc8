"""
NPC 策略配置

定义评估函数使用的各项系数
"""
from dataclasses import dataclass


@dataclass
class NpcConfig:
    """
    NPC 评估配置

    Attributes:
        pass_margin: 最佳出牌需要超过 PASS 分数的幅度，否则选择 PASS
        shape_priority_coef: 牌型优先级系数
        shape_length_coef: 牌型张数系数
        shape_smoothness_base: 平滑度奖励上限
        shape_smoothness_coef: 每剩余一手减少的平滑度
        shape_turn_penalty: 每剩余一手的直接惩罚
        control_ratio_coef: 牌力比例系数
        critical_cards: 对手进入危险区的剩余张数
        endgame_win_bonus: 出完手牌的奖励
    """
    pass_margin: float = 2.0

    # Shape
    shape_priority_coef: float = 6.0
    shape_length_coef: float = 2.0
    shape_smoothness_base: float = 12.0
    shape_smoothness_coef: float = 2.0
    shape_turn_penalty: float = 1.3

    # Control
    control_ratio_coef: float = 12.0
    control_open_bonus: float = 4.0
    control_bomb_bonus: float = 8.0
    control_sequence_bonus: float = 5.0
    control_sequence_min_len: int = 4

    # Pressure
    critical_cards: int = 3
    pressure_urgency_base: float = 12.0
    pressure_urgency_coef: float = 2.0
    pressure_combo_bonus: float = 3.0
    pressure_bomb_bonus: float = 6.0

    # Endgame
    endgame_win_bonus: float = 120.0
    endgame_solo_bonus: float = 20.0
    endgame_near_bonus: float = 25.0
    endgame_near_cards: int = 2
    endgame_close_bonus: float = 12.0
    endgame_close_cards: int = 4

    # Pass
    patience_base: float = 12.0
    patience_decay: float = 3.0
    threat_high: float = 18.0
    threat_high_cards: int = 2
    threat_medium: float = 10.0
    threat_medium_cards: int = 4
    threat_low: float = 4.0
    threat_low_cards: int = 7

    @classmethod
    def from_dict(cls, d: dict) -> 'NpcConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)
