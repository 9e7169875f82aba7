"""
hotel_desk/core/engine/state_machine.py

状态机引擎 - 校验状态转换并记录转换历史
"""
from typing import Dict, List, Optional
from dataclasses import dataclass
import logging
import time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateTransition:
    """
    状态转换定义

    Attributes:
        from_state: 源状态
        to_state: 目标状态
        trigger: 触发动作
    """

    from_state: str
    to_state: str
    trigger: str


@dataclass
class StateMachineConfig:
    """
    状态机配置

    Attributes:
        name: 状态机名称
        states: 所有状态的列表
        transitions: 转换列表
        initial_state: 初始状态
    """

    name: str
    states: List[str]
    transitions: List[StateTransition]
    initial_state: str


@dataclass
class StateMachineSnapshot:
    """
    状态机快照 - 一次成功转换的记录

    Attributes:
        previous_state: 转换前状态
        current_state: 转换后状态
        trigger: 触发动作
        timestamp: 快照时间
    """

    previous_state: str
    current_state: str
    trigger: str
    timestamp: float


class StateMachine:
    """
    状态机引擎

    特性：
    - 状态转换验证
    - 历史记录（用于审计）

    Example:
        >>> machine = StateMachine(
        ...     config=StateMachineConfig(
        ...         name="Room",
        ...         states=["available", "occupied"],
        ...         transitions=[...],
        ...         initial_state="available"
        ...     )
        ... )
        >>> if machine.can_transition_to("occupied", "book"):
        ...     machine.transition_to("occupied", "book")
    """

    def __init__(self, config: StateMachineConfig):
        if config.initial_state not in config.states:
            raise ValueError(
                f"Initial state {config.initial_state!r} is not a state of {config.name}"
            )

        self._config = config
        self._current_state = config.initial_state
        self._history: List[StateMachineSnapshot] = []
        self._transition_map: Dict[str, Dict[str, StateTransition]] = {}

        # 构建转换映射: (from_state, trigger) -> transition
        for t in config.transitions:
            self._transition_map.setdefault(t.from_state, {})[t.trigger] = t

    @property
    def current_state(self) -> str:
        """获取当前状态"""
        return self._current_state

    @property
    def config(self) -> StateMachineConfig:
        """获取状态机配置"""
        return self._config

    def can_transition_to(self, target_state: str, trigger: str) -> bool:
        """
        检查是否可以转换到目标状态

        Args:
            target_state: 目标状态
            trigger: 触发动作

        Returns:
            True 如果转换被允许
        """
        if target_state not in self._config.states:
            return False

        transition = self._transition_map.get(self._current_state, {}).get(trigger)
        return transition is not None and transition.to_state == target_state

    def transition_to(self, target_state: str, trigger: str) -> bool:
        """
        执行状态转换

        Args:
            target_state: 目标状态
            trigger: 触发动作

        Returns:
            True 如果转换成功
        """
        if not self.can_transition_to(target_state, trigger):
            logger.warning(
                f"Invalid transition for {self._config.name}: "
                f"{self._current_state} -> {target_state} (trigger: {trigger})"
            )
            return False

        previous_state = self._current_state
        self._current_state = target_state
        self._history.append(StateMachineSnapshot(
            previous_state=previous_state,
            current_state=target_state,
            trigger=trigger,
            timestamp=time.time(),
        ))

        logger.debug(f"State transition: {previous_state} -> {target_state} (trigger: {trigger})")
        return True

    def available_triggers(self) -> List[str]:
        """获取当前状态下可用的触发动作"""
        return list(self._transition_map.get(self._current_state, {}))

    def get_history(self) -> List[StateMachineSnapshot]:
        """获取转换历史"""
        return list(self._history)

    def reset(self, state: Optional[str] = None) -> None:
        """
        重置状态机

        Args:
            state: 要重置到的状态，如果为 None 则使用初始状态
        """
        self._current_state = state if state is not None else self._config.initial_state
        self._history.clear()


# 导出
__all__ = [
    "StateTransition",
    "StateMachineConfig",
    "StateMachineSnapshot",
    "StateMachine",
]
