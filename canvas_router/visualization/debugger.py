# canvas_router/visualization/debugger.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple


class IDebugger(ABC):
    """
    规划器调试钩子
    用于解耦搜索算法与 记录/调试 逻辑。
    规划器自己从不打印, 所有诊断信息都经过这里。
    """
    @abstractmethod
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        """记录加入 OpenSet 的节点及其代价"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """记录当前正在扩展的节点"""
        pass

    @abstractmethod
    def set_search_info(self, info: Dict[str, Any]):
        """记录本次搜索的栅格/窗口等信息"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param level: 'DEBUG', 'INFO', 'WARN', 'ERROR'
        :param payload: 额外的结构化数据
        """
        pass


class NoOpDebugger(IDebugger):
    """
    空对象模式 (Null Object Pattern)
    默认使用，所有操作不做任何事情。
    """
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def set_search_info(self, info: Dict[str, Any]): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None): pass


class PlanningDebugger(IDebugger):
    """
    记录开集、扩展顺序等搜索过程，用于回放和测试断言。
    """
    def __init__(self):
        # 存储格式: List[Tuple[x, y, f, h]]
        self.open_set_history: List[Tuple[float, float, float, float]] = []
        # 存储格式: List[Position]
        self.expanded_nodes: List[Any] = []
        self.search_info: Optional[Dict[str, Any]] = None
        self.messages: List[Tuple[str, str]] = []

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        x = getattr(node, 'x', node[0] if isinstance(node, (list, tuple)) else 0)
        y = getattr(node, 'y', node[1] if isinstance(node, (list, tuple)) else 0)
        self.open_set_history.append((x, y, f, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def set_search_info(self, info: Dict[str, Any]):
        self.search_info = info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.messages.append((level, message))


class LoggingDebugger(IDebugger):
    """
    Debug 模式
    在 PlanningDebugger 的记录之外，把过程写进 logging。
    """
    _LEVELS = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARN': logging.WARNING,
        'ERROR': logging.ERROR,
    }

    def __init__(self, logger: logging.Logger = None):
        self.recorder = PlanningDebugger()
        self.logger = logger if logger is not None else logging.getLogger("canvas_router.search")

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        self.recorder.record_open_set_node(node, f, h)

    def record_current_expansion(self, node: Any):
        self.recorder.record_current_expansion(node)
        self.logger.debug("Expanding: %s", node)

    def set_search_info(self, info: Dict[str, Any]):
        self.recorder.set_search_info(info)
        self.logger.info("Search info: %s", info)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.recorder.log(message, level, payload)
        if payload:
            message = f"{message} | Payload: {payload}"
        self.logger.log(self._LEVELS.get(level, logging.INFO), message)

    @property
    def expanded_nodes(self): return self.recorder.expanded_nodes
    @property
    def open_set_history(self): return self.recorder.open_set_history
    @property
    def search_info(self): return self.recorder.search_info
