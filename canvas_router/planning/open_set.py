# canvas_router/planning/open_set.py
import heapq
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .config import OpenSetMethod


class OpenSet(ABC):
    """
    OpenSet 只保存 arena 下标和 f 值。
    pop() 返回 f 最小的下标；f 相同时返回最早加入的那个。
    """

    @abstractmethod
    def push(self, index: int, f: float): pass

    @abstractmethod
    def pop(self) -> Optional[int]: pass

    @abstractmethod
    def __len__(self) -> int: pass


class LinearOpenSet(OpenSet):
    """每次 pop 从头线性扫描, O(n)。适合画布上的短距离连线。"""

    def __init__(self):
        self._items: List[Tuple[float, int]] = []

    def push(self, index: int, f: float):
        self._items.append((f, index))

    def pop(self) -> Optional[int]:
        best_pos = None
        lowest_f = float("inf")
        for pos, (f, _) in enumerate(self._items):
            # 严格小于: 相同 f 保留先遇到的
            if f < lowest_f:
                best_pos = pos
                lowest_f = f
        if best_pos is None:
            return None
        _, index = self._items.pop(best_pos)
        return index

    def __len__(self) -> int:
        return len(self._items)


class HeapOpenSet(OpenSet):
    """heapq 实现, 以 (f, 插入序号) 排序, 与 LinearOpenSet 的出队顺序一致。"""

    def __init__(self):
        self._heap: List[Tuple[float, int, int]] = []
        self._counter = 0

    def push(self, index: int, f: float):
        heapq.heappush(self._heap, (f, self._counter, index))
        self._counter += 1

    def pop(self) -> Optional[int]:
        if not self._heap:
            return None
        _, _, index = heapq.heappop(self._heap)
        return index

    def __len__(self) -> int:
        return len(self._heap)


def make_open_set(method: OpenSetMethod) -> OpenSet:
    if method == OpenSetMethod.LINEAR_SCAN:
        return LinearOpenSet()
    if method == OpenSetMethod.BINARY_HEAP:
        return HeapOpenSet()
    raise ValueError(f"Unknown open set method: {method}")
