# resource_lifecycle/counters.py

import threading
from typing import Dict


class LifecycleCounters:
    """
    Общие счётчики жизненного цикла хэндлов.

    * constructed       – «логические» конструирования (move сюда не входит);
    * move_constructed  – экземпляры, созданные перемещением;
    * destructed        – все разрушения, включая пустые «оболочки» после move.

    Инвариант: constructed + move_constructed - destructed == число живых экземпляров.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.constructed: int = 0
        self.move_constructed: int = 0
        self.destructed: int = 0

    def record_construction(self) -> None:
        with self._lock:
            self.constructed += 1

    def record_move_construction(self) -> None:
        with self._lock:
            self.move_constructed += 1

    def record_destruction(self) -> None:
        with self._lock:
            self.destructed += 1

    def reset(self) -> None:
        """
        Обнуляет все счётчики. Вызывать только между независимыми сценариями:
        живые экземпляры предыдущего сценария рассинхронизируют инвариант.
        """
        with self._lock:
            self.constructed = 0
            self.move_constructed = 0
            self.destructed = 0

    @property
    def live(self) -> int:
        return self.constructed + self.move_constructed - self.destructed

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return {
                "constructed": self.constructed,
                "move_constructed": self.move_constructed,
                "destructed": self.destructed,
                "live": self.constructed + self.move_constructed - self.destructed,
            }

    def __repr__(self):
        return (f"LifecycleCounters(constructed={self.constructed}, "
                f"move_constructed={self.move_constructed}, destructed={self.destructed})")


# процессные счётчики по умолчанию
DEFAULT_COUNTERS = LifecycleCounters()
