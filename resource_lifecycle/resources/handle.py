# resource_lifecycle/resources/handle.py

from typing import List, Optional

from resource_lifecycle.counters import DEFAULT_COUNTERS, LifecycleCounters
from resource_lifecycle.errors import HandleDestroyedError, InvalidSizeError
from resource_lifecycle.identity import identity_hash
from resource_lifecycle.logger import get_logger
from resource_lifecycle.metrics import LifecycleMetrics
from resource_lifecycle.resources.base import NamedResource

logger = get_logger(__name__)


class ResourceHandle(NamedResource):
    """
    Именованный ресурс фиксированного размера, единолично владеющий своим payload.

    Жизненный цикл:
        live-owning → (после take/move_assign: live-empty, «оболочка») → destroyed
        live-owning → destroyed

    Разрушение происходит при выходе из with-блока (или явным destroy()):

        with ResourceHandle("texture1", 1000) as r1:
            with ResourceHandle.take(r1) as r2:
                ...

    Перемещение не считается конструированием: total_constructed считает
    «логические» ресурсы, а не экземпляры.
    """

    __slots__ = ("_name", "_payload", "_identity_hash", "_counters", "_metrics", "_destroyed")

    def __init__(
            self,
            name: str,
            size: int,
            *,
            counters: Optional[LifecycleCounters] = None,
            metrics: Optional[LifecycleMetrics] = None,
            algorithm: str = "fnv1a",
    ):
        """
        :param name: имя ресурса
        :param size: число элементов payload, >= 0
        :param counters: счётчики жизненного цикла (по умолчанию — процессные)
        :param metrics: необязательный журнал событий
        :param algorithm: алгоритм identity-хеша ("fnv1a" или "blake2b")
        """
        if size < 0:
            raise InvalidSizeError(size)
        self._name = name
        self._payload: List[int] = [0] * size
        self._identity_hash = identity_hash(name, algorithm)
        self._counters = counters if counters is not None else DEFAULT_COUNTERS
        self._metrics = metrics
        self._destroyed = False

        self._counters.record_construction()
        logger.info(f"Constructed: {name} (id: {self._identity_hash})")
        self._record("construct")

    # ------------------------------------------------------------------ #
    #   Передача владения                                                #
    # ------------------------------------------------------------------ #
    @classmethod
    def take(cls, source: "ResourceHandle") -> "ResourceHandle":
        """
        Перемещающее конструирование: новый экземпляр забирает имя, payload
        и identity-хеш источника, источник становится пустой «оболочкой».
        total_constructed не меняется, трасса разрушения для источника не пишется.
        Перемещение из «оболочки» допустимо и даёт ещё одну «оболочку».
        """
        if not isinstance(source, ResourceHandle):
            raise TypeError(f"cannot take ownership from {type(source).__name__}")
        source._ensure_alive("move from")

        handle = cls.__new__(cls)
        handle._name = ""
        handle._payload = []
        handle._identity_hash = 0
        handle._counters = source._counters
        handle._metrics = source._metrics
        handle._destroyed = False
        handle._adopt(source)

        handle._counters.record_move_construction()
        logger.debug(f"Moved: {handle._name} into a new handle")
        handle._record("move_construct")
        return handle

    def move_assign(self, source: "ResourceHandle") -> "ResourceHandle":
        """
        Перемещающее присваивание. Прежний payload цели просто отбрасывается,
        трасса разрушения не пишется. Самоприсваивание — no-op.
        """
        if source is self:
            logger.debug(f"Self move-assignment of {self._name} ignored")
            self._record("self_move_assign")
            return self
        if not isinstance(source, ResourceHandle):
            raise TypeError(f"cannot take ownership from {type(source).__name__}")
        self._ensure_alive("move into")
        source._ensure_alive("move from")

        self._adopt(source)
        logger.debug(f"Move-assigned: {self._name}")
        self._record("move_assign")
        return self

    def _adopt(self, source: "ResourceHandle") -> None:
        self._name, source._name = source._name, ""
        self._payload, source._payload = source._payload, []
        self._identity_hash, source._identity_hash = source._identity_hash, 0

    # ------------------------------------------------------------------ #
    #   Разрушение                                                       #
    # ------------------------------------------------------------------ #
    def destroy(self) -> None:
        """
        Конец области видимости. Повторный вызов ничего не делает.
        """
        if self._destroyed:
            logger.debug(f"destroy: {self._name} already destroyed")
            return
        self._destroyed = True
        self._payload = []
        self._counters.record_destruction()
        logger.info(f"Destructed: {self._name}")
        self._record("destroy")

    def __enter__(self) -> "ResourceHandle":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()

    # ------------------------------------------------------------------ #
    #   Доступ                                                           #
    # ------------------------------------------------------------------ #
    def get_name(self) -> str:
        return self._name

    def get_identity_hash(self) -> int:
        return self._identity_hash

    def get_payload_size(self) -> int:
        return len(self._payload)

    @property
    def is_husk(self) -> bool:
        """Экземпляр, из которого переместили ресурс."""
        return self._identity_hash == 0 and not self._name and not self._payload

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @staticmethod
    def get_total_constructed() -> int:
        return DEFAULT_COUNTERS.constructed

    @staticmethod
    def get_total_move_constructed() -> int:
        return DEFAULT_COUNTERS.move_constructed

    @staticmethod
    def get_total_destructed() -> int:
        return DEFAULT_COUNTERS.destructed

    @staticmethod
    def reset_counters() -> None:
        DEFAULT_COUNTERS.reset()

    # ------------------------------------------------------------------ #
    def _ensure_alive(self, action: str) -> None:
        if self._destroyed:
            raise HandleDestroyedError(f"cannot {action} destroyed handle {self._name!r}")

    def _record(self, event_type: str) -> None:
        if self._metrics is not None:
            self._metrics.record_event(event_type, self._name, self._identity_hash, self._counters)

    def __repr__(self):
        state = "destroyed" if self._destroyed else ("husk" if self.is_husk else "live")
        return (f"{self.__class__.__name__}({self._name!r}, size={len(self._payload)}, "
                f"id={self._identity_hash}, {state})")

    def __str__(self):
        return self._name
