# resource_lifecycle/demo.py

from typing import Any, Dict, Optional

from resource_lifecycle.config import Settings
from resource_lifecycle.counters import DEFAULT_COUNTERS, LifecycleCounters
from resource_lifecycle.logger import get_logger
from resource_lifecycle.metrics import LifecycleMetrics
from resource_lifecycle.resources.handle import ResourceHandle

logger = get_logger(__name__)


class LifecycleDemo:
    """
    Фасад демонстрации: прогоняет два сценария над ResourceHandle
    (конструирование/разрушение и перемещение), пишет счётчики в лог
    и собирает журнал событий.
    """

    def __init__(
            self,
            settings: Optional[Settings] = None,
            counters: Optional[LifecycleCounters] = None,
    ):
        self.cfg = settings or Settings()
        self.counters = counters if counters is not None else DEFAULT_COUNTERS
        self.metrics = LifecycleMetrics()

    def _handle(self, name: str, size: int) -> ResourceHandle:
        return ResourceHandle(
            name,
            size,
            counters=self.counters,
            metrics=self.metrics,
            algorithm=self.cfg.identity.algorithm,
        )

    def run_construction_scenario(self) -> Dict[str, int]:
        scenario = self.cfg.demo.construction
        self.counters.reset()
        logger.info("=== Test 1: Construction ===")

        with self._handle(scenario.name, scenario.size):
            constructed = self.counters.constructed
            destructed_in_scope = self.counters.destructed
            logger.info(f"Constructions: {constructed}")
            logger.info(f"Destructions: {destructed_in_scope}")

        destructed_after = self.counters.destructed
        logger.info(f"After destruction - Destructions: {destructed_after}")
        return {
            "constructed": constructed,
            "destructed_in_scope": destructed_in_scope,
            "destructed_after_scope": destructed_after,
        }

    def run_move_scenario(self) -> Dict[str, Any]:
        scenario = self.cfg.demo.move
        logger.info("=== Test 2: Move Semantics ===")
        self.counters.reset()

        with self._handle(scenario.name, scenario.size) as r1:
            constructed_before = self.counters.constructed
            with ResourceHandle.take(r1) as r2:
                r2_name = r2.get_name()
                r1_name = r1.get_name()
                constructed_after = self.counters.constructed
                logger.info(f"r2 name: {r2_name}")
                logger.info(f"r1 name: {r1_name}")
                logger.info(f"Constructions after move: {constructed_after}")
                logger.info(f"(Should be same as before: {constructed_before})")

        return {
            "r1_name": r1_name,
            "r2_name": r2_name,
            "constructed_before_move": constructed_before,
            "constructed_after_move": constructed_after,
            "destructed_after_scope": self.counters.destructed,
        }

    def run(self) -> Dict[str, Any]:
        results = {
            "construction": self.run_construction_scenario(),
            "move": self.run_move_scenario(),
        }
        out = self.cfg.output
        if out.path:
            self.metrics.export(out.path)
        if out.plot:
            # matplotlib тянем лениво: без plot он не нужен
            from resource_lifecycle.visualizer import LifecycleVisualizer
            LifecycleVisualizer(self.metrics.summary()).show_all()
        return results
