# resource_lifecycle/metrics.py

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from resource_lifecycle.logger import get_logger

logger = get_logger(__name__)

EVENT_TYPES = ("construct", "move_construct", "move_assign", "self_move_assign", "destroy")


class LifecycleMetrics:
    """
    Журнал событий жизненного цикла хэндлов.
    Каждое событие хранит имя, identity-хеш и снимок счётчиков на момент события.
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    # ------------------------------------------------------------------ #
    #   Методы‑регистраторы                                              #
    # ------------------------------------------------------------------ #
    def record_event(self, event_type: str, name: str, identity_hash: int, counters) -> None:
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown lifecycle event «{event_type}»")
        self.events.append(
            {
                "seq": len(self.events),
                "event": event_type,
                "name": name,
                "identity_hash": identity_hash,
                **counters.snapshot(),
            }
        )

    def clear(self) -> None:
        self.events.clear()

    # ------------------------------------------------------------------ #
    #   Сводка результатов                                               #
    # ------------------------------------------------------------------ #
    def summary(self) -> dict:
        by_type: Dict[str, int] = {t: 0 for t in EVENT_TYPES}
        for rec in self.events:
            by_type[rec["event"]] += 1

        last = self.events[-1] if self.events else {}
        return {
            "total_events": len(self.events),
            "events_by_type": by_type,
            "final_constructed": last.get("constructed", 0),
            "final_move_constructed": last.get("move_constructed", 0),
            "final_destructed": last.get("destructed", 0),
            "final_live": last.get("live", 0),
            # подробный журнал
            "events": list(self.events),
        }

    def export(self, path: Optional[str]) -> Optional[Path]:
        """Пишет summary() в JSON; без пути ничего не делает."""
        if not path:
            logger.debug("export skipped: no output path")
            return None
        fn = Path(path)
        fn.parent.mkdir(parents=True, exist_ok=True)
        with open(fn, "w", encoding="utf-8") as out:
            json.dump(self.summary(), out, indent=2, ensure_ascii=False)
        logger.info(f"[Metrics] Lifecycle trace exported to {fn}")
        return fn
