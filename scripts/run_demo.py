# scripts/run_demo.py

import sys

from resource_lifecycle.config import Settings
from resource_lifecycle.demo import LifecycleDemo
from resource_lifecycle.logger import setup_logging, get_logger

logger = get_logger(__name__)


def main():
    # Конфиг: CONFIG_PATH или config/default.yaml, иначе встроенные значения
    settings = Settings.load()

    setup_logging(settings)
    logger.debug("Loaded settings and configured logging")

    demo = LifecycleDemo(settings)
    demo.run()

    summary = demo.metrics.summary()
    print("\n=== Lifecycle Summary ===")
    for k, v in summary.items():
        if k != "events":
            print(f"{k:24}: {v}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
