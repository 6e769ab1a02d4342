"""Exit Planner CLI Entry

Follows P&A architecture: CLI → Driving Adapter → Application Service
"""

import fire

from apps.planner.src.lifespan import get_injector, shutdown, startup
from apps.planner.src.adapters.driving.cli.planner_controller import (
    PlannerController,
)


def main() -> None:
    startup()
    try:
        fire.Fire(PlannerController(get_injector()))
    finally:
        shutdown()


if __name__ == "__main__":
    main()
