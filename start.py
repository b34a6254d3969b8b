"""Simple console launcher for the route finder.

Asks for an origin and a destination, prints the shortest route
between them and the fuel cost of driving it.
"""

from __future__ import annotations

from routefinder.container import get_container
from routefinder.domain.models import FuelProfile
from routefinder.monitoring import configure_logging
from routefinder.services import RoutePlannerService


def _ask_float(prompt: str, default: float) -> float:
    answer = input(f"{prompt} [{default:g}] : ").strip()
    if not answer:
        return default
    return float(answer.replace(",", "."))


def main() -> None:
    configure_logging()
    container = get_container()
    planner: RoutePlannerService = container.resolve(RoutePlannerService)
    cost = container.config.cost

    print("=== Route finder ===")
    origin = input("Origin : ").strip()
    destination = input("Destination : ").strip()

    path, error = planner.find_route_safe(origin, destination)
    if error is not None or path is None:
        print(error)
        return

    try:
        profile = FuelProfile(
            autonomy=_ask_float("Autonomy", cost.autonomy),
            fuel_price=_ask_float("Fuel price", cost.fuel_price),
        )
    except ValueError as e:
        print(f"Invalid fuel profile: {e}")
        print(planner.format_result(path))
        return

    estimate = planner.estimate_delivery(origin, destination, profile)
    if estimate is not None:
        print(planner.format_estimate(estimate))


if __name__ == "__main__":
    main()
