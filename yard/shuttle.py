from __future__ import annotations

import argparse
import csv
import logging
import os
import sys
from collections import deque
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional

import simpy

# Allow running as a script: `python yard/shuttle.py`
if __package__ is None:  # pragma: no cover
    _ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _ROOT not in sys.path:
        sys.path.insert(0, _ROOT)

from yard.load import Load  # noqa: E402
from yard.load_generator import LoadGenerator  # noqa: E402
from yard.site import Yard  # noqa: E402

_logger = logging.getLogger(__name__)


@dataclass
class ShuttleConfig:
    seed: int = 7
    sim_horizon: float = 500.0

    # Containers
    origin_capacity: int = 400
    destination_capacity: int = 400
    truck_capacity: int = 100
    truck_registration: Optional[str] = "T-001"

    # Arrivals
    interarrival_mean: float = 4.0
    weight_min: int = 5
    weight_max: int = 40

    # Lane timing
    travel_time: float = 12.0
    handling_time: float = 1.0  # per loading cycle, also the idle retry delay

    # Logging
    log_dir: str = "data/logs"

    def validate(self) -> None:
        if self.sim_horizon <= 0:
            raise ValueError("sim_horizon must be > 0.")
        if not (0 < self.weight_min <= self.weight_max):
            raise ValueError("weights must satisfy 0 < weight_min <= weight_max.")
        if self.origin_capacity < 0:
            raise ValueError("origin_capacity must be >= 0.")
        if self.truck_capacity < self.weight_max:
            raise ValueError("truck_capacity must be >= weight_max, or heavy loads never leave the origin.")
        if self.destination_capacity < self.weight_max:
            raise ValueError("destination_capacity must be >= weight_max, or drop-offs can block the truck.")
        if self.interarrival_mean <= 0:
            raise ValueError("interarrival_mean must be > 0.")
        if self.travel_time < 0 or self.handling_time <= 0:
            raise ValueError("travel_time must be >= 0 and handling_time > 0.")


@dataclass
class TransferLogRow:
    time: float
    event: str  # "arrival" | "pick_up" | "drop_off" | "deliver"
    load_id: str
    load_name: str
    weight: int
    ok: int
    truck_weight: int
    origin_weight: int
    destination_weight: int


class ShuttleSimulator:
    """
    One truck shuttling loads on a fixed lane: origin storage -> destination storage.

    - Loads arrive at the origin (stochastic, SimPy)
    - The truck picks up waiting loads first-fit in arrival order until nothing else fits
    - Every pick-up and drop-off goes through the transfer protocol
    - Loads dropped at the destination are delivered and leave the yard
    """

    def __init__(self, cfg: ShuttleConfig):
        cfg.validate()
        self.cfg = cfg
        self.env = simpy.Environment()

        self.yard = Yard()
        self.origin = self.yard.add_storage(cfg.origin_capacity, name="origin")
        self.destination = self.yard.add_storage(cfg.destination_capacity, name="destination")
        self.truck = self.yard.add_truck(cfg.truck_capacity, registration=cfg.truck_registration)

        self.load_gen = LoadGenerator(
            env=self.env,
            interarrival_mean=cfg.interarrival_mean,
            weight_min=cfg.weight_min,
            weight_max=cfg.weight_max,
            seed=cfg.seed,
        )

        self.waiting: deque[Load] = deque()
        self.transfer_logs: list[TransferLogRow] = []

        # Summary counters
        self.n_arrived = 0
        self.n_refused = 0
        self.n_picked = 0
        self.n_delivered = 0
        self.weight_delivered = 0
        self.trips = 0

    def _log(self, event: str, load: Load, ok: bool) -> None:
        self.transfer_logs.append(
            TransferLogRow(
                time=float(self.env.now),
                event=event,
                load_id=load.load_id,
                load_name=load.name,
                weight=load.weight,
                ok=int(ok),
                truck_weight=self.truck.current_weight,
                origin_weight=self.origin.current_weight,
                destination_weight=self.destination.current_weight,
            )
        )

    def on_load(self, load: Load) -> None:
        self.n_arrived += 1
        accepted = self.origin.receive(load)
        if accepted:
            self.waiting.append(load)
        else:
            self.n_refused += 1
            _logger.info("origin full: refused %s (%d) at t=%.2f", load.name, load.weight, self.env.now)
        self._log("arrival", load, accepted)

    def load_truck(self) -> int:
        """Picks up every waiting load that still fits, oldest first. Returns count picked."""
        picked = 0
        for load in list(self.waiting):
            if self.truck.free_capacity <= 0:
                break
            if self.truck.pick_up(load, self.origin):
                self.waiting.remove(load)
                picked += 1
                self._log("pick_up", load, True)
        self.n_picked += picked
        return picked

    def unload_truck(self) -> None:
        for load in self.truck:
            dropped = self.truck.drop_off(load, self.destination)
            self._log("drop_off", load, dropped)
            if not dropped:
                continue
            self.destination.release(load)
            self.n_delivered += 1
            self.weight_delivered += load.weight
            self._log("deliver", load, True)

    def _truck_process(self):
        while True:
            if self.load_truck() == 0:
                yield self.env.timeout(self.cfg.handling_time)
                continue
            yield self.env.timeout(self.cfg.handling_time)
            yield self.env.timeout(self.cfg.travel_time)
            self.unload_truck()
            self.trips += 1
            yield self.env.timeout(self.cfg.travel_time)

    def run(self) -> None:
        self.load_gen.run(self.on_load)
        self.env.process(self._truck_process())
        self.env.run(until=float(self.cfg.sim_horizon))

    def in_yard(self) -> int:
        return len(self.origin) + len(self.truck) + len(self.destination)

    def write_logs(self) -> str:
        os.makedirs(self.cfg.log_dir, exist_ok=True)
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        out_path = os.path.join(self.cfg.log_dir, f"transfers_{ts}.csv")

        # Stable column order
        fieldnames = list(TransferLogRow.__dataclass_fields__.keys())
        with open(out_path, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames)
            w.writeheader()
            for row in self.transfer_logs:
                w.writerow(asdict(row))
        return out_path

    def print_summary(self) -> None:
        avg_trip_weight = self.weight_delivered / self.trips if self.trips > 0 else 0.0
        print("=== Shuttle Simulator Summary ===")
        print(f"sim_horizon={self.cfg.sim_horizon} truck={self.truck.label} capacity={self.truck.capacity}")
        print(f"arrived={self.n_arrived} refused={self.n_refused} picked={self.n_picked} delivered={self.n_delivered}")
        print(f"trips={self.trips} weight_delivered={self.weight_delivered} avg_trip_weight={avg_trip_weight:.2f}")
        print(
            f"left_at_origin={len(self.origin)} ({self.origin.current_weight}) "
            f"on_truck={len(self.truck)} ({self.truck.current_weight})"
        )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="SimPy shuttle: one truck moving loads from an origin to a destination storage.")
    p.add_argument("--seed", type=int, default=7)
    p.add_argument("--horizon", type=float, default=500.0)
    p.add_argument("--truck-capacity", type=int, default=100)
    p.add_argument("--origin-capacity", type=int, default=400)
    p.add_argument("--interarrival", type=float, default=4.0, help="Mean time between load arrivals")
    p.add_argument("--log-dir", type=str, default="data/logs")
    p.add_argument("-v", "--verbose", action="store_true", help="Log refused transfers")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = ShuttleConfig(
        seed=args.seed,
        sim_horizon=args.horizon,
        truck_capacity=args.truck_capacity,
        origin_capacity=args.origin_capacity,
        interarrival_mean=args.interarrival,
        log_dir=args.log_dir,
    )
    sim = ShuttleSimulator(cfg)
    sim.run()
    sim.print_summary()
    out_path = sim.write_logs()
    print(f"wrote_logs={out_path}")


if __name__ == "__main__":
    main()
