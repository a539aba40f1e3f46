from __future__ import annotations

from typing import Callable

import numpy as np
import simpy

from yard.load import Load


class LoadGenerator:
    """
    SimPy process delivering loads to the yard gate.

    Gaps between arrivals are exponential (Poisson arrivals); weights are
    uniform integers in [weight_min, weight_max]. Load names carry the arrival
    sequence number and the simulated arrival time, e.g. ``L0007@31.4``.
    """

    def __init__(
        self,
        *,
        env: simpy.Environment,
        interarrival_mean: float,
        weight_min: int,
        weight_max: int,
        seed: int,
    ):
        self.env = env
        self.interarrival_mean = float(interarrival_mean)
        self.weight_range = (int(weight_min), int(weight_max))
        self.rng = np.random.default_rng(seed)
        self.n_generated = 0

    def make_load(self) -> Load:
        lo, hi = self.weight_range
        load = Load(
            name=f"L{self.n_generated:04d}@{float(self.env.now):.1f}",
            weight=int(self.rng.integers(lo, hi + 1)),
        )
        self.n_generated += 1
        return load

    def run(self, on_load: Callable[[Load], None]) -> simpy.events.Event:
        def _arrivals() -> simpy.events.Event:
            while True:
                gap = float(self.rng.exponential(self.interarrival_mean))
                yield self.env.timeout(gap)
                on_load(self.make_load())

        return self.env.process(_arrivals())
