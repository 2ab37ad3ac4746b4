"""
Microbenchmark: time per step vs number of balls.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from ball_sim.config import SimConfig
from ball_sim.scene import Scene
from ball_sim.seeding import populate
from ball_sim.profiler import Profiler
from ball_sim.types import Boundary


def run(n: int, solver: str, steps: int = 300):
    prof = Profiler()
    side = 40.0 * np.sqrt(n) + 200.0
    scene = Scene(
        config=SimConfig(boundary=Boundary(0.0, 0.0, side, side), solver=solver),
        profiler=prof,
    )

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    populate(scene, n, radius_range=(5.0, 15.0), rng=rng)

    # warmup
    for _ in range(30):
        scene.step(1 / 120)

    t0 = time.perf_counter()
    for _ in range(steps):
        scene.step(1 / 120)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary(), scene.sleeping_count


if __name__ == "__main__":
    for solver in ["snapshot", "sequential"]:
        print(f"--- {solver} ---")
        for n in [10, 50, 100, 200]:
            per_step, summary, asleep = run(n, solver)
            print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  asleep={asleep}")
            for k in ["integrate", "contacts", "resolve", "contain", "sleep"]:
                if k in summary:
                    print(" ", k, summary[k])
            print()
