"""Headless application that steps the flock and reports its state."""

import time
from typing import Optional

from config import boids as config
from boids import Flock, flock_stats


class Application:
    """Main application managing the fixed-step simulation loop."""

    def __init__(self, settings: Optional[dict] = None, seed: Optional[int] = None):
        self.settings = {**config.BOIDS, **(settings or {})}
        if seed is None:
            seed = config.SIMULATION["seed"]

        # Simulation
        self.flock = Flock.from_config(self.settings, seed=seed)

        # State
        self.dt = config.SIMULATION["dt"]
        self.report_every = config.SIMULATION["report_every"]
        self.frame = 0
        self.running = True
        self.fps = 0.0

        print(f"[App] Initialized {self.flock.num_boids:,} boids on sphere r={self.flock.radius:g}")

    def _update(self, dt: float):
        """Advance the simulation one frame."""
        # Cap dt so one step cannot jump across the sphere
        dt = min(dt, config.SIMULATION["max_dt"])
        self.flock.update(dt)
        self.frame += 1

    def _report(self):
        """Print a status line."""
        stats = flock_stats(self.flock)
        print(
            f"[App] Frame {self.frame:5d} | FPS: {self.fps:7.1f} | "
            f"Speed: {stats['mean_speed']:.3f} | Polarization: {stats['polarization']:.3f} | "
            f"Radius err: {stats['radius_error']:.2e}"
        )

    def run(self, frames: Optional[int] = None):
        """Main loop; runs ``frames`` frames (config default) or until Ctrl+C."""
        if frames is None:
            frames = config.SIMULATION["frames"]

        print("[App] Starting main loop...")
        start = time.perf_counter()
        try:
            while self.running and self.frame < frames:
                frame_start = time.perf_counter()
                self._update(self.dt)
                elapsed = time.perf_counter() - frame_start
                self.fps = 1.0 / elapsed if elapsed > 0 else 0.0

                if self.report_every and self.frame % self.report_every == 0:
                    self._report()
        except KeyboardInterrupt:
            print("\n[App] Interrupted")
        finally:
            self.running = False

        print(f"[App] Ran {self.frame} frames in {time.perf_counter() - start:.2f}s")
        print("[App] Shutdown complete")
