"""
Spherical Boids Offline Recorder
================================

Steps a flock headlessly and saves every frame to disk for later inspection.
Recordings are output only; a session cannot be resumed.

Usage:
    python -m tools.record                      # Pick a preset interactively
    python -m tools.record --preset classic     # Record a preset
    python -m tools.record --preset-id 0 -n 2k  # Preset by index, 2000 boids
    python -m tools.record --status classic     # Check recording status
    python -m tools.record --list               # List all recordings

Output:
    recordings/<session_name>/
        metadata.json     - Recording settings and flock parameters
        frame_0000.npz    - positions/velocities (float32)
        ...
"""

import sys
import json
import time
import shutil
import argparse
import numpy as np
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Tuple

from tools.presets import (
    PRESETS, print_preset_menu, get_preset_by_index, get_preset_config
)

# Get project root (parent of tools/)
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_OUTPUT = PROJECT_ROOT / "recordings"
METADATA_FILE = "metadata.json"


def get_recording_dir(session_name: str, root: Optional[Path] = None) -> Path:
    """Get the directory for a recording session."""
    base = Path(root or DEFAULT_OUTPUT) / session_name
    base.mkdir(parents=True, exist_ok=True)
    return base


def save_metadata(rec_dir: Path, config: dict, parameters: dict, start_time: float):
    """Write the session config plus the flock's clamped parameters as JSON."""
    metadata = dict(config)
    metadata["parameters"] = parameters
    metadata["start_time"] = start_time
    metadata["start_datetime"] = datetime.fromtimestamp(start_time).isoformat()
    (rec_dir / METADATA_FILE).write_text(json.dumps(metadata, indent=2))


def load_metadata(rec_dir: Path) -> dict:
    return json.loads((rec_dir / METADATA_FILE).read_text())


def get_completed_frames(rec_dir: Path) -> int:
    """Count how many consecutive frames have been recorded."""
    count = 0
    while (rec_dir / f"frame_{count:04d}.npz").exists():
        count += 1
    return count


def save_frame(rec_dir: Path, frame_idx: int, positions: np.ndarray, velocities: np.ndarray):
    """Save a single frame to disk (uncompressed for speed)."""
    np.savez(
        rec_dir / f"frame_{frame_idx:04d}.npz",
        positions=positions.astype(np.float32),
        velocities=velocities.astype(np.float32),
    )


def load_frame(rec_dir: Path, frame_idx: int) -> Tuple[np.ndarray, np.ndarray]:
    """Load a single frame from disk as (positions, velocities)."""
    with np.load(rec_dir / f"frame_{frame_idx:04d}.npz") as data:
        return data["positions"], data["velocities"]


def format_time(seconds: float, short: bool = False) -> str:
    """Format seconds as human-readable time.

    Args:
        seconds: Time in seconds
        short: If True, format for frame time (show ms for <1s)
               If False, format for elapsed time (stay in seconds until 90s)
    """
    if short and seconds < 1.0:
        return f"{seconds*1000:.0f}ms"
    if seconds < 90:
        return f"{seconds:.1f}s" if short else f"{seconds:.0f}s"
    elif seconds < 3600:
        return f"{seconds/60:.1f}m"
    else:
        return f"{seconds/3600:.1f}h"


def format_eta(seconds: float) -> str:
    """Format ETA - stays in seconds until 90s, then switches to hh:mm:ss."""
    if seconds < 0:
        return "calculating..."
    if seconds < 90:
        return f"{seconds:.0f}s"
    return str(timedelta(seconds=int(seconds)))


def print_progress(frame: int, total: int, frame_time: float, elapsed: float, eta: float):
    """Print a progress bar and details, overwriting the previous two lines."""
    pct = (frame + 1) / total * 100
    term_width = shutil.get_terminal_size().columns

    bar_width = max(10, term_width - 2)
    filled = int(bar_width * (frame + 1) / total)
    bar = "█" * filled + "░" * (bar_width - filled)

    details = (f"{pct:5.1f}% | Frame {frame+1:4d}/{total} | "
               f"Time: {format_time(frame_time, short=True):>6s} | "
               f"Elapsed: {format_time(elapsed):>6s} | ETA: {format_eta(eta)}")

    if frame > 0:
        sys.stdout.write("\033[2A")  # Move up 2 lines
    sys.stdout.write(f"\033[K[{bar}]\n")
    sys.stdout.write(f"\033[K{details}\n")
    sys.stdout.flush()


def record(config: dict, root: Optional[Path] = None) -> Path:
    """Record ``config['total_frames']`` frames of a flock built from ``config``."""
    # Import here to avoid compiling Numba kernels for --status/--list
    from boids import Flock
    from boids.metrics import polarization

    session_name = config.get("session_name", "session")
    rec_dir = get_recording_dir(session_name, root)
    total_frames = int(config["total_frames"])
    dt = float(config.get("dt_per_frame", 0.5))

    flock = Flock.from_config(config, seed=config.get("seed"))

    start_time = time.time()
    save_metadata(rec_dir, config, flock.parameters(), start_time)

    print(f"[Record] Starting recording: {session_name}")
    print(f"[Record] Boids: {flock.num_boids:,}, r={flock.radius:g}")
    print(f"[Record] Frames: {total_frames}, dt={dt}\n")

    frame_times = []
    frame = 0
    try:
        for frame in range(total_frames):
            frame_start = time.time()

            flock.update(dt)
            save_frame(rec_dir, frame, flock.positions, flock.velocities)

            frame_time = time.time() - frame_start
            frame_times.append(frame_time)
            elapsed = time.time() - start_time
            avg_time = sum(frame_times[-10:]) / len(frame_times[-10:])
            eta = avg_time * (total_frames - frame - 1)
            print_progress(frame, total_frames, frame_time, elapsed, eta)

        print(f"[Record] ✓ Recording complete!")
        print(f"[Record] Final polarization: {polarization(flock.velocities):.3f}")
        print(f"[Record] Total time: {format_time(time.time() - start_time)}")
        print(f"[Record] Output: {rec_dir}")
    except KeyboardInterrupt:
        print(f"\n[Record] Stopped at frame {frame} ({get_completed_frames(rec_dir)} frames saved)")

    return rec_dir


def show_status(session_name: str, root: Optional[Path] = None):
    """Show recording status for a specific session."""
    rec_dir = Path(root or DEFAULT_OUTPUT) / session_name

    if not (rec_dir / METADATA_FILE).exists():
        print(f"[Status] No recording found: {session_name}")
        return

    metadata = load_metadata(rec_dir)
    completed = get_completed_frames(rec_dir)
    total = metadata["total_frames"]
    pct = completed / total * 100 if total else 100.0

    params = metadata["parameters"]

    print(f"\n[Status] Recording: {session_name}")
    print(f"  Boids: {params['num_boids']:,}")
    print(f"  Sphere radius: {params['sphere_radius']:g}")
    print(f"  Progress: {completed}/{total} frames ({pct:.1f}%)")
    print(f"  Started: {metadata.get('start_datetime', 'unknown')}")


def list_recordings(root: Optional[Path] = None):
    """List all available recordings."""
    recordings_dir = Path(root or DEFAULT_OUTPUT)

    if not recordings_dir.exists():
        print("[List] No recordings directory found")
        return

    sessions = [d.name for d in recordings_dir.iterdir() if d.is_dir() and (d / METADATA_FILE).exists()]

    if not sessions:
        print("[List] No recordings found")
        return

    print(f"\n[List] Found {len(sessions)} recording(s):\n")

    for session in sorted(sessions):
        rec_dir = recordings_dir / session
        metadata = load_metadata(rec_dir)
        completed = get_completed_frames(rec_dir)
        total = metadata["total_frames"]
        status = "✓" if completed >= total else f"{completed / total * 100:.0f}%"

        print(f"  {session:30s} | {metadata['parameters']['num_boids']:>8,} boids | {completed:>4}/{total:<4} frames | {status}")

    print()


def select_preset_interactive() -> Optional[dict]:
    """Show the preset menu and read a choice from stdin."""
    print_preset_menu()
    max_idx = len(PRESETS) - 1

    while True:
        try:
            choice = input(f"\n  Select preset [0-{max_idx}] or 'q' to quit: ").strip().lower()
            if choice == "q":
                return None
            key, preset = get_preset_by_index(int(choice))
            if key:
                print(f"\n  Selected: {preset['name']}")
                return get_preset_config(key)
            print(f"  Invalid selection. Enter a number 0-{max_idx}.")
        except ValueError:
            print(f"  Invalid input. Enter a number 0-{max_idx} or 'q' to quit.")
        except (KeyboardInterrupt, EOFError):
            print("\n\n  Cancelled.")
            return None


COUNT_SUFFIXES = {"k": 1_000, "m": 1_000_000}


def parse_boid_count(text: str) -> int:
    """
    Boid count from ``500``, ``2k`` or ``1.5M``.

    Raises ValueError for negative, fractional or unreadable counts.
    """
    text = text.strip().lower()
    scale = COUNT_SUFFIXES.get(text[-1:])
    count = float(text[:-1]) * scale if scale else float(text)
    if count < 0 or not count.is_integer():
        raise ValueError(f"not a boid count: {text!r}")
    return int(count)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Spherical boids offline recorder")
    parser.add_argument("--status", type=str, metavar="SESSION", help="Show recording status")
    parser.add_argument("--list", action="store_true", help="List all recordings")
    parser.add_argument("--preset", type=str, help="Use preset by name (e.g., 'classic')")
    parser.add_argument("--preset-id", type=int, help="Use preset by index number")
    parser.add_argument("--boids", "-n", type=str, help="Override number of boids (e.g., 500, 2k)")
    parser.add_argument("--frames", "-f", type=int, help="Override number of frames")
    parser.add_argument("--dt", type=float, help="Override time step")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument("--output", "-o", type=str, help="Recordings directory (default: ./recordings)")
    args = parser.parse_args(argv)

    root = Path(args.output) if args.output else None

    if args.list:
        list_recordings(root)
        return

    if args.status:
        show_status(args.status, root)
        return

    # Handle preset selection
    if args.preset_id is not None:
        key, preset = get_preset_by_index(args.preset_id)
        if not key:
            print(f"[Record] Invalid preset index: {args.preset_id}")
            return
        config = get_preset_config(key)
        print(f"[Record] Using preset [{args.preset_id}]: {preset['name']}")
    elif args.preset:
        config = get_preset_config(args.preset)
        if config is None:
            print(f"[Record] Unknown preset: {args.preset}")
            print("[Record] Available presets:")
            for key in sorted(PRESETS.keys()):
                print(f"  - {key}")
            return
        print(f"[Record] Using preset: {args.preset}")
    else:
        config = select_preset_interactive()
        if config is None:
            return

    # Apply overrides from command line
    if args.boids:
        try:
            config["num_boids"] = parse_boid_count(args.boids)
        except ValueError:
            print(f"[Record] Invalid boids value: {args.boids}")
            return
        print(f"[Record] Override: {config['num_boids']:,} boids")

    if args.frames is not None:
        config["total_frames"] = args.frames
        print(f"[Record] Override: {args.frames} frames")

    if args.dt is not None:
        config["dt_per_frame"] = args.dt
        print(f"[Record] Override: dt={args.dt}")

    if args.seed is not None:
        config["seed"] = args.seed

    record(config, root)


if __name__ == "__main__":
    main()
