"""
Flocking Presets Library
========================

A collection of pre-configured spherical boids presets organized by category.
Each preset includes flock size, sphere radius, rule weights, neighbor radii
and recording settings.

Categories:
- TINY: Small flocks for testing on slow machines
- CLASSIC: Balanced flocking close to the default parameters
- RULES: One rule dominating, to study its effect in isolation
- CHAOS: Extreme parameters
"""

from typing import Dict, List, Optional, Tuple

PRESETS: Dict[str, dict] = {}

# -----------------------------------------------------------------------------
# TINY PRESETS (For testing)
# -----------------------------------------------------------------------------

PRESETS["tiny_flock"] = {
    "name": "Tiny Flock",
    "description": "Ten boids with default rules",
    "category": "TINY",
    "num_boids": 10,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,
    "alignment_weight": 1.0,
    "cohesion_weight": 1.0,
    "separation_weight": 1.0,
    "alignment_radius": 50.0,
    "cohesion_radius": 50.0,
    "separation_radius": 25.0,
    "total_frames": 100,
    "dt_per_frame": 0.1,
}

# -----------------------------------------------------------------------------
# CLASSIC PRESETS
# -----------------------------------------------------------------------------

PRESETS["classic"] = {
    "name": "Classic",
    "description": "Default weights and radii on a 100-unit sphere",
    "category": "CLASSIC",
    "num_boids": 200,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,
    "alignment_weight": 1.0,
    "cohesion_weight": 1.0,
    "separation_weight": 1.0,
    "alignment_radius": 50.0,
    "cohesion_radius": 50.0,
    "separation_radius": 25.0,
    "total_frames": 600,
    "dt_per_frame": 0.5,
}

PRESETS["murmuration"] = {
    "name": "Murmuration",
    "description": "Large flock with strong alignment and short separation range",
    "category": "CLASSIC",
    "num_boids": 800,
    "sphere_radius": 200.0,
    "max_velocity": 10.0,
    "alignment_weight": 2.5,
    "cohesion_weight": 1.0,
    "separation_weight": 1.5,
    "alignment_radius": 40.0,
    "cohesion_radius": 60.0,
    "separation_radius": 10.0,
    "total_frames": 1000,
    "dt_per_frame": 0.5,
}

# -----------------------------------------------------------------------------
# RULE ISOLATION PRESETS
# -----------------------------------------------------------------------------

PRESETS["alignment_only"] = {
    "name": "Alignment Only",
    "description": "Boids match headings but neither gather nor spread",
    "category": "RULES",
    "num_boids": 200,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,
    "alignment_weight": 3.0,
    "cohesion_weight": 0.0,
    "separation_weight": 0.0,
    "alignment_radius": 60.0,
    "cohesion_radius": 0.0,
    "separation_radius": 0.0,
    "total_frames": 600,
    "dt_per_frame": 0.5,
}

PRESETS["cohesion_clumps"] = {
    "name": "Cohesion Clumps",
    "description": "Strong cohesion, weak separation - tight clusters form",
    "category": "RULES",
    "num_boids": 200,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,
    "alignment_weight": 0.2,
    "cohesion_weight": 4.0,
    "separation_weight": 0.5,
    "alignment_radius": 30.0,
    "cohesion_radius": 40.0,
    "separation_radius": 5.0,
    "total_frames": 600,
    "dt_per_frame": 0.5,
}

PRESETS["separation_gas"] = {
    "name": "Separation Gas",
    "description": "Only separation - boids spread evenly like a gas",
    "category": "RULES",
    "num_boids": 200,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,
    "alignment_weight": 0.0,
    "cohesion_weight": 0.0,
    "separation_weight": 5.0,
    "alignment_radius": 0.0,
    "cohesion_radius": 0.0,
    "separation_radius": 30.0,
    "total_frames": 600,
    "dt_per_frame": 0.5,
}

# -----------------------------------------------------------------------------
# CHAOS PRESETS
# -----------------------------------------------------------------------------

PRESETS["max_weights"] = {
    "name": "Max Weights",
    "description": "Every rule at full strength with global neighborhoods",
    "category": "CHAOS",
    "num_boids": 300,
    "sphere_radius": 50.0,
    "max_velocity": 10.0,
    "alignment_weight": 10.0,
    "cohesion_weight": 10.0,
    "separation_weight": 10.0,
    "alignment_radius": 100.0,
    "cohesion_radius": 100.0,
    "separation_radius": 100.0,
    "total_frames": 400,
    "dt_per_frame": 1.0,
}

PRESETS["frozen"] = {
    "name": "Frozen",
    "description": "Zero max velocity - boids turn in place without moving",
    "category": "CHAOS",
    "num_boids": 100,
    "sphere_radius": 100.0,
    "max_velocity": 0.0,
    "alignment_weight": 1.0,
    "cohesion_weight": 1.0,
    "separation_weight": 1.0,
    "alignment_radius": 50.0,
    "cohesion_radius": 50.0,
    "separation_radius": 25.0,
    "total_frames": 100,
    "dt_per_frame": 0.5,
}


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

CATEGORY_ORDER = ["TINY", "CLASSIC", "RULES", "CHAOS"]


def get_preset_list() -> List[Tuple[str, dict]]:
    """Get list of all presets sorted by category."""
    return sorted(
        PRESETS.items(),
        key=lambda x: (CATEGORY_ORDER.index(x[1]["category"]) if x[1]["category"] in CATEGORY_ORDER else 99, x[0])
    )


def print_preset_menu():
    """Print formatted preset selection menu."""
    presets = get_preset_list()
    current_category = None

    print("\n" + "=" * 70)
    print("  SPHERICAL BOIDS RECORDING PRESETS")
    print("=" * 70)

    for idx, (key, preset) in enumerate(presets):
        if preset["category"] != current_category:
            current_category = preset["category"]
            print(f"\n{'─' * 70}")
            print(f"  {current_category}")
            print(f"{'─' * 70}")

        print(f"  [{idx:2d}] {preset['name']:<25} {preset['num_boids']:>6} boids | "
              f"{preset['total_frames']:>4} frames | r={preset['sphere_radius']:g}")
        print(f"       {preset['description']}")

    print(f"\n{'=' * 70}")


def get_preset_by_index(index: int) -> Tuple[Optional[str], Optional[dict]]:
    """Menu entry ``index`` as ``(key, preset)``; ``(None, None)`` when off the menu."""
    menu = get_preset_list()
    if index < 0 or index >= len(menu):
        return None, None
    return menu[index]


def get_preset_config(key: str) -> Optional[dict]:
    """
    Recording config for preset ``key``, with the session named after it.

    Returns a fresh dict so CLI overrides never touch ``PRESETS``, or None
    for an unknown key.
    """
    preset = PRESETS.get(key)
    if preset is None:
        return None
    return {**preset, "session_name": key}
