"""Configuration for the spherical boids flocking simulation."""

BOIDS = {
    "count": 100,
    "sphere_radius": 100.0,
    "max_velocity": 10.0,

    # Flocking behavior
    "alignment_weight": 1.0,    # Match neighbor headings
    "cohesion_weight": 1.0,     # Move toward local centroid
    "separation_weight": 1.0,   # Avoid crowding
    "alignment_radius": 50.0,
    "cohesion_radius": 50.0,
    "separation_radius": 25.0,  # Minimum comfortable distance
}

# Clamp ranges enforced by the Flock setters
LIMITS = {
    "min_weight": 0.0,
    "max_weight": 10.0,
    "min_radius": 0.0,
    "min_velocity": 0.0,
}

SIMULATION = {
    "dt": 1.0 / 60.0,
    "max_dt": 0.05,        # Cap dt to keep a single step from jumping across the sphere
    "frames": 600,
    "report_every": 60,
    "seed": None,          # None = seed from wall clock
}
