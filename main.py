"""
Spherical Boids Simulation
==========================

A headless flocking simulation of boids constrained to a sphere.

Runs the flock with the settings in config/boids.py and prints a status
line every few frames. Press Ctrl+C to stop early.

For offline trajectory recording use record.py.
"""

from core import Application


def main():
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
