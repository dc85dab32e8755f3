#!/usr/bin/env python3
"""
Convenience entry point for flock recording.

Usage:
    python record.py                      # Pick a preset interactively
    python record.py --preset classic     # Record a preset
    python record.py --status classic     # Check recording status
    python record.py --list               # List all recordings
"""

from tools.record import main

if __name__ == "__main__":
    main()
