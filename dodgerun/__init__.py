"""Building blocks for a lane-dodging arcade game: vectors, colliders, input, camera, particles and asset banks."""

__version__ = "0.1.0"