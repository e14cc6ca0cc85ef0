"""Input schemas and SIMM calibration tables."""
