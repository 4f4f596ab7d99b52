"""Shared test configuration."""

import matplotlib

# Headless rendering for every test module
matplotlib.use("Agg")
