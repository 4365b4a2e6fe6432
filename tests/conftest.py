import matplotlib

# Headless backend for chart tests; must be selected before pyplot is imported.
matplotlib.use("Agg")
