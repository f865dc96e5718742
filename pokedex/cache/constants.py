# Five minutes, matching the default session cache
DEFAULT_RETENTION_SECONDS = 300.0

# Lower bound on the sweep wait so a non-positive retention never spins
MIN_SWEEP_INTERVAL = 0.01
