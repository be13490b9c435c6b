"""Define type aliases used throughout the runway simulation."""
PlaneId = int
Fuel = int
Ticks = int
