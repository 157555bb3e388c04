#!/usr/bin/env python3
"""
Shared constants for Gravity Sim.

World units are abstract: one world unit is one pixel at 100% zoom, one tick is
one unit of time. Keeping tuning values here keeps the physics, camera and UI
consistent with each other.
"""

# Physics
G_GRAV = 0.1  # gravitational constant in world units
TRAIL_CAPACITY = 2000  # past positions kept per body

# Simulation speed selector (physics ticks per rendered frame)
SIMULATION_SPEEDS = (1, 2, 5, 10, 50, 100, 500)
DEFAULT_SIM_SPEED = 1

# Camera
MOVE_SPEEDS = (1.0, 2.0, 5.0, 10.0)
DEFAULT_MOVE_SPEED = 2.0
PAN_STEP = 5.0  # pixels per frame per move-speed unit
ZOOM_LEVELS = (
    0.2, 0.3, 0.5, 0.8, 1.0, 1.25, 1.5, 2.0, 2.5, 3.0,
    4.0, 5.0, 6.666667, 8.0, 10.0, 25.0, 50.0, 100.0,
)  # world units per pixel
DEFAULT_ZOOM_INDEX = 4  # 1.0, i.e. 100%

# Spawning bodies with drag and drop
SPAWN_MASS_RANGE = (10.0, 500.0)
SPAWN_VELOCITY_SCALE = 0.05  # world units per tick per pixel of drag
SPAWN_COLOR_RANGE = (100, 220)

# Frame statistics
FRAME_STATS_WINDOW = 30  # frames averaged for the mspf readout

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
FPS_CAP = 60
BACKGROUND_COLOR = (0, 0, 0)
ORBIT_COLOR = (40, 40, 160)
HUD_COLOR = (255, 255, 255)
HUD_HIGHLIGHT_COLOR = (150, 255, 150)
DRAG_LINE_COLOR = (255, 255, 255)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
