import logging
import os

# --- Window ---
WIDTH, HEIGHT = 1280, 720
FPS = 60
TITLE = "Particle Emitters"

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

EMITTER_COLOR = (128, 0, 128)  # Purple for emitter
EMITTER_SIZE = 20

# --- Simulation ---
# ceiling used by the interactive demo (the simulator itself defaults to 500)
UI_MAX_PARTICLES = 2000
UI_MAX_PARTICLES_LIMIT = 5000  # upper bound of the control panel slider

# seed for the shared random generator; unset means a different run every time
_seed = os.getenv("PARTICLE_SIM_SEED")
SEED = int(_seed) if _seed and _seed.strip().lstrip("-").isdigit() else None

# --- Logging ---
LOG_LEVEL = os.getenv("PARTICLE_SIM_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"
