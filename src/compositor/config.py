"""Package-wide settings."""

# Samples per pixel in an Image (RGBA)
RGBA_CHANNELS = 4

# Blend factor used when a mix node is created without one
DEFAULT_MIX = 0.5

LOG_LEVEL_ENV = "COMPOSITOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
LOG_HANDLER_NAME = "compositor"
