"""Package metadata and naming constants."""

PACKAGE_NAME = "flyweight-registry"
__version__ = "1.0.0"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
