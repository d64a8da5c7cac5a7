"""Package metadata and naming constants."""

PACKAGE_NAME = "composition-registry"
__version__ = "0.1.0"
