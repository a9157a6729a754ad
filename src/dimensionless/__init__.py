"""Desktop reference calculator for fluid-mechanics dimensionless numbers."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("dimensionless-calculator")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
