"""Control Linux LED class devices through sysfs."""

__version__ = "0.3.0"
