from .system_host import SystemHost

__all__ = ["SystemHost"]
