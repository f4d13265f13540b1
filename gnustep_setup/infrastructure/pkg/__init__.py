from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager

__all__ = ["PkgManager"]
