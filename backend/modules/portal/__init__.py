"""
Portal module.

Client home and portal, and the professional dashboard.
"""

from .models import HOME_SLIDES, PortalSections, ProTools

__all__ = ["HOME_SLIDES", "PortalSections", "ProTools"]
