"""
Portal Tool Package

Membership and pricing state resolution for a subscription content site.
Resolves Member → Subscription → Price and Site → Product → Price lookups.
"""

__version__ = "1.0.0"
