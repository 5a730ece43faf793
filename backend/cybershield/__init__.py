"""CyberShield backend: service catalog, contact form, and SPA hosting."""

__version__ = "1.0.0"
