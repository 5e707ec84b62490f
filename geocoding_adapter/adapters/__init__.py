"""Adapters layer - Concrete implementations of ports.

- Geocoding services (Google Geocoding API)
"""
