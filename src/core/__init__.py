"""Pairing core: settings, domain, interfaces and services."""
