"""Report serving components.

This module turns aligned datasets into chart images and exposes
them over a minimal HTTP endpoint.
"""
