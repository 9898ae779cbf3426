"""Source ingestion pipeline.

This module fetches and parses raw CSV sources and accumulates
per-entity series ready for corrections and alignment.
"""
