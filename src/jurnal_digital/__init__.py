"""Jurnal Digital: REST API for daily character-education journals."""

__version__ = "1.0.0"
