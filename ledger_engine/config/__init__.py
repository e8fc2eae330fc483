"""
Configuration module for the Ledger Engine.

This module contains all configuration dictionaries for analysis and the dashboard.
"""

from .analysis_config import ANALYSIS_CONFIG, DASHBOARD_CONFIG

__all__ = [
    "ANALYSIS_CONFIG",
    "DASHBOARD_CONFIG",
]
