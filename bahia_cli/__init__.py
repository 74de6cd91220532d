"""
Bahía lanes CLI - Command-line caller for the lane registry.

Usage:
    bahia-lanes report config/lanes/bahia_cadiz.yaml
    bahia-lanes report config/lanes/bahia_cadiz.yaml --set-status "Vía Verde=Cerrado por obras"
    bahia-lanes total config/lanes/bahia_cadiz.yaml
    bahia-lanes status config/lanes/bahia_cadiz.yaml "Vía Verde"
    bahia-lanes list config/lanes/bahia_cadiz.yaml
"""

__version__ = "1.0.0"
