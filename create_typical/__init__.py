"""
Create Typical Building.

Configures an EnergyPlus building model (geometry, HVAC systems, climate
zone, code template) before simulation, delegating model generation to
openstudio-standards.
"""

__version__ = "0.1.0"
