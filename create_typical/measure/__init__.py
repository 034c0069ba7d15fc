"""
The Create Typical Building measure.

Usage:
    from create_typical.measure import CreateTypicalBuilding, MeasureRunner

    runner = MeasureRunner()
    ok = CreateTypicalBuilding().run(model, runner, {"template": "90.1-2013"})
"""

from .arguments import ArgumentDefinition, MeasureArguments, argument_definitions
from .runner import MeasureRunner, MessageLevel, RunMessage
from .measure import CreateTypicalBuilding, process_hvac_to_zone_mapping

__all__ = [
    "ArgumentDefinition",
    "MeasureArguments",
    "argument_definitions",
    "MeasureRunner",
    "MessageLevel",
    "RunMessage",
    "CreateTypicalBuilding",
    "process_hvac_to_zone_mapping",
]
