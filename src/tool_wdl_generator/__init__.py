"""Tool WDL Generator.

Translates a command line tool's argument model into the properties used to
render a WDL task/workflow and its default inputs JSON:
- configuration loaded from `.env`
- structured logging
- WDL type, name and default value conversion with workflow output tracking
"""

__version__ = "0.1.0"

from tool_wdl_generator.generator.config import GeneratorSettings
from tool_wdl_generator.generator.workflow.work_unit import WorkUnitHandler, WorkUnitProperties

__all__ = ["__version__", "GeneratorSettings", "WorkUnitHandler", "WorkUnitProperties"]
