"""
Output Module
==============

Console display and report generation for pipeline runs.
"""

from hillplayfair.output.console import PipelineConsoleOutput
from hillplayfair.output.report import PipelineReportGenerator, wrap_letters

__all__ = [
    "PipelineConsoleOutput",
    "PipelineReportGenerator",
    "wrap_letters",
]
