from .admonition import admonition_plugin
from .source_lines import source_line_plugin

__all__ = ["admonition_plugin", "source_line_plugin"]
