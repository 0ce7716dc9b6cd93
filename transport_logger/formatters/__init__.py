"""
Log formatters module

Value rendering for message bodies and token substitution for line templates.
"""

from transport_logger.formatters.template_formatter import (
    TemplateFormatter,
    build_tokens,
)
from transport_logger.formatters.value_formatter import format_value, format_values

__all__ = [
    "TemplateFormatter",
    "build_tokens",
    "format_value",
    "format_values",
]
