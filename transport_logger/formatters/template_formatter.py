"""
Template formatter

Substitutes ``{token}`` placeholders in a transport's line template.
"""

import re
from typing import Mapping, Optional

from transport_logger.core.call_site import CallSite
from transport_logger.core.log_level import LogLevel

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")

CALL_SITE_TOKENS = ("fileName", "lineNumber", "functionName", "columnNumber")


class TemplateFormatter:
    """
    Render a line template.

    Only the first occurrence of each known token is replaced; repeated
    occurrences and unknown tokens are left verbatim. Substitution is a single
    pass over the template, so substituted values are never scanned again.
    """

    def __init__(self, template: str):
        """
        Initialize template formatter.

        Args:
            template: Line template

        Example:
            formatter = TemplateFormatter("{level}|{name}|{content}")
            raw, formatted = formatter.render_pair(LogLevel.ERROR, tokens)
        """
        self.template = template

    def render(self, tokens: Mapping[str, str]) -> str:
        """
        Substitute tokens into the template.

        Args:
            tokens: Token name to replacement text

        Returns:
            Rendered line
        """
        seen = set()

        def substitute(match: "re.Match") -> str:
            key = match.group(1)
            if key in seen or key not in tokens:
                return match.group(0)
            seen.add(key)
            return tokens[key]

        return TOKEN_PATTERN.sub(substitute, self.template)

    def render_pair(self, level: LogLevel, tokens: Mapping[str, str]):
        """
        Render the raw and the colour-formatted variant of a line.

        The variants differ only in ``{level}``: the plain label for raw
        output, the colour-wrapped label for terminals.

        Returns:
            Tuple of (raw, formatted)
        """
        raw = self.render({**tokens, "level": level.label})
        formatted = self.render({**tokens, "level": level.colorize(level.label)})
        return raw, formatted

    def __repr__(self) -> str:
        """String representation."""
        return f"TemplateFormatter(template='{self.template}')"


def build_tokens(
    time: str,
    name: str,
    content: str,
    call_site: Optional[CallSite] = None,
) -> dict:
    """
    Collect replacement text for every token except ``{level}``.

    Call-site tokens are omitted when the call site is unknown, which leaves
    their placeholders in the output.
    """
    tokens = {"time": time, "name": name, "content": content}
    if call_site is not None:
        tokens["fileName"] = call_site.file_name
        tokens["lineNumber"] = str(call_site.line_number)
        tokens["functionName"] = call_site.function_name
        if call_site.column_number is not None:
            tokens["columnNumber"] = str(call_site.column_number)
    return tokens
