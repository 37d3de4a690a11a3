# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-matching rule tables for function and class detection.

Each table is an ordered tuple of :class:`PatternRule`. Rules are evaluated
independently against every line; overlap between rules is absorbed by the
per-file name deduplication in the extractor.
"""

import re
from dataclasses import dataclass

from symscan.model import SymbolKind


@dataclass(frozen=True)
class PatternRule:
    """Describe one line-level detection rule.

    Attributes:
        label: Short identifier of the syntax the rule targets.
        pattern: Compiled line pattern.
        name_group: Group index holding the symbol name.
        require_previous: Pattern the preceding line must match, if any.
    """

    label: str
    pattern: re.Pattern[str]
    name_group: int
    require_previous: re.Pattern[str] | None = None

    def match_name(self, line: str, previous_line: str | None) -> str | None:
        """Return the captured symbol name when this rule fires on ``line``.

        Args:
            line: Current physical line.
            previous_line: Preceding line, or ``None`` on the first line.

        Returns:
            Captured name, or ``None`` when the rule does not apply.
        """
        match = self.pattern.search(line)
        if match is None:
            return None
        if (
            self.require_previous is not None
            and previous_line is not None
            and self.require_previous.search(previous_line) is None
        ):
            return None
        return match.group(self.name_group)


def _rule(
    label: str, pattern: str, name_group: int, require_previous: str | None = None
) -> PatternRule:
    return PatternRule(
        label=label,
        pattern=re.compile(pattern),
        name_group=name_group,
        require_previous=re.compile(require_previous) if require_previous else None,
    )


FUNCTION_RULES: tuple[PatternRule, ...] = (
    # JavaScript / TypeScript
    _rule("function-declaration", r"^\s*(async\s+)?function\s+(\w+)\s*\(", 2),
    _rule(
        "arrow-binding",
        r"^\s*(?:export\s+)?(?:const|let|var)\s+(\w+)\s*=\s*(async\s+)?\(.*\)\s*=>",
        1,
    ),
    _rule(
        "method-after-modifier",
        r"^\s*(?:async\s+)?(\w+)\s*\(.*\)\s*\{",
        1,
        require_previous=r"^\s*(?:public|private|protected|static|\*)",
    ),
    # Go
    _rule("go-func", r"^\s*func\s+(\w+)\s*\(", 1),
    # Python
    _rule("python-def", r"^\s*def\s+(\w+)\s*\(", 1),
    # Java / C# / C++
    _rule(
        "typed-return",
        r"^\s*(?:public|private|protected|static|\w+)?\s+(?:\w+)\s+(\w+)\s*\(",
        1,
    ),
    # PHP
    _rule("php-function", r"^\s*function\s+(\w+)\s*\(", 1),
)

CLASS_RULES: tuple[PatternRule, ...] = (
    _rule("class-declaration", r"^\s*(?:export\s+)?class\s+(\w+)", 1),
    _rule(
        "visibility-class",
        r"^\s*(?:public|private|protected)?\s*class\s+(\w+)",
        1,
    ),
    _rule("indented-class", r"^\s*class\s+(\w+)", 1),
)

RULES_BY_KIND: dict[SymbolKind, tuple[PatternRule, ...]] = {
    "function": FUNCTION_RULES,
    "class": CLASS_RULES,
}
