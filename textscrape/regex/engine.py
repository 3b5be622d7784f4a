"""Flat regex scan runner (built-in pair rules + optional YAML rules)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import yaml


@dataclass
class ScanRule:
    name: str
    pattern: str
    key_group: int = 1
    value_group: int = 2
    flags: Optional[str] = None


JSON_PAIR_RULE = ScanRule(
    name="json_pair",
    pattern=r'"([^"]+)":[ \t]*([^,\r\n]*)',
)

XML_ELEMENT_RULE = ScanRule(
    name="xml_element",
    pattern=r"<([^>]+)>([^<]*)</\1>",
)


def _parse_flags(flag_str: Optional[str]) -> int:
    if not flag_str:
        return 0
    mapping = {
        "I": re.IGNORECASE,
        "M": re.MULTILINE,
        "S": re.DOTALL,
        "X": re.VERBOSE,
        "A": re.ASCII,
    }
    flags = 0
    for ch in flag_str:
        if ch in mapping:
            flags |= mapping[ch]
    return flags


def compile_rule(rule: ScanRule) -> "re.Pattern[str]":
    return re.compile(rule.pattern, _parse_flags(rule.flags))


def iter_pairs(text: str, rule: ScanRule) -> Iterator[Tuple[str, str]]:
    """Yield one key/value pair per match, scanning left to right.

    Matches never overlap and there is no backtracking into text a previous
    match consumed.
    """
    for match in compile_rule(rule).finditer(text):
        yield match.group(rule.key_group), match.group(rule.value_group)


def scan_pairs(text: str, rule: ScanRule) -> Dict[str, str]:
    """Collect the pairs found by ``rule``; a repeated key keeps its last value."""
    return dict(iter_pairs(text, rule))


def load_rules(path: Path) -> List[ScanRule]:
    data = yaml.safe_load(path.read_text()) or []
    rules: List[ScanRule] = []
    for item in data:
        rules.append(
            ScanRule(
                name=item.get("name"),
                pattern=item.get("pattern", ""),
                key_group=int(item.get("key_group", 1)),
                value_group=int(item.get("value_group", 2)),
                flags=item.get("flags"),
            )
        )
    return rules


def run_rules(text: str, rules: Iterable[ScanRule]) -> Dict[str, str]:
    """Run scan rules over text in order and merge their pairs."""
    results: Dict[str, str] = {}
    for rule in rules:
        if not rule.pattern:
            continue
        results.update(scan_pairs(text, rule))
    return results
