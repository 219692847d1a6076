import re
from typing import Iterable, Optional


class Rule:
    """
        Class Rule maps a tag to a path segment, or to None when it does not apply
    """

    def apply(self, tag: str) -> Optional[str]:
        raise NotImplementedError

    def __contains__(self, tag: str) -> bool:
        """
            `tag in rule`
        """
        if not isinstance(tag, str):
            return False
        return self.apply(tag) is not None


class ContainsRule(Rule):
    """
        Applies when the tag contains `marker` anywhere
    """

    def __init__(self, marker: str, result: str):
        self.marker = marker
        self.result = result

    def apply(self, tag: str) -> Optional[str]:
        return self.result if self.marker in tag else None

    def __repr__(self):
        return f"ContainsRule('{self.marker}' -> '{self.result}')"


class PatternRule(Rule):
    """
        Applies when `pattern` is found in the tag (re.search semantics).

        `template` is formatted with the match groups, so
        PatternRule(r"-alpine-([0-9]+\\.[0-9]+)", "alpine-{0}") turns
        `3.1.4-alpine-3.18-r1` into `alpine-3.18`.
    """

    def __init__(self, pattern: str, template: str):
        self.pattern = re.compile(pattern)
        self.template = template

    def apply(self, tag: str) -> Optional[str]:
        match = self.pattern.search(tag)
        if not match:
            return None
        return self.template.format(*match.groups())

    def __repr__(self):
        return f"PatternRule('{self.pattern.pattern}' -> '{self.template}')"


class FallbackRule(Rule):
    """
        Always applies; put it last
    """

    def __init__(self, result: str):
        self.result = result

    def apply(self, tag: str) -> Optional[str]:
        return self.result

    def __repr__(self):
        return f"FallbackRule('{self.result}')"


def first_match(rules: Iterable[Rule], tag: str) -> Optional[str]:
    """Return the result of the first rule that applies, in list order."""
    for rule in rules:
        result = rule.apply(tag)
        if result is not None:
            return result
    return None
