"""Template-based pattern matching for shopping commands.

Converts patterns like "[add|buy] [#qty |]$item" into compiled regex,
matches against an utterance, and returns the extracted fields.

Syntax:
    [alt1|alt2|alt3]  - matches any of the alternatives (an empty alternative
                        makes the group optional)
    $name             - captures free text into a named field (non-greedy)
    #name             - captures a quantity token: digits or one..ten
    literal text      - matches literally (case-insensitive, flexible whitespace)

Put the separating space inside an optional group ("[me |]$item") so an
absent alternative doesn't demand two runs of whitespace.

Examples:
    >>> p = TemplatePattern("[add|buy] [#qty |]$item")
    >>> p.match("add 2 apples")
    {'qty': '2', 'item': 'apples'}
    >>> p.match("buy Brown Bread")
    {'item': 'Brown Bread'}
"""

import re

from voicecart.commands.numbers import QUANTITY_PATTERN


class TemplatePattern:
    """A compiled template pattern that can match text and extract named fields."""

    def __init__(self, template, greedy=False):
        self.template = template
        self._regex, self._group_map = _compile(template, greedy)

    def match(self, text):
        """Match text against this pattern. Returns dict of fields or None."""
        m = self._regex.match(text.strip().rstrip("?!.,"))
        if m is None:
            return None
        result = {}
        for group_num, field_name in self._group_map.items():
            value = m.group(group_num)
            if value is not None:
                result[field_name] = value.strip()
        return result

    def __repr__(self):
        return f"TemplatePattern({self.template!r})"


def match_any(templates, text):
    """Try matching text against a list of (template_or_TemplatePattern, tag) pairs.

    Returns (tag, fields_dict) for the first match, or None.
    """
    for tmpl, tag in templates:
        if isinstance(tmpl, str):
            tmpl = TemplatePattern(tmpl)
        result = tmpl.match(text)
        if result is not None:
            return tag, result
    return None


# --- Compilation internals ---

class _Compiler:
    """Stateful compiler that tracks capturing group numbers."""

    def __init__(self, greedy=False):
        self.greedy = greedy
        self.group_count = 0
        self.group_map = {}  # group_number -> field_name

    def compile_template(self, template):
        """Compile a full template string. Returns (regex_str, group_map)."""
        regex_str = self._compile_fragment(template)
        return '^' + regex_str + '$', self.group_map

    def _capture(self, name, pattern):
        self.group_count += 1
        self.group_map[self.group_count] = name
        return f'({pattern})'

    def _compile_fragment(self, fragment):
        """Compile a fragment to a regex string."""
        parts = []
        i = 0
        s = fragment
        while i < len(s):
            if s[i] == '[':
                depth = 1
                j = i + 1
                while j < len(s) and depth > 0:
                    if s[j] == '[':
                        depth += 1
                    elif s[j] == ']':
                        depth -= 1
                    j += 1
                alts = _split_alternatives(s[i+1:j-1])
                alt_patterns = [self._compile_fragment(alt) for alt in alts]
                parts.append('(?:' + '|'.join(alt_patterns) + ')')
                i = j
            elif s[i] in '$#':
                m = re.match(r'[$#]([a-zA-Z_]\w*)', s[i:])
                if m is None:
                    parts.append(re.escape(s[i]))
                    i += 1
                    continue
                if s[i] == '#':
                    parts.append(self._capture(m.group(1), QUANTITY_PATTERN))
                else:
                    parts.append(self._capture(m.group(1), '.+' if self.greedy else '.+?'))
                i += m.end()
            elif s[i] in ' \t':
                while i < len(s) and s[i] in ' \t':
                    i += 1
                parts.append(r'\s+')
            else:
                parts.append(re.escape(s[i]))
                i += 1
        return ''.join(parts)


def _split_alternatives(text):
    """Split on top-level | characters, respecting nested brackets."""
    alts = []
    depth = 0
    current = []
    for ch in text:
        if ch == '[':
            depth += 1
        elif ch == ']':
            depth -= 1
        elif ch == '|' and depth == 0:
            alts.append(''.join(current))
            current = []
            continue
        current.append(ch)
    alts.append(''.join(current))
    return alts


def _compile(template, greedy=False):
    """Compile a template string to a (compiled_regex, group_map) tuple."""
    compiler = _Compiler(greedy)
    pattern_str, group_map = compiler.compile_template(template)
    return re.compile(pattern_str, re.IGNORECASE), group_map


if __name__ == "__main__":
    demos = [
        ("[add|buy] [#qty |]$item", "add 2 apples"),
        ("[add|buy] [#qty |]$item", "buy three Brown Bread"),
        ("find [me |]$item[ under #max|]", "find me toothpaste under 5"),
        ("[change|set] $item to #qty", "set orange juice to four"),
    ]
    for tmpl, text in demos:
        print(f"  {tmpl!r:40s} {text!r:32s} => {TemplatePattern(tmpl).match(text)}")
