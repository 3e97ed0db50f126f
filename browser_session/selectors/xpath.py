"""
XPath string helpers shared by translators and element scoping.
"""

from __future__ import annotations


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath 1.0 string literal."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


def split_union(xpath: str) -> list[str]:
    """Split ``xpath`` on top-level ``|`` operators."""
    branches: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    for i, ch in enumerate(xpath):
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in "'\"":
            quote = ch
        elif ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
        elif ch == "|" and depth == 0:
            branches.append(xpath[start:i].strip())
            start = i + 1
    branches.append(xpath[start:].strip())
    return [b for b in branches if b]


def _closing_paren(expr: str) -> int:
    depth = 0
    quote: str | None = None
    for i, ch in enumerate(expr):
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in "'\"":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    raise ValueError(f"unbalanced parentheses in xpath: {expr!r}")


def _prepend_branch(branch: str, prefix: str) -> str:
    if branch.startswith("("):
        end = _closing_paren(branch)
        return f"({prepend(branch[1:end], prefix)}){branch[end + 1:]}"
    if branch == ".":
        return prefix
    if branch.startswith("./"):
        return prefix + branch[1:]
    if branch.startswith("/"):
        return prefix + branch
    return f"{prefix}/{branch}"


def prepend(xpath: str, prefix: str) -> str:
    """
    Scope every top-level branch of ``xpath`` beneath ``prefix``.

        prepend(".//a | .//b", "/html/body") -> "/html/body//a | /html/body//b"
    """
    return " | ".join(_prepend_branch(b, prefix) for b in split_union(xpath))
