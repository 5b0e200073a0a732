from __future__ import annotations


def split_lines(text: str | None, strip_cr: bool = False) -> list[str]:
    """
    Split a document into lines on "\\n".

    Missing text is the empty document. A final "\\n" terminates the last
    line rather than opening a new, empty one.
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    if strip_cr:
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    return lines
