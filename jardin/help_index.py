"""Building the table of contents of the help text from its anchors."""

from __future__ import annotations

from dataclasses import dataclass, field

_ANCHOR = "<a name="


@dataclass
class HelpNode:
    """One entry of the help contents, pointing to an anchor of the text."""

    text: str
    anchor: str
    children: list[HelpNode] = field(default_factory=list)

    @property
    def target(self) -> str:
        """The link that jumps to this entry's anchor."""
        return "#" + self.anchor


def extract_anchors(html: str) -> list[str]:
    """Return the anchor names of an HTML text, at most one per ';' chunk."""
    names = []
    for chunk in html.split(";"):
        pos = chunk.find(_ANCHOR)
        if pos < 0:
            continue
        rest = chunk[pos + len(_ANCHOR) + 1:]
        length = rest.find(">") - 1
        names.append(rest if length < 0 else rest[:length])
    return names


def build_tree(anchors: list[str]) -> list[HelpNode]:
    """Arrange anchor names into top-level entries and their sections.

    A name without '/' opens a top-level entry; the names with '/' that
    follow it become its children, labelled by their second part. An entry
    whose label repeats an earlier one (ignoring case) is dropped together
    with its children, as are sections that come before any entry.
    """
    roots: list[HelpNode] = []
    current: HelpNode | None = None
    for name in anchors:
        parts = name.split("/")
        if len(parts) == 1:
            label = parts[0]
            if any(node.text.lower() == label.lower() for node in roots):
                current = None
            else:
                current = HelpNode(label, name)
                roots.append(current)
        elif current is not None:
            current.children.append(HelpNode(parts[1], name))
    return roots