"""Injection of the docs index into markdown files.

The index lives between two marker comments. Re-running replaces the
marked block in place and leaves the rest of the file untouched.
"""

START_MARKER = "<!-- ASTRO-AGENTS-MD-START -->"
END_MARKER = "<!-- ASTRO-AGENTS-MD-END -->"


def wrap_index(index_content: str) -> str:
    """Surround index content with the start and end markers."""
    return f"{START_MARKER}\n{index_content}\n{END_MARKER}"


def inject_index(target_content: str, index_content: str) -> str:
    """
    Insert or replace the marked index block.

    Args:
        target_content: Existing file content, possibly empty
        index_content: Freshly generated index

    Returns:
        Updated file content
    """
    wrapped = wrap_index(index_content)

    start = target_content.find(START_MARKER)
    if start != -1:
        end = target_content.find(END_MARKER, start)
        # Unterminated block: everything after the start marker is ours
        tail = "" if end == -1 else target_content[end + len(END_MARKER):]
        return target_content[:start] + wrapped + tail

    if not target_content:
        separator = ""
    elif target_content.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"
    return f"{target_content}{separator}{wrapped}\n"
