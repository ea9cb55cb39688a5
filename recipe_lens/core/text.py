import re

# "- item", "• item", "* item", "1. item", "2) item", "3 item"
LIST_MARKER = re.compile(r"^[-•*\d]+[\s.)]")
# "Step 1", "step2" (anywhere a step line starts)
STEP_LINE = re.compile(r"^step\s*\d+", re.IGNORECASE)
# "Step 1:", "Step 2.", "STEP 3)"
STEP_LABEL = re.compile(r"^step\s*\d+[:.)]", re.IGNORECASE)


def non_empty_lines(text: str) -> list[str]:
    """Split text into trimmed lines, dropping blank ones."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def is_list_item(line: str) -> bool:
    return LIST_MARKER.match(line) is not None


def strip_list_marker(line: str) -> str:
    return LIST_MARKER.sub("", line, count=1).strip()


def is_step_line(line: str) -> bool:
    return STEP_LINE.match(line) is not None


def strip_step_label(line: str) -> str:
    return STEP_LABEL.sub("", line, count=1).strip()


def append_unique(items: list[str], value: str) -> None:
    # Exact-match dedupe, order of first appearance wins
    if value and value not in items:
        items.append(value)
