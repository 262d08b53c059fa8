import re

from plan_compiler.core.errors import MalformedFragment, MarkupSyntaxError, NoPlanFound
from plan_compiler.core.logging import get_logger, safe_snippet
from plan_compiler.parsing.tree import find_elements, parse_fragment

log = get_logger("parsing.fragment")

SOLUTION_TAG = "plan"
PLAN_OPEN = re.compile(r"<plan\b")
PLAN_CLOSE = "</plan>"


def _match_plan(text: str):
    """
    First match of <plan\\b[^>]*>(.*?)</plan> (DOTALL) without backtracking.
    Later opening tags end no earlier than the first one, so only the first
    '<plan' can start the leftmost match; checking it alone keeps this linear.
    """
    opening = PLAN_OPEN.search(text)
    if opening is None:
        return None
    open_end = text.find(">", opening.end())
    if open_end == -1:
        return None
    close = text.find(PLAN_CLOSE, open_end + 1)
    if close == -1:
        return None
    return text[opening.start():close + len(PLAN_CLOSE)]


def _find_plan(text: str):
    fragment = _match_plan(text)
    if fragment is None:
        # closing tag often gets cut off by the model's length limit
        fragment = _match_plan(text + PLAN_CLOSE)
    return fragment


def extract_fragment(raw_text: str) -> str:
    """
    Return the part of raw_text that parses as plan markup.
    If the whole text is well-formed and holds a <plan> element it is returned
    as is; otherwise the first <plan>...</plan> block is cut out (adding a
    missing closing tag) and parsed on its own.
    """
    text = raw_text or ""
    first_error = None
    try:
        root = parse_fragment(text)
    except MarkupSyntaxError as e:
        first_error = e
        log.warning(f"Plan text is not well-formed ({e}). Snippet={safe_snippet(text)}. Trying <plan> extraction...")
    else:
        if next(find_elements(root, SOLUTION_TAG), None) is not None:
            return text

    fragment = _find_plan(text)
    if fragment is None:
        raise NoPlanFound(text) from first_error

    try:
        parse_fragment(fragment)
    except MarkupSyntaxError as e:
        raise MalformedFragment(text, fragment) from e
    return fragment
