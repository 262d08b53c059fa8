"""
Errors raised while turning plan text into a Plan.

Every error is deterministic for a given input. Nothing here is retried:
getting a better plan means asking the model again, which is the caller's call.
"""

from typing import Optional


class PlanParseError(ValueError):
    pass


class MarkupSyntaxError(PlanParseError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class NoPlanFound(PlanParseError):
    def __init__(self, text: str):
        super().__init__(f"Failed to parse plan xml string: '{text}'")
        self.text = text


class MalformedFragment(PlanParseError):
    def __init__(self, text: str, fragment: str):
        super().__init__(f"Failed to parse plan xml strings: '{text}' or '{fragment}'")
        self.text = text
        self.fragment = fragment


class FunctionNotFound(PlanParseError):
    def __init__(self, plugin_name: str, function_name: str):
        qualified = f"{plugin_name}.{function_name}" if plugin_name else function_name
        super().__init__(f"Failed to find function '{qualified}' in plugin '{plugin_name}'.")
        self.plugin_name = plugin_name
        self.function_name = function_name
