"""
Function registry and resolver.
What it does:
- Registers callables (or bare descriptors) under plugin + function names
- Derives parameter defaults from a callable's signature
- Resolves (plugin_name, function_name) to a FunctionDescriptor
- Lists every registered function for display

And, the main purpose:
Give the plan compiler something to look function references up in.
"""


import inspect
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from plan_compiler.functions.schemas import FunctionDescriptor, ParameterView


class FunctionResolver(Protocol):
    def __call__(self, plugin_name: str, function_name: str) -> Optional[FunctionDescriptor]:
        ...


def _key(plugin_name: str, function_name: str) -> Tuple[str, str]:
    return (plugin_name or "").casefold(), (function_name or "").casefold()


def _describe_callable(fn: Callable[..., Any], plugin: str, name: str, description: Optional[str]) -> FunctionDescriptor:
    params: List[ParameterView] = []
    for p in inspect.signature(fn).parameters.values():
        if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
            continue
        default = None if p.default is p.empty or p.default is None else str(p.default)
        params.append(ParameterView(name=p.name, default_value=default))

    if description is None:
        doc = inspect.getdoc(fn) or ""
        description = doc.splitlines()[0].strip() if doc else ""

    return FunctionDescriptor(
        plugin_name=plugin,
        function_name=name,
        description=description,
        parameters=params,
    )


class FunctionRegistry:
    def __init__(self):
        self._functions: Dict[Tuple[str, str], Tuple[FunctionDescriptor, Optional[Callable[..., Any]]]] = {}

    def add(self, descriptor: FunctionDescriptor, fn: Optional[Callable[..., Any]] = None) -> FunctionDescriptor:
        self._functions[_key(descriptor.plugin_name, descriptor.function_name)] = (descriptor, fn)
        return descriptor

    def register(self, name: Optional[str] = None, *, plugin: str = "", description: Optional[str] = None):
        def deco(fn: Callable[..., Any]):
            self.add(_describe_callable(fn, plugin, name or fn.__name__, description), fn)
            return fn
        return deco

    def resolve(self, plugin_name: str, function_name: str) -> Optional[FunctionDescriptor]:
        # empty plugin name only sees the global namespace
        entry = self._functions.get(_key(plugin_name, function_name))
        return entry[0] if entry else None

    def get(self, plugin_name: str, function_name: str) -> FunctionDescriptor:
        descriptor = self.resolve(plugin_name, function_name)
        if descriptor is None:
            known = [d.qualified_name for d in self.describe_all()]
            raise KeyError(f"Unknown function: {plugin_name}.{function_name}. Known: {known}")
        return descriptor

    def get_callable(self, plugin_name: str, function_name: str) -> Optional[Callable[..., Any]]:
        entry = self._functions.get(_key(plugin_name, function_name))
        return entry[1] if entry else None

    def describe_all(self) -> List[FunctionDescriptor]:
        return sorted(
            (d for d, _ in self._functions.values()),
            key=lambda d: (d.plugin_name.casefold(), d.function_name.casefold()),
        )

    def __contains__(self, qualified_name: object) -> bool:
        if not isinstance(qualified_name, str):
            return False
        plugin, sep, name = qualified_name.partition(".")
        if not sep:
            plugin, name = "", plugin
        return _key(plugin, name) in self._functions

    def __len__(self) -> int:
        return len(self._functions)


def chain_resolvers(*resolvers: FunctionResolver) -> FunctionResolver:
    def resolve(plugin_name: str, function_name: str) -> Optional[FunctionDescriptor]:
        for r in resolvers:
            found = r(plugin_name, function_name)
            if found is not None:
                return found
        return None
    return resolve


registry = FunctionRegistry()
register = registry.register
