"""
Built-in command registry.

Each builtin lives in its own module in this package and registers itself
with the ``register_command`` decorator when the module is imported.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = (
    'cd',
    'echo',
    'exit_cmd',
    'hello',
    'pwd',
    'type_cmd',
)


def register_command(name: str):
    """
    Register a function as the builtin called ``name``.

    Example:
        @register_command('hello')
        def cmd_hello(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module so the registry is populated."""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
    return BUILTINS


__all__ = ['BUILTINS', 'register_command', 'load_all_commands']
