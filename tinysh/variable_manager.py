"""Environment variable access for tinysh.

This module provides the read-only Environment lookup the shell consumes
(PATH and HOME). The shell never writes variables; it only asks for them,
so the lookup can be swapped for a plain dict in tests.
"""

import os
from typing import Mapping, Optional


class Environment:
    """Read-only view over a mapping of environment variables.

    Attributes:
        source: Mapping the variables are read from. Defaults to
                os.environ so lookups always see the live process environment.
    """

    def __init__(self, source: Optional[Mapping[str, str]] = None):
        """Initialize the environment view.

        Args:
            source: Optional mapping to read from (default: os.environ)
        """
        self.source = os.environ if source is None else source

    def get(self, var_name: str) -> Optional[str]:
        """Get a variable value.

        Args:
            var_name: Variable name to retrieve

        Returns:
            The value, or None if the variable is unset
        """
        return self.source.get(var_name)

    def __repr__(self):
        return f"Environment({len(self.source)} variables)"
