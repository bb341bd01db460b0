"""
Base Template Class

Abstract base class for prompt templates.
"""

from typing import Any, Dict


class PromptTemplate:
    """
    Base template class. Subclasses implement render().
    """
    name: str = "base"
    version: str = "v1"

    def render(self, runtime: Dict[str, Any]) -> str:
        """
        Render template with runtime data.

        Args:
            runtime: Runtime data (question, history, etc.)

        Returns:
            Complete prompt string
        """
        raise NotImplementedError
