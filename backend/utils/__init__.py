"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors, raise_for_violations

__all__ = ["handle_api_errors", "raise_for_violations"]
