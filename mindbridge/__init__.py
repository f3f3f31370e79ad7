"""mindbridge package

Route a single normalized "get an LLM response" request to one of several
third-party LLM APIs and translate the answer back into one envelope shape.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`ProviderError`, :class:`ErrorCode`
    - Models: :class:`UnifiedRequest`, :class:`Success`, :class:`Failure`,
      :class:`ToolEnvelope`
    - Registry: :class:`ProviderRegistry`, :class:`ProviderFactory`
    - Configuration: :func:`load_config`

The MCP server and CLI live under ``mindbridge.service`` and are not imported
here so that library users do not pull in the MCP SDK.
"""

from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory
from .base.models import Failure, Success, ToolEnvelope, UnifiedRequest
from .base.registry import ProviderRegistry
from .config import load_config
from .config.defaults import SERVER_VERSION

__version__ = SERVER_VERSION

__all__ = [
    "__version__",
    "ErrorCode",
    "ProviderError",
    "ProviderFactory",
    "ProviderRegistry",
    "UnifiedRequest",
    "Success",
    "Failure",
    "ToolEnvelope",
    "load_config",
]
