"""Core layer: exception hierarchy, structured logging, and YAML loading.

Sits directly above ``roots.models`` and below ``roots.utils`` and
``roots.nips``. Nothing here performs protocol work; it provides the
shared failure vocabulary and the ambient infrastructure the protocol
layers report through.

Attributes:
    RootsError: Base of the exception hierarchy. See
        [roots.core.exceptions][roots.core.exceptions] for the full tree.
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][roots.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load``.
        See [load_yaml()][roots.core.yaml.load_yaml].
"""

from .exceptions import (
    ConfigurationError,
    EmptyIdError,
    EventValidationError,
    FilterDecodeError,
    FilterEncodeError,
    FilterError,
    IdentityComputationError,
    IdMismatchError,
    InvalidSignatureError,
    KeyMaterialError,
    MalformedIdError,
    MalformedPrivateKeyError,
    MalformedPublicKeyError,
    MalformedSignatureError,
    MalformedTagError,
    ProtocolError,
    RootsError,
    SigningError,
    UndecodableHexError,
    UnparsablePublicKeyError,
    UnparsableSignatureError,
)
from .logger import Logger, StructuredFormatter, configure_logging, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "EmptyIdError",
    "EventValidationError",
    "FilterDecodeError",
    "FilterEncodeError",
    "FilterError",
    "IdMismatchError",
    "IdentityComputationError",
    "InvalidSignatureError",
    "KeyMaterialError",
    "Logger",
    "MalformedIdError",
    "MalformedPrivateKeyError",
    "MalformedPublicKeyError",
    "MalformedSignatureError",
    "MalformedTagError",
    "ProtocolError",
    "RootsError",
    "SigningError",
    "StructuredFormatter",
    "UndecodableHexError",
    "UnparsablePublicKeyError",
    "UnparsableSignatureError",
    "configure_logging",
    "format_kv_pairs",
    "load_yaml",
]
