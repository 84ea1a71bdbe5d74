"""
Error kinds raised by detect_kit.

Every failure that should end a detection run derives from `DetectError`, so the
CLI can convert any of them into a single stderr message and exit status 1.
"""

from __future__ import annotations


class DetectError(Exception):
    """Base class for all detect_kit failures."""


class ArgumentError(DetectError):
    """Wrong CLI arity or an invalid option/config value."""


class LoadError(DetectError):
    """Input image missing, unreadable or not decodable."""


class PreprocessError(DetectError):
    """Image cannot be turned into the model input tensor."""


class ModelLoadError(DetectError):
    """Model file missing, corrupt, or not a single-input/single-output model."""


class InferenceError(DetectError):
    """Forward pass failed or produced a malformed output buffer."""


class ClassIndexError(DetectError, IndexError):
    """Class id outside the class-name table."""


class WriteError(DetectError):
    """Annotated image could not be written."""
