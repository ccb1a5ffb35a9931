"""Detect the JavaScript features a snippet uses and the browsers that run it."""

from ._version import __version__
from .analyzer import analyze_code
from .exceptions import CompatError, SourceParseError
from .model import AnalysisResult, CodeSnippet, DetectedFeature, FeatureDescriptor, VersionRecord

__all__ = [
    "AnalysisResult",
    "CodeSnippet",
    "CompatError",
    "DetectedFeature",
    "FeatureDescriptor",
    "SourceParseError",
    "VersionRecord",
    "__version__",
    "analyze_code",
]
