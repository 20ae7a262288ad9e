"""
Target language generators.

Dart is the only target; its module lives in ``languages.dart``.
"""

from .dart import DartGenerator

__all__ = ["DartGenerator"]
