"""Core business logic layer.

Subpackages:
- duplicates: name normalization, similarity scoring and duplicate detection
- reporting: packing progress statistics
"""
__all__ = ["duplicates", "reporting"]
