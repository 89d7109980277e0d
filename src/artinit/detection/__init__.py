"""Build technology detection.

Usage:
    from artinit.detection import TechnologyDetector

    detector = TechnologyDetector()
    technologies = detector.detect(Path("."), recursive=False)
"""

from artinit.detection.technologies import (
    TECHNOLOGY_INDICATORS,
    TechnologyDetector,
    TechnologyIndicators,
)

__all__ = [
    "TECHNOLOGY_INDICATORS",
    "TechnologyDetector",
    "TechnologyIndicators",
]
