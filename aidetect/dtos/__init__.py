"""
Data Transfer Objects (DTOs) package.

DTOs are simple dataclasses used to transfer data between layers.
"""

from aidetect.dtos.analysis_dto import (
    Classification,
    VerdictSource,
    SentenceScore,
    SignalCounts,
    SentenceVerdictDTO,
    DocumentVerdictDTO,
    TextAnalysisInputDTO,
    TextAnalysisResultDTO,
    TextStatsDTO,
    ImageAnalysisInputDTO,
    ImageAttributeDTO,
    ImageAnalysisResultDTO,
)

__all__ = [
    "Classification",
    "VerdictSource",
    "SentenceScore",
    "SignalCounts",
    "SentenceVerdictDTO",
    "DocumentVerdictDTO",
    "TextAnalysisInputDTO",
    "TextAnalysisResultDTO",
    "TextStatsDTO",
    "ImageAnalysisInputDTO",
    "ImageAttributeDTO",
    "ImageAnalysisResultDTO",
]
