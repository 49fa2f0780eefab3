from .analysis import (
    VerdictType,
    Explanation,
    AnalysisResult,
)
from .requests import (
    FactCheckRequest,
    ErrorResponse,
)

__all__ = [
    "VerdictType",
    "Explanation",
    "AnalysisResult",

    "FactCheckRequest",
    "ErrorResponse",
]
