from typing import Annotated, List, Literal, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from config.constants import SCHEMA_CONFIG

VerdictType = Literal["Likely Myth", "Likely Truth", "Myth", "Truth"]

TruthProbability = Annotated[
    int,
    Field(strict=True, ge=SCHEMA_CONFIG.MIN_PROBABILITY, le=SCHEMA_CONFIG.MAX_PROBABILITY),
]


class Explanation(BaseModel):
    """Verdict plus the reasons and citations backing it."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    verdict: VerdictType
    key_points: List[str] = Field(
        alias="keyPoints",
        min_length=SCHEMA_CONFIG.KEY_POINT_COUNT,
        max_length=SCHEMA_CONFIG.KEY_POINT_COUNT,
    )
    sources: List[str] = Field(
        min_length=SCHEMA_CONFIG.SOURCE_COUNT,
        max_length=SCHEMA_CONFIG.SOURCE_COUNT,
    )


class AnalysisResult(BaseModel):
    """Structured answer for a single claim, as produced by the model."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    truth_probability: TruthProbability = Field(alias="truthProbability")
    explanation: Explanation

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
