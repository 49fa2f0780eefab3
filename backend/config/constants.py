from dataclasses import dataclass

@dataclass(frozen=True)
class LLMConfig:
    """Generation parameters sent with every completion request."""
    MAX_COMPLETION_TOKENS: int = 16382
    TEMPERATURE: float = 0.7
    TOP_P: float = 0.95
    STREAM: bool = False
    RESPONSE_FORMAT: str = "json_object"
    REQUEST_TIMEOUT: float = 60.0
    COMPLETIONS_PATH: str = "/v1/chat/completions"

@dataclass(frozen=True)
class AnalysisSchemaConfig:
    MIN_PROBABILITY: int = 0
    MAX_PROBABILITY: int = 100
    KEY_POINT_COUNT: int = 3
    SOURCE_COUNT: int = 3

@dataclass(frozen=True)
class UIConfig:
    LEADERBOARD_SIZE: int = 10
    LEADERBOARD_MAX_SCORE: int = 1000
    FACTCHECK_PATH: str = "/api/factcheck"
    FAILURE_MESSAGE: str = "The claim could not be analyzed. Please try again."

LLM_CONFIG = LLMConfig()
SCHEMA_CONFIG = AnalysisSchemaConfig()
UI_CONFIG = UIConfig()
