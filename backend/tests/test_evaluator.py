import json
import pytest
from unittest.mock import AsyncMock, patch

from exceptions import (
    MalformedPayloadException,
    SchemaViolationException,
    UpstreamInvalidException,
)


@pytest.mark.asyncio
class TestClaimEvaluator:
    """Tests for ClaimEvaluator with call_cerebras mocked out."""

    async def test_returns_validated_payload(self, settings, sample_cerebras_response, sample_analysis):
        from services.evaluator import ClaimEvaluator

        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=sample_cerebras_response)) as mock_call:
            result = await ClaimEvaluator(settings).evaluate("The Earth is flat")

        mock_call.assert_awaited_once_with("The Earth is flat", settings)
        assert result == sample_analysis

    async def test_upstream_invalid(self, settings, completion_response):
        from services.evaluator import ClaimEvaluator

        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=completion_response(None))):
            with pytest.raises(UpstreamInvalidException) as exc_info:
                await ClaimEvaluator(settings).evaluate("claim")

        assert exc_info.value.public_message == "No valid response from AI"

    async def test_malformed_payload(self, settings, completion_response):
        from services.evaluator import ClaimEvaluator

        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=completion_response("Sure! Here is the JSON"))):
            with pytest.raises(MalformedPayloadException) as exc_info:
                await ClaimEvaluator(settings).evaluate("claim")

        assert exc_info.value.public_message == "Malformed JSON from AI"
        assert exc_info.value.details["content_preview"] == "Sure! Here is the JSON"

    @pytest.mark.parametrize("mutate", [
        lambda p: p.update(truthProbability=101),
        lambda p: p.update(truthProbability=-1),
        lambda p: p.update(truthProbability="50"),
        lambda p: p.update(truthProbability=True),
        lambda p: p.update(truthProbability=50.5),
        lambda p: p.update(extra="field"),
        lambda p: p["explanation"].update(verdict="Probably"),
        lambda p: p["explanation"]["keyPoints"].pop(),
        lambda p: p["explanation"]["sources"].append("wikipedia.org"),
        lambda p: p["explanation"].pop("sources"),
        lambda p: p.pop("explanation"),
    ])
    async def test_strict_schema_rejects(self, settings, completion_response, sample_analysis, mutate):
        from services.evaluator import ClaimEvaluator

        mutate(sample_analysis)
        response = completion_response(json.dumps(sample_analysis))
        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=response)):
            with pytest.raises(SchemaViolationException) as exc_info:
                await ClaimEvaluator(settings).evaluate("claim")

        assert exc_info.value.details["errors"]

    async def test_strict_schema_rejects_non_object(self, settings, completion_response):
        from services.evaluator import ClaimEvaluator

        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=completion_response("[1, 2, 3]"))):
            with pytest.raises(SchemaViolationException):
                await ClaimEvaluator(settings).evaluate("claim")

    async def test_lenient_schema_returns_parsed_json(self, completion_response):
        from config import Settings
        from services.evaluator import ClaimEvaluator

        settings = Settings(CEREBRAS_API_KEY="k", STRICT_SCHEMA=False)
        with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=completion_response("[1, 2, 3]"))):
            result = await ClaimEvaluator(settings).evaluate("claim")

        assert result == [1, 2, 3]

    async def test_boundary_probabilities_accepted(self, settings, completion_response, sample_analysis):
        from services.evaluator import ClaimEvaluator

        evaluator = ClaimEvaluator(settings)
        for probability in (0, 100):
            sample_analysis["truthProbability"] = probability
            response = completion_response(json.dumps(sample_analysis))
            with patch("services.evaluator.call_cerebras", new=AsyncMock(return_value=response)):
                result = await evaluator.evaluate("claim")
            assert result["truthProbability"] == probability

    async def test_each_evaluation_calls_provider(self, settings, completion_response, sample_analysis):
        from services.evaluator import ClaimEvaluator

        first = completion_response(json.dumps(sample_analysis))
        sample_analysis["truthProbability"] = 7
        second = completion_response(json.dumps(sample_analysis))
        evaluator = ClaimEvaluator(settings)
        with patch("services.evaluator.call_cerebras", new=AsyncMock(side_effect=[first, second])) as mock_call:
            results = [await evaluator.evaluate("same claim"), await evaluator.evaluate("same claim")]

        assert mock_call.await_count == 2
        assert [r["truthProbability"] for r in results] == [2, 7]
