"""
Mock LLM client for demonstrations and tests.
"""
import asyncio
import logging

from ..constants import DEFAULT_MOCK_DELAY
from .base import LLMClient


logger = logging.getLogger(__name__)


CREDIT_RESPONSE = (
    "CREDIT ANALYSIS COMPLETE\n\n"
    "Applicant Profile: FICO 720, DTI 28%, Stable Employment\n"
    "Risk Assessment: LOW RISK (2.1% default probability)\n"
    "Recommendation: APPROVED at Prime + 1.25%\n"
    "Required: Income verification, property appraisal"
)

FRAUD_RESPONSE = (
    "FRAUD ALERT ISSUED\n\n"
    "Transaction Pattern: Multiple ATM withdrawals detected\n"
    "Risk Level: HIGH (Score 85/100)\n"
    "Geographic Anomaly: 500+ miles from normal location\n"
    "Action Required: FREEZE card, contact customer immediately"
)

DEFAULT_RESPONSE = (
    "Analysis complete. Banking task processed according to regulatory "
    "guidelines and best practices."
)


class MockLLMClient(LLMClient):
    """
    Mock client returning canned banking responses.

    Credit risk prompts get a credit analysis, fraud prompts get a fraud
    alert, anything else gets a generic acknowledgement.
    """

    def __init__(self, delay: float = DEFAULT_MOCK_DELAY, **kwargs) -> None:
        """
        Initialize the mock client.

        Args:
            delay: Seconds to sleep before answering, simulating network latency
            **kwargs: Ignored, accepted so the registry can pass shared settings
        """
        self._delay = delay
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "mock"

    async def generate(self, prompt: str) -> str:
        """Return a mock response based on prompt content."""
        self.calls.append(prompt)
        if self._delay > 0:
            await asyncio.sleep(self._delay)

        if "credit risk" in prompt or "Credit Risk" in prompt:
            response = CREDIT_RESPONSE
        elif "fraud" in prompt or "Fraud" in prompt:
            response = FRAUD_RESPONSE
        else:
            response = DEFAULT_RESPONSE

        logger.debug(f"Mock response for {len(prompt)}-char prompt: {response.splitlines()[0]}")
        return response

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(delay={self._delay})"
