"""
Built-in banking template definitions.

Provides the five banking archetypes (credit risk, fraud detection,
regulatory compliance, market analysis, financial advisory) and catalog
lookups by slug.
"""

from dataclasses import dataclass
from typing import Optional

from ..builder import PromptBuilder
from .base import BankingTemplate, TemplateError


# Credit Risk Assessment - loan evaluation and default risk
@dataclass(frozen=True)
class CreditRiskAssessment(BankingTemplate):
    """Credit risk assessment and loan evaluation."""
    credit_type: str
    risk_focus: str

    slug = "credit-risk"
    name = "Credit Risk Assessment"

    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        return (
            builder
            .goal(f"Assess credit risk for {self.credit_type} focusing on {self.risk_focus}")
            .context(
                f"The applicant is requesting {self.credit_type}. "
                f"The lending committee needs a clear view of {self.risk_focus} "
                "before pricing and approval."
            )
            .role("Senior Credit Risk Analyst")
            .step("Analyze credit history and payment patterns")
            .step("Evaluate income stability and debt ratios")
            .step(f"Quantify exposure to {self.risk_focus}")
            .step("Calculate default probability and risk rating")
            .step("Determine loan terms and interest rates")
            .output("Risk assessment with approval recommendation")
        )

    def description(self) -> str:
        return f"Assesses credit risk for {self.credit_type} focusing on {self.risk_focus}"


# Fraud Detection - transaction monitoring and alerting
@dataclass(frozen=True)
class FraudDetection(BankingTemplate):
    """Fraud detection and prevention."""
    channel: str
    scope: str

    slug = "fraud-detection"
    name = "Fraud Detection"

    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        return (
            builder
            .goal(f"Detect fraud in {self.channel} using {self.scope}")
            .context(
                f"Transactions arrive through {self.channel}. "
                f"Monitoring runs as {self.scope} and must flag suspicious "
                "activity before funds leave the bank."
            )
            .role("Fraud Detection Specialist")
            .step("Analyze transaction patterns and anomalies")
            .step("Apply fraud scoring models")
            .step("Check against known risk indicators")
            .step("Generate alerts and recommended actions")
            .output("Fraud risk assessment with action plan")
        )

    def description(self) -> str:
        return f"Detects fraud in {self.channel} using {self.scope}"


# Regulatory Compliance - audit against a named regulation
@dataclass(frozen=True)
class RegulatoryCompliance(BankingTemplate):
    """Regulatory compliance audit."""
    regulation: str
    business_area: str

    slug = "regulatory-compliance"
    name = "Regulatory Compliance"

    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        return (
            builder
            .goal(f"Audit {self.business_area} for compliance with {self.regulation}")
            .context(
                f"Internal audit is reviewing {self.business_area}. "
                f"Findings must reference the specific {self.regulation} "
                "requirements they relate to."
            )
            .role("Regulatory Compliance Auditor")
            .step(f"Identify the {self.regulation} requirements that apply")
            .step("Review policies, procedures and control evidence")
            .step("Test controls and document gaps")
            .step("Rate each finding by severity")
            .step("Recommend remediation actions and owners")
            .output("Compliance audit report with findings and remediation plan")
        )

    def description(self) -> str:
        return f"Audits {self.business_area} for {self.regulation} compliance"


# Market Analysis - investment research
@dataclass(frozen=True)
class MarketAnalysis(BankingTemplate):
    """Market analysis for investment decisions."""
    market: str
    horizon: str

    slug = "market-analysis"
    name = "Market Analysis"

    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        return (
            builder
            .goal(f"Analyze the {self.market} market for investment over a {self.horizon} horizon")
            .context(
                f"The investment committee is considering exposure to {self.market}. "
                f"Recommendations must hold over a {self.horizon} horizon."
            )
            .role("Investment Research Analyst")
            .step("Summarize current market conditions and trends")
            .step("Assess macroeconomic and sector drivers")
            .step("Evaluate valuation, liquidity and volatility")
            .step("Identify key risks and catalysts")
            .step("Formulate an allocation recommendation")
            .output("Investment outlook with recommendation and risk factors")
        )

    def description(self) -> str:
        return f"Analyzes {self.market} for investment over a {self.horizon} horizon"


# Financial Advisory - client-facing planning
@dataclass(frozen=True)
class FinancialAdvisory(BankingTemplate):
    """Personal financial advisory."""
    client_profile: str
    objective: str

    slug = "financial-advisory"
    name = "Financial Advisory"

    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        return (
            builder
            .goal(f"Advise a {self.client_profile} client on {self.objective}")
            .context(
                f"The client is a {self.client_profile}. "
                f"They want guidance on {self.objective} that fits their "
                "risk tolerance and time frame."
            )
            .role("Certified Financial Advisor")
            .step("Review the client's financial position and goals")
            .step("Assess risk tolerance and time horizon")
            .step(f"Compare suitable options for {self.objective}")
            .step("Explain trade-offs, fees and tax considerations")
            .step("Outline next steps and a review schedule")
            .output("Personalized advisory summary with recommended actions")
        )

    def description(self) -> str:
        return f"Advises a {self.client_profile} client on {self.objective}"


# All built-in templates
BUILTIN_TEMPLATES: list[type[BankingTemplate]] = [
    CreditRiskAssessment,
    FraudDetection,
    RegulatoryCompliance,
    MarketAnalysis,
    FinancialAdvisory,
]


def get_builtin_templates() -> list[type[BankingTemplate]]:
    """Get all built-in template classes.

    Returns:
        A list of the template classes in catalog order.
    """
    return list(BUILTIN_TEMPLATES)


def get_template_class(slug: str) -> Optional[type[BankingTemplate]]:
    """Get a built-in template class by slug.

    Args:
        slug: The slug of the template to retrieve.

    Returns:
        The template class if found, None otherwise.
    """
    for template in BUILTIN_TEMPLATES:
        if template.slug == slug:
            return template
    return None


def create_template(slug: str, **params: str) -> BankingTemplate:
    """Instantiate a built-in template by slug.

    Args:
        slug: The slug of the template.
        **params: The template's parameters by name.

    Returns:
        The template instance.

    Raises:
        TemplateError: If the slug is unknown or the parameters do not
            match the template's declared parameters.
    """
    template_class = get_template_class(slug)
    if template_class is None:
        available = ", ".join(t.slug for t in BUILTIN_TEMPLATES)
        raise TemplateError(f"Unknown template '{slug}'. Available: {available}")

    expected = template_class.parameters()
    missing = [name for name in expected if name not in params]
    unknown = sorted(set(params) - set(expected))
    if missing:
        raise TemplateError(
            f"Template '{slug}' is missing parameters: {', '.join(missing)}"
        )
    if unknown:
        raise TemplateError(
            f"Template '{slug}' does not take parameters: {', '.join(unknown)}"
        )

    return template_class(**params)
