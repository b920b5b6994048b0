"""
Banking template catalog.

Provides parameterized banking prompt archetypes that expand into
pre-populated prompt builders.
"""

from .base import BankingTemplate, TemplateError
from .builtin import (
    CreditRiskAssessment,
    FraudDetection,
    RegulatoryCompliance,
    MarketAnalysis,
    FinancialAdvisory,
    BUILTIN_TEMPLATES,
    get_builtin_templates,
    get_template_class,
    create_template,
)

__all__ = [
    # Base
    "BankingTemplate",
    "TemplateError",
    # Built-in templates
    "CreditRiskAssessment",
    "FraudDetection",
    "RegulatoryCompliance",
    "MarketAnalysis",
    "FinancialAdvisory",
    # Catalog
    "BUILTIN_TEMPLATES",
    "get_builtin_templates",
    "get_template_class",
    "create_template",
]
