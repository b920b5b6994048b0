"""
Prompt system for bank_prompts.

This module provides the section types, the immutable Prompt, the fluent
PromptBuilder and the banking template catalog.
"""

from .sections import (
    PromptSection,
    Section,
    Goal,
    Context,
    Role,
    Step,
    Example,
    Output,
    SECTION_TYPES,
)
from .prompt import Prompt, PROMPT_FORMAT_VERSION
from .builder import PromptBuilder
from .serialization import (
    PromptFormatError,
    validate_prompt_data,
    export_prompt,
    import_prompt,
    load_prompt_file,
)
from .templates import (
    BankingTemplate,
    TemplateError,
    CreditRiskAssessment,
    FraudDetection,
    RegulatoryCompliance,
    MarketAnalysis,
    FinancialAdvisory,
    create_template,
    get_builtin_templates,
    get_template_class,
)

__all__ = [
    "PromptSection",
    "Section",
    "Goal",
    "Context",
    "Role",
    "Step",
    "Example",
    "Output",
    "SECTION_TYPES",
    "Prompt",
    "PROMPT_FORMAT_VERSION",
    "PromptBuilder",
    "PromptFormatError",
    "validate_prompt_data",
    "export_prompt",
    "import_prompt",
    "load_prompt_file",
    "BankingTemplate",
    "TemplateError",
    "CreditRiskAssessment",
    "FraudDetection",
    "RegulatoryCompliance",
    "MarketAnalysis",
    "FinancialAdvisory",
    "create_template",
    "get_builtin_templates",
    "get_template_class",
]
