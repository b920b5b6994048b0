#!/usr/bin/env python3
"""
Demo script showcasing bank_prompts features.
"""
import asyncio


def demo_templates():
    """Expand every built-in template and show its description."""
    from bank_prompts.prompts import get_builtin_templates

    print("\n" + "=" * 50)
    print("Template Catalog Demo")
    print("=" * 50)

    samples = {
        "credit-risk": {"credit_type": "personal loan", "risk_focus": "default probability"},
        "fraud-detection": {"channel": "online banking", "scope": "real-time monitoring"},
        "regulatory-compliance": {"regulation": "AML", "business_area": "retail onboarding"},
        "market-analysis": {"market": "European corporate bonds", "horizon": "12-month"},
        "financial-advisory": {"client_profile": "mid-career professional", "objective": "retirement savings"},
    }

    for template_class in get_builtin_templates():
        template = template_class(**samples[template_class.slug])
        prompt = template.to_builder().build()
        print(f"\n{template.name}: {template.description()}")
        print(f"  Sections: {len(prompt)}")


def demo_customization():
    """Append extra sections to a template before building."""
    from bank_prompts.prompts import FraudDetection, export_prompt

    print("\n" + "=" * 50)
    print("Template Customization Demo")
    print("=" * 50)

    prompt = (
        FraudDetection(channel="credit cards", scope="pattern analysis")
        .to_builder()
        .step("Cross-check merchant category codes")
        .example(
            "Card used in Lisbon and Toronto within 20 minutes",
            "HIGH RISK: impossible travel, freeze card",
        )
        .build()
    )
    print(prompt.render())
    print("\nAs JSON:")
    print(export_prompt(prompt))


async def demo_llm():
    """Run the full demo flow against the mock client."""
    from bank_prompts.llm import MockLLMClient
    from bank_prompts.main import run_demo
    from bank_prompts.renderer import PromptRenderer

    print("\n" + "=" * 50)
    print("LLM Demo")
    print("=" * 50)

    await run_demo(PromptRenderer(), MockLLMClient())


def main():
    """Run all demos."""
    print("bank_prompts Feature Demo")
    print("=" * 50)

    demo_templates()
    demo_customization()
    asyncio.run(demo_llm())

    print("\n" + "=" * 50)
    print("Demo complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
