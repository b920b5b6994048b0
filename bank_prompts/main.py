"""
Main entry point for bank_prompts.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION


logger = logging.getLogger(__name__)


def parse_param(value: str) -> tuple[str, str]:
    """Parse a KEY=VALUE template parameter."""
    key, sep, text = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{value}'")
    return key.strip(), text


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("templates", help="List the banking templates")

    template_args = argparse.ArgumentParser(add_help=False)
    template_args.add_argument("template", help="Template slug (see 'templates')")
    template_args.add_argument(
        "-p", "--param",
        type=parse_param,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template parameter, repeatable"
    )
    template_args.add_argument(
        "-s", "--step",
        action="append",
        default=[],
        metavar="TEXT",
        help="Extra step appended after the template skeleton, repeatable"
    )

    render = subparsers.add_parser(
        "render", parents=[template_args], help="Expand a template and print the prompt"
    )
    render.add_argument(
        "--json",
        action="store_true",
        help="Print the prompt as JSON instead of text"
    )

    send = subparsers.add_parser(
        "send", parents=[template_args], help="Expand a template and send it to the LLM"
    )
    send.add_argument(
        "-c", "--client",
        type=str,
        help="LLM client to use (mock, http)"
    )
    send.add_argument(
        "-m", "--model",
        type=str,
        help="Model to use with the http client"
    )

    show = subparsers.add_parser("show", help="Render a prompt exported with 'render --json'")
    show.add_argument("file", type=Path, help="JSON file to load")

    subparsers.add_parser("demo", help="Run the library demonstration")

    return parser


def setup_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def build_template_prompt(template_slug: str, params: list[tuple[str, str]], extra_steps: list[str]):
    """Expand a catalog template, append extra steps and build the prompt."""
    from .prompts import create_template

    template = create_template(template_slug, **dict(params))
    builder = template.to_builder().steps(*extra_steps)
    return template, builder.build()


async def send_prompt(client, prompt) -> str:
    """Render a prompt and hand it to an LLM client."""
    logger.debug(f"Sending prompt to {client.name}")
    return await client.generate(prompt.render())


async def run_demo(renderer, client) -> None:
    """Demonstrate manual building, template building and an LLM call."""
    from .prompts import CreditRiskAssessment, PromptBuilder

    renderer.print_banner()

    renderer.print("[bold]Manual Prompt Building[/bold]")
    manual_prompt = (
        PromptBuilder()
        .goal("Evaluate loan application")
        .role("Credit Analyst")
        .step("Review credit score and history")
        .step("Analyze income and debt ratios")
        .output("Approval recommendation with terms")
        .build()
    )
    renderer.print_success(f"Built manually: {len(manual_prompt)} sections")
    renderer.print_prompt(manual_prompt, title="Manual")

    renderer.print("[bold]Template-Based Building[/bold]")
    template = CreditRiskAssessment(credit_type="mortgage", risk_focus="default risk")
    template_prompt = template.to_builder().build()
    renderer.print_success(template.description())
    renderer.print_success(f"Built from template: {len(template_prompt)} sections")
    renderer.print_prompt(template_prompt, title=template.name)

    renderer.print("[bold]Testing with LLM[/bold]")
    response = await send_prompt(client, template_prompt)
    renderer.print_response(response, client.name)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    from .config import get_config
    from .llm import TransportError, create_client
    from .prompts import (
        PromptFormatError,
        TemplateError,
        export_prompt,
        get_builtin_templates,
        load_prompt_file,
    )
    from .renderer import PromptRenderer

    args = build_parser().parse_args(argv)

    config = get_config(args.config)
    setup_logging("DEBUG" if args.verbose else config.log_level)

    renderer = PromptRenderer()

    try:
        if args.command == "templates":
            renderer.print_templates(get_builtin_templates())
            return 0

        if args.command == "render":
            _, prompt = build_template_prompt(args.template, args.param, args.step)
            if args.json:
                print(export_prompt(prompt))
            else:
                print(prompt.render())
            return 0

        if args.command == "show":
            prompt = load_prompt_file(args.file)
            renderer.print_prompt(prompt, title=args.file.name)
            return 0

        if args.command == "send":
            if args.client:
                config.update_llm(client=args.client)
            if args.model:
                config.update_llm(model=args.model)

            client = create_client(config.llm, api_key=config.get_api_key())
            if client is None:
                renderer.print_error(f"LLM client '{config.llm.client}' not found")
                return 1

            template, prompt = build_template_prompt(args.template, args.param, args.step)
            renderer.print_prompt(prompt, title=template.name)
            response = asyncio.run(send_prompt(client, prompt))
            renderer.print_response(response, client.name)
            return 0

        if args.command == "demo":
            from .llm import MockLLMClient

            asyncio.run(run_demo(renderer, MockLLMClient(delay=config.llm.mock_delay)))
            return 0
    except TemplateError as e:
        renderer.print_error(str(e), title="Template error")
        return 1
    except PromptFormatError as e:
        renderer.print_error(str(e), title="Invalid prompt file")
        return 1
    except OSError as e:
        renderer.print_error(str(e), title="File error")
        return 1
    except TransportError as e:
        renderer.print_error(str(e), title="LLM error")
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
