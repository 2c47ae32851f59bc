"""Scamwatch CLI entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from scamwatch import __version__
from scamwatch.agents.analyst import analyze_entry
from scamwatch.agents.researcher import generate_intelligence
from scamwatch.config import get_settings
from scamwatch.dashboard import compute_stats, format_currency, format_usd
from scamwatch.models import ScamCategory, SearchParams
from scamwatch.pipeline import ResearchNotEligibleError, run_research
from scamwatch.services.generation import GenerationConfigError, create_generation_client
from scamwatch.store import IntelligenceStore, dump_entries, load_entries_file

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Scamwatch Configuration
# API keys belong in .env (GEMINI_API_KEY, LOGFIRE_TOKEN), not here.

generation:
  model: gemini-3-flash-preview
  output_mode: native
  default_count: 30
  initial_count: 40
  research_count: 12
  summary_sample_size: 10

api:
  host: 127.0.0.1
  port: 8000
  initial_load: true

log:
  level: INFO
  environment: development
  trace_prompts: true
"""


def _init_logfire() -> bool:
    """Initialize Logfire if available, without failing commands."""
    try:
        from scamwatch.observability import initialize_logfire

        return initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False


def _load_store(input_path: str | None) -> IntelligenceStore:
    """Seeded store, extended with entries from an exported JSON file."""
    store = IntelligenceStore.seeded()
    if input_path:
        store.append(load_entries_file(Path(input_path)))
    return store


def _search_params(args: argparse.Namespace, count: int) -> SearchParams:
    return SearchParams(
        count=args.count or count,
        query=args.query,
        category=args.category,
        platform=args.platform,
        date_range=args.date_range,
    )


def _print_entries(entries) -> None:
    for entry in entries:
        print(
            f"  [{entry.id}] {entry.category.value} | {entry.platform} | "
            f"{format_usd(entry.financial_impact.reported_loss_usd)} | "
            f"{entry.severity.value.upper()}"
        )


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize data directory and configuration file."""
    data_dir = Path("data").resolve()

    try:
        data_dir.mkdir(exist_ok=True)
        logger.info(f"Created data directory: {data_dir}")

        config_path = data_dir / "config.yaml"
        if not config_path.exists():
            config_path.write_text(CONFIG_TEMPLATE)
            logger.info(f"Created config template: {config_path}")
        else:
            logger.info(f"Config file already exists: {config_path}")

        print(f"\n✓ Data directory initialized at {data_dir}")
        print("\nNext steps:")
        print("1. Add GEMINI_API_KEY to .env")
        print("2. Review and customize data/config.yaml if needed")
        print("3. Run 'python -m scamwatch serve' to start the dashboard API\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Scamwatch Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}\n")

        print("Generation:")
        print(f"  Model: {settings.generation.model}")
        print(f"  Output Mode: {settings.generation.output_mode}")
        print(f"  Default Count: {settings.generation.default_count}")
        print(f"  Initial Load Count: {settings.generation.initial_count}")
        print(f"  Research Count: {settings.generation.research_count}")
        print(f"  Summary Sample Size: {settings.generation.summary_sample_size}\n")

        print("API:")
        print(f"  Bind: {settings.api.host}:{settings.api.port}")
        print(f"  CORS Origins: {', '.join(settings.api.cors_origins)}")
        print(f"  Initial Load: {settings.api.initial_load}\n")

        print("API Keys:")
        print(f"  Gemini: {'✓ Set' if settings.gemini_api_key else '✗ Not set'}")
        print(f"  Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a batch of entries and print or export it."""
    _init_logfire()

    try:
        settings = get_settings()
        client = create_generation_client(settings)
        params = _search_params(args, settings.generation.default_count)

        print("\n=== Intelligence Generation ===\n")
        entries = asyncio.run(generate_intelligence(client, params))

        if not entries:
            print("No new intelligence was generated.\n")
            return 0

        print(f"✓ Generated {len(entries)} entries\n")
        _print_entries(entries)

        if args.output:
            Path(args.output).write_bytes(dump_entries(entries))
            print(f"\nSaved to {args.output}")
        print()
        return 0

    except GenerationConfigError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Generation failed: {e}", exc_info=True)
        print(f"\n❌ Generation failed: {e}\n")
        return 1


def cmd_research(args: argparse.Namespace) -> int:
    """Run a research action: filtered generation plus executive summary."""
    _init_logfire()

    try:
        settings = get_settings()
        client = create_generation_client(settings)
        store = IntelligenceStore.seeded()
        params = _search_params(args, settings.generation.research_count)

        print("\n=== Research ===\n")
        print(f"Filters: {params.display_query() or '(none)'}\n")

        outcome = asyncio.run(run_research(client, store, params, settings.generation))

        print(f"Summary:\n{outcome.summary}\n")
        if outcome.entries:
            print(f"New entries ({len(outcome.entries)}):")
            _print_entries(outcome.entries)
            if args.output:
                Path(args.output).write_bytes(dump_entries(outcome.entries))
                print(f"\nSaved to {args.output}")
            print()
        return 0

    except ResearchNotEligibleError as e:
        print(f"\n❌ {e}\n")
        return 1
    except GenerationConfigError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Research failed: {e}", exc_info=True)
        print(f"\n❌ Research failed: {e}\n")
        return 1


def cmd_analyze(args: argparse.Namespace) -> int:
    """Deep-dive analysis of one entry."""
    _init_logfire()

    try:
        store = _load_store(args.input)
        entry = store.get(args.entry_id)
        if entry is None:
            print(f"\n❌ Entry not found: {args.entry_id}\n")
            return 1

        client = create_generation_client(get_settings())

        print(f"\n=== Tactical Analysis [{entry.id}] ===\n")
        print(asyncio.run(analyze_entry(client, entry, args.context)))
        print()
        return 0

    except GenerationConfigError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}\n")
        return 1


def cmd_stats(args: argparse.Namespace) -> int:
    """Display dashboard aggregates over seed data and an optional export."""
    try:
        stats = compute_stats(_load_store(args.input).snapshot())

        print("\n=== Dashboard ===\n")
        print(f"Entries: {stats.total_entries}")
        print(f"Total Reported Loss: {format_currency(stats.total_reported_loss)}")
        print(f"Estimated Recovery: {format_currency(stats.total_recovered)}")
        print(f"Avg. Loss per Case: {format_currency(stats.average_loss)}\n")

        print("Financial Impact by Category:")
        for item in stats.category_losses:
            print(f"  {item.name}: {format_currency(item.value)}")

        print("\nPrimary Platform Distribution:")
        for item in stats.platform_counts:
            print(f"  {item.name}: {item.count} cases")

        print(f"\nMost Targeted Region: {stats.most_targeted_region or 'N/A'}\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to compute stats: {e}")
        print(f"\n❌ Failed to compute stats: {e}\n")
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the dashboard API server."""
    try:
        import uvicorn

        from scamwatch.api import create_app
        from scamwatch.observability import instrument_api

        tracing = _init_logfire()
        settings = get_settings()
        if args.no_initial_load:
            settings.api.initial_load = False

        app = create_app(settings)
        if tracing:
            instrument_api(app)

        print("\n=== Scamwatch Dashboard API ===\n")
        print(f"Version: {__version__}")
        print(f"Model: {settings.generation.model}")
        print(f"Listening on http://{settings.api.host}:{settings.api.port}\n")

        uvicorn.run(app, host=settings.api.host, port=args.port or settings.api.port)
        return 0

    except GenerationConfigError as e:
        print(f"\n❌ Cannot start server: {e}\n")
        return 1
    except KeyboardInterrupt:
        print("\n\nReceived interrupt signal. Shutting down...\n")
        return 0
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        print(f"\nFailed to start: {e}\n")
        return 1


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", help="Free-text research query")
    parser.add_argument(
        "--category",
        choices=[c.value for c in ScamCategory] + ["All"],
        help="Restrict to one scam category",
    )
    parser.add_argument("--platform", help="Restrict to one platform (e.g. Telegram)")
    parser.add_argument("--date-range", help="Timeframe, e.g. '2023-2024'")
    parser.add_argument("--count", type=int, help="Number of entries to request")
    parser.add_argument("--output", help="Write generated entries to this JSON file")


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Scamwatch: synthetic scam-intelligence generator and dashboard API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Scamwatch {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser("init", help="Initialize data directory and config file")
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser("config", help="Display merged configuration")
    parser_config.set_defaults(func=cmd_config)

    parser_generate = subparsers.add_parser("generate", help="Generate intelligence entries")
    _add_filter_arguments(parser_generate)
    parser_generate.set_defaults(func=cmd_generate)

    parser_research = subparsers.add_parser(
        "research",
        help="Generate filtered entries and an executive summary",
    )
    _add_filter_arguments(parser_research)
    parser_research.set_defaults(func=cmd_research)

    parser_analyze = subparsers.add_parser("analyze", help="Deep-dive analysis of one entry")
    parser_analyze.add_argument("--entry-id", required=True, help="Entry ID to analyze")
    parser_analyze.add_argument("--input", help="JSON file exported with --output")
    parser_analyze.add_argument("--context", help="Broader research objective")
    parser_analyze.set_defaults(func=cmd_analyze)

    parser_stats = subparsers.add_parser("stats", help="Display dashboard aggregates")
    parser_stats.add_argument("--input", help="JSON file exported with --output")
    parser_stats.set_defaults(func=cmd_stats)

    parser_serve = subparsers.add_parser("serve", help="Start the dashboard API server")
    parser_serve.add_argument("--port", type=int, help="Override the configured port")
    parser_serve.add_argument(
        "--no-initial-load",
        action="store_true",
        help="Skip the startup generation batch",
    )
    parser_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    logging.getLogger().setLevel(get_settings().log.level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
