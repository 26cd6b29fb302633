#!/usr/bin/env python3
"""
Interactive CLI demo for Research Memory Service.

Uses an in-memory paper store unless REDIS_URL is set, and deterministic fake
embeddings unless EMBEDDING_PROVIDER is set.
"""
import os
import pydantic
from dotenv import load_dotenv

# Imports assume PYTHONPATH=src is set or the package is installed
from research_memory.app import ResearchMemoryApp
from research_memory.config_loader import load_config_from_env
from research_memory.exceptions import ResearchMemoryError
from research_memory.security import ValidationError
from research_memory.storage import InMemoryKeyValueStore

# Load environment variables
load_dotenv()

COMMANDS = {
    "set": ("set-new-research-paper", ["title", "summarization"]),
    "get": ("get-research-paper", ["title"]),
    "remember": ("add-to-memory", ["id", "content", "metadata"]),
    "search": ("search-memory", ["query", "top_k"]),
    "recall": ("get-memory", ["id"]),
}


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Research Memory Service - Interactive CLI Demo")
    print("=" * 60)
    print("\nCommands (fields separated by '|'):")
    print("  set <title> | <summary>")
    print("  get <title>")
    print("  remember <id> | <content> [| <metadata>]")
    print("  search <query> [| <top_k>]")
    print("  recall <id>")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def setup_app() -> ResearchMemoryApp:
    """Set up and initialize the application."""
    os.environ.setdefault("EMBEDDING_PROVIDER", "fake")
    config = load_config_from_env()

    store = None
    if not os.getenv("REDIS_URL"):
        print("📦 REDIS_URL not set, using an in-memory paper store")
        store = InMemoryKeyValueStore()

    app = ResearchMemoryApp(config, store=store)
    app.initialize()
    print("✅ Ready!\n")
    return app


def parse_command(line: str):
    """Split a command line into (tool name, arguments)."""
    command, _, rest = line.partition(" ")
    if command not in COMMANDS:
        return None, None

    tool_name, fields = COMMANDS[command]
    values = [part.strip() for part in rest.split("|")] if rest else []
    arguments = {field: value for field, value in zip(fields, values) if value}
    return tool_name, arguments


def main():
    """Main CLI loop."""
    print_banner()

    try:
        app = setup_app()
    except ResearchMemoryError as e:
        print(f"\n❌ Failed to initialize service: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    with app:
        while True:
            try:
                line = input("You: ").strip()

                if not line:
                    continue

                if line.lower() in ['quit', 'exit', 'q']:
                    print("\n👋 Goodbye!\n")
                    break

                tool_name, arguments = parse_command(line)
                if tool_name is None:
                    print(f"Unknown command. Try one of: {', '.join(COMMANDS)}")
                    continue

                try:
                    print(app.call_tool(tool_name, arguments))
                except (ValidationError, pydantic.ValidationError, ResearchMemoryError) as e:
                    print(f"\n❌ Error: {e}")
                print("-" * 60)

            except KeyboardInterrupt:
                print("\n\n👋 Interrupted. Goodbye!\n")
                break
            except EOFError:
                print("\n\n👋 Goodbye!\n")
                break

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
