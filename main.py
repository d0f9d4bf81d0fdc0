import argparse
import asyncio
import logging
import sys
from typing import Any, Dict

from tqdm import tqdm

from devhub.client import ClientConfig, ResourceClient
from devhub.exceptions import FormValidationError
from devhub.form import validate_draft
from devhub.log import configure_logging
from devhub.manager import ResourceManager, create_portfolio_manager, create_snippet_manager
from devhub.store import SnippetFilter
from devhub.view import format_list_view


logger = logging.getLogger("devhub")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage DevHub portfolio links and code snippets"
    )
    parser.add_argument(
        "--api-url",
        dest="api_url",
        default=None,
        help="API base URL (defaults to DEVHUB_API_URL env variable, then http://localhost:8080/api)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    resources = parser.add_subparsers(dest="resource", required=True)

    portfolio = resources.add_parser("portfolio", help="Portfolio links")
    portfolio_actions = portfolio.add_subparsers(dest="action", required=True)
    portfolio_actions.add_parser("list", help="List portfolio links")

    portfolio_add = portfolio_actions.add_parser("add", help="Create a portfolio link")
    portfolio_add.add_argument("--title", default="", help="Link title")
    portfolio_add.add_argument("--url", default="", help="Link target URL")
    portfolio_add.add_argument("--order", type=int, default=0, help="Display order (default: 0)")
    portfolio_add.add_argument("--category", default="", help="Category (e.g., GitHub, LinkedIn)")
    portfolio_add.add_argument("--icon", default="", help="Icon name or URL")
    portfolio_add.add_argument("--description", default="", help="Optional description")

    portfolio_delete = portfolio_actions.add_parser("delete", help="Delete a portfolio link")
    portfolio_delete.add_argument("id", help="Identifier of the link to delete")
    portfolio_delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    snippets = resources.add_parser("snippets", help="Code snippets")
    snippet_actions = snippets.add_subparsers(dest="action", required=True)

    snippets_list = snippet_actions.add_parser("list", help="List code snippets")
    snippets_list.add_argument("--public", action="store_true", help="Only public snippets")

    snippets_add = snippet_actions.add_parser("add", help="Create a code snippet")
    snippets_add.add_argument("--title", default="", help="Snippet title")
    snippets_add.add_argument("--language", default="", help="Language (e.g., javascript, python, java)")
    code_source = snippets_add.add_mutually_exclusive_group()
    code_source.add_argument("--code", default="", help="Snippet source code")
    code_source.add_argument("--code-file", dest="code_file", default=None, help="Read the code from a file")
    snippets_add.add_argument("--tags", default="", help="Comma-separated tags")
    snippets_add.add_argument("--category", default="", help="Category (e.g., algorithms, utilities)")
    snippets_add.add_argument("--public", action="store_true", help="Make the snippet public")
    snippets_add.add_argument("--description", default="", help="Optional description")

    snippets_delete = snippet_actions.add_parser("delete", help="Delete a code snippet")
    snippets_delete.add_argument("id", help="Identifier of the snippet to delete")
    snippets_delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    snippets_delete.add_argument(
        "--public",
        action="store_true",
        help="Show the public-only collection after deleting",
    )

    return parser


async def terminal_confirm(prompt: str) -> bool:
    answer = await asyncio.to_thread(input, f"{prompt} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


async def assume_yes(_prompt: str) -> bool:
    return True


def draft_fields(args: argparse.Namespace) -> Dict[str, Any]:
    if args.resource == "portfolio":
        return {
            "title": args.title,
            "url": args.url,
            "order": args.order,
            "category": args.category,
            "icon": args.icon,
            "description": args.description,
        }

    code = args.code
    if args.code_file:
        with open(args.code_file, "r", encoding="utf-8") as file_handle:
            code = file_handle.read()
    return {
        "title": args.title,
        "code": code,
        "language": args.language,
        "tags": args.tags,
        "category": args.category,
        "is_public": args.public,
        "description": args.description,
    }


def build_manager(args: argparse.Namespace, client: ResourceClient) -> ResourceManager:
    if args.resource == "portfolio":
        return create_portfolio_manager(client)
    # on "add", --public marks the new snippet instead of choosing the listing
    public_only = args.action != "add" and getattr(args, "public", False)
    initial = SnippetFilter.PUBLIC if public_only else SnippetFilter.ALL
    return create_snippet_manager(client, initial_filter=initial)


async def run(args: argparse.Namespace) -> int:
    config = ClientConfig.from_env()
    if args.api_url:
        config.api_url = args.api_url

    async with ResourceClient(config) as client:
        manager = build_manager(args, client)

        if args.action == "list":
            await manager.open()

        elif args.action == "add":
            manager.form.toggle()
            for name, value in draft_fields(args).items():
                manager.form.update(name, value)
            try:
                validate_draft(manager.form.draft)
            except FormValidationError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 2
            if not await manager.form.submit():
                print(f"❌ {manager.store.error}", file=sys.stderr)
                return 1
            tqdm.write(f"✅ Created {manager.kind.name} entry: {args.title}")

        elif args.action == "delete":
            confirm = assume_yes if args.yes else terminal_confirm
            if not await manager.renderer.request_delete(args.id, confirm):
                if manager.store.error:
                    print(f"❌ {manager.store.error}", file=sys.stderr)
                    return 1
                tqdm.write("Deletion cancelled")
                return 0
            tqdm.write(f"🗑️  Deleted {args.id}")

        print(format_list_view(manager.view()))
        return 1 if manager.store.error else 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        exit_code = asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n⚠️ Operation interrupted", file=sys.stderr)
        sys.exit(1)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error while talking to the DevHub API")
        print("❌ Command failed. See log for details.", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
