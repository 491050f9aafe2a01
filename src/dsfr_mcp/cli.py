"""CLI for dsfr-mcp: setup, serve, fetch-docs, and doctor commands."""

import argparse
import asyncio
import json
import os
import platform
import sys
from importlib.metadata import version as pkg_version
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import Config, load_config
from .loaders import ArtifactNotFoundError
from .logging_config import setup_logging

SERVER_KEY = "dsfr"

MCP_ENTRY = {
	"type": "stdio",
	"command": "dsfr-mcp",
	"args": ["serve"],
}

CORE_DEPS = ["mcp", "pydantic", "platformdirs", "PyYAML", "rich"]


def _claude_desktop_config() -> Path | None:
	"""Claude Desktop's config file, when the app is installed."""
	system = platform.system()
	if system == "Darwin":
		base = Path.home() / "Library" / "Application Support"
	elif system == "Linux":
		base = Path.home() / ".config"
	elif system == "Windows" and os.getenv("APPDATA"):
		base = Path(os.environ["APPDATA"])
	else:
		return None
	path = base / "Claude" / "claude_desktop_config.json"
	return path if path.exists() else None


def mcp_client_configs() -> dict[str, Path | None]:
	"""MCP client name -> config file. Claude Code always gets a path, even a new one."""
	home = Path.home()
	code_candidates = [home / ".claude" / "claude_code_config.json", home / ".claude.json"]
	claude_code = next((p for p in code_candidates if p.exists()), code_candidates[0])
	return {
		"Claude Code": claude_code,
		"Claude Desktop": _claude_desktop_config(),
	}


def register_server(config_path: Path) -> bool:
	"""Add the dsfr stdio entry to an MCP client config. False when the file is unusable."""
	try:
		data = json.loads(config_path.read_text()) if config_path.exists() else {}
		servers = data.setdefault("mcpServers", {})
		if SERVER_KEY in servers:
			print(f"  {SERVER_KEY} already registered in {config_path}")
			return True
		servers[SERVER_KEY] = MCP_ENTRY
		config_path.parent.mkdir(parents=True, exist_ok=True)
		config_path.write_text(json.dumps(data, indent=2) + "\n")
	except (json.JSONDecodeError, OSError) as e:
		print(f"  Cannot update {config_path}: {e}")
		return False
	print(f"  Registered {SERVER_KEY} in {config_path}")
	return True


def cmd_setup(args: argparse.Namespace) -> None:
	"""Register the server with the MCP clients found on this machine."""
	print("dsfr-mcp setup")
	print(f"{'=' * 40}")
	print()

	for client, path in mcp_client_configs().items():
		if path is None:
			print(f"  {client}: not detected")
			continue
		print(f"  {client}: {path}")
		answer = "y" if args.yes else input(f"  Register dsfr with {client}? [Y/n] ").strip().lower()
		if answer in ("", "y", "yes"):
			register_server(path)
	print()

	config = load_config()
	if not config.index_path.exists():
		print("  Next: run 'dsfr-mcp fetch-docs' to extract the documentation.")
	print("  Restart your MCP clients to load the server")


def cmd_serve(args: argparse.Namespace) -> None:
	"""Run the MCP server (stdio transport)."""
	from .server import build_server

	config = load_config()
	setup_logging(config.log_level, config.log_dir)
	try:
		mcp = build_server(config)
	except ArtifactNotFoundError as e:
		print(f"Fatal: {e}", file=sys.stderr)
		sys.exit(1)
	mcp.run()


def render_extraction(result, console: Console | None = None) -> None:
	"""Print a table of extracted entries and artifact counts."""
	console = console or Console()

	table = Table(title=f"DSFR {result.tag} documentation")
	table.add_column("Category", style="cyan")
	table.add_column("Name")
	table.add_column("Title")
	table.add_column("Sections", style="dim")
	for entry in result.entries:
		table.add_row(entry.category, entry.name, entry.title, ", ".join(entry.sections))
	console.print(table)

	categories = {i.category for i in result.icons}
	console.print(f"[green]{len(result.entries)}[/green] entries, "
		f"[green]{len(result.icons)}[/green] icons across {len(categories)} categories, "
		f"[green]{len(result.colors.decision_tokens)}[/green] decision tokens, "
		f"[green]{len(result.colors.families)}[/green] color families")
	console.print(f"Written to {result.docs_dir}")


def cmd_fetch_docs(args: argparse.Namespace) -> None:
	"""Clone the DSFR repo and regenerate the documentation artifacts."""
	from .extraction import RepoSyncError, fetch_docs

	config = load_config()
	setup_logging(config.log_level, config.log_dir)
	tag = args.tag or config.dsfr_tag

	try:
		result = asyncio.run(fetch_docs(config.repo_dir, config.docs_dir, config.repo_url, tag))
	except RepoSyncError as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)

	render_extraction(result)


def _check_artifacts(config: Config) -> list[tuple[str, Path, bool]]:
	"""(label, path, exists) for each required artifact."""
	return [
		("index.json", config.index_path, config.index_path.exists()),
		("icons.json", config.icons_path, config.icons_path.exists()),
		("colors.json", config.colors_path, config.colors_path.exists()),
	]


def _check_server_startup(config: Config) -> tuple[str, str | None]:
	"""Try building the server and counting tools. Returns (status, issue_or_none)."""
	try:
		from .server import build_server
		server_instance = build_server(config)
		# FastMCP stores tools internally - count them
		count = len(server_instance._tool_manager._tools)
		return f"OK ({count} tools registered)", None
	except Exception as e:
		return f"FAILED ({e})", f"Server startup failed: {e}"


def cmd_doctor(args: argparse.Namespace) -> None:
	"""Health check - verify installation, configuration and artifacts."""
	print("dsfr-mcp doctor")
	print(f"{'=' * 40}")

	config = load_config()
	issues: list[str] = []

	py_ver = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
	print(f"  Python:       {py_ver}")
	print(f"  Platform:     {platform.system()} {platform.machine()}")
	print()

	print("  Core deps:")
	for dep in CORE_DEPS:
		try:
			dep_ver = pkg_version(dep)
			print(f"    {dep:22s} {dep_ver}")
		except Exception:
			print(f"    {dep:22s} NOT INSTALLED")
			issues.append(f"{dep} package not installed")
	print()

	print("  Config:")
	print(f"    config dir:          {config.config_dir}")
	print(f"    docs dir:            {config.docs_dir}")
	print(f"    cache size:          {config.cache_size}")
	print(f"    DSFR tag:            {config.dsfr_tag}")
	print()

	print("  Artifacts:")
	for label, path, exists in _check_artifacts(config):
		status = "OK" if exists else "MISSING"
		print(f"    [{status:7s}] {label}: {path}")
		if not exists:
			issues.append(f"{label} missing (run 'dsfr-mcp fetch-docs')")
	print()

	print("  Server:")
	server_status, server_issue = _check_server_startup(config)
	print(f"    {server_status}")
	if server_issue:
		issues.append(server_issue)
	print()

	if issues:
		print(f"  {len(issues)} issue(s) found:")
		for issue in issues:
			print(f"    - {issue}")
		sys.exit(1)
	else:
		print("  All checks passed.")


def main() -> None:
	"""CLI entry point."""
	parser = argparse.ArgumentParser(
		prog="dsfr-mcp",
		description="MCP server for the DSFR design system documentation",
	)
	subparsers = parser.add_subparsers(dest="command")

	# setup
	setup_parser = subparsers.add_parser("setup", help="Register the server in MCP client configs")
	setup_parser.add_argument("--yes", "-y", action="store_true", help="Answer yes to every prompt")
	setup_parser.set_defaults(func=cmd_setup)

	# serve
	serve_parser = subparsers.add_parser("serve", help="Run MCP server (stdio)")
	serve_parser.set_defaults(func=cmd_serve)

	# fetch-docs
	fetch_parser = subparsers.add_parser("fetch-docs", help="Extract documentation from the DSFR repo")
	fetch_parser.add_argument(
		"--tag",
		type=str,
		default=None,
		help="DSFR git tag to extract (default: config dsfr_tag or $DSFR_TAG)",
	)
	fetch_parser.set_defaults(func=cmd_fetch_docs)

	# doctor
	doctor_parser = subparsers.add_parser("doctor", help="Health check")
	doctor_parser.set_defaults(func=cmd_doctor)

	args = parser.parse_args()

	if not args.command:
		parser.print_help()
		sys.exit(1)

	args.func(args)


if __name__ == "__main__":
	main()
