"""CLI to report whether the cached login session is still valid."""
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from e2ekit.settings import load_settings
from e2ekit.tools.auth import decode_jwt_payload, get_jwt_token_from_json, is_jwt_expired
from e2ekit.tools.config_store import ConfigStore


console = Console()


def main(argv=None) -> int:
    """Exit 0 if the cached token is valid, 1 if it is missing or expired."""
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Check the cached session token")
    parser.add_argument(
        "--auth-file",
        type=Path,
        default=Path("playwright/.auth/user.json"),
        help="Playwright storage state file"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Fallback config.json holding a 'jwt' key"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    token = get_jwt_token_from_json(args.auth_file, settings.app_url(), settings.token_key)
    if not token and args.config.exists():
        token = ConfigStore(args.config).jwt or None

    if is_jwt_expired(token):
        console.print("[red]✗ No valid session token, a login is required[/red]")
        return 1

    payload = decode_jwt_payload(token)
    console.print(
        f"[green]✓ Session valid[/green] for {payload.user_id} "
        f"until {payload.expires_at.isoformat()}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
