"""Log in once and reuse the cached browser session across test runs."""
import logging
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page

from e2ekit.settings import Settings
from e2ekit.tools.auth import get_jwt_token_from_json, is_jwt_expired
from e2ekit.tools.config_store import ConfigStore
from e2ekit.tools.director import create_dir, remove_dir

logger = logging.getLogger(__name__)


def ensure_authenticated(
    page: Page,
    auth_file: Path,
    settings: Settings,
    tmp_dir: Path = Path(".tmp"),
    config_store: Optional[ConfigStore] = None,
) -> bool:
    """
    Make sure auth_file holds a valid session, logging in if needed.

    Clears the download directory, then reuses the cached token when it has
    not expired. Otherwise fills in the login form, waits for the home page
    and saves the browser storage state to auth_file.
    When config_store is given, the fresh token is also stored under "jwt".

    Returns:
        True if a login was performed, False if the cached session was reused
    """
    remove_dir(tmp_dir)

    token = get_jwt_token_from_json(auth_file, settings.app_url(), settings.token_key)
    if not is_jwt_expired(token):
        logger.info("Reusing cached session from %s", auth_file)
        return False

    logger.info("Session missing or expired, logging in as %s", settings.username)
    page.goto(settings.app_url("/login"))

    username_field = page.get_by_role("textbox", name="Email")
    password_field = page.get_by_role("textbox", name="Password")

    username_field.click()
    username_field.fill(settings.username)

    password_field.click()
    password_field.fill(settings.password)

    page.get_by_role("button", name="Login").click()

    page.wait_for_load_state("networkidle")  # Wait for form to process
    page.wait_for_url(settings.app_url("/home"))

    # Two-factor flows need extra steps here, before the state is saved
    create_dir(Path(auth_file).parent)
    page.context.storage_state(path=str(auth_file))

    if config_store is not None:
        token = get_jwt_token_from_json(auth_file, settings.app_url(), settings.token_key)
        config_store.update(jwt=token or "")
    return True
