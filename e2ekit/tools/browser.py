"""Playwright helpers: guarded clicks and PDF downloads."""
import logging
import re
import time
from pathlib import Path

from playwright.sync_api import Locator, Page, expect

from e2ekit.models.document import Document
from e2ekit.tools.director import create_dir
from e2ekit.tools.pdf_extract import load_document

logger = logging.getLogger(__name__)

_ANY_VALUE = re.compile(r".*")


def click_to_expect(
    page: Page,
    locator: Locator,
    wait_network: bool = True,
    has_href: bool = False,
    submit: bool = False,
    delay: int = 0,
) -> None:
    """
    Click a locator after asserting it is visible (and optionally a link or submit button).

    Args:
        page: Playwright page
        locator: element to click
        wait_network: wait for "networkidle" before and after the click
        has_href: assert the element has an href attribute
        submit: assert the element has type="submit"
        delay: milliseconds to wait right before clicking
    """
    if wait_network:
        page.wait_for_load_state("networkidle")

    locator.wait_for(state="visible")
    expect(locator).to_be_visible()

    if submit:
        expect(locator).to_have_attribute("type", "submit")

    if has_href:
        # presence only; an empty href still passes
        expect(locator).to_have_attribute("href", _ANY_VALUE)

    page.wait_for_timeout(delay)
    locator.click()

    if wait_network:
        page.wait_for_load_state("networkidle")


def fetch_pdf_pages(
    page: Page,
    locator: Locator,
    download_dir: Path = Path(".tmp"),
    settle_ms: int = 1000,
) -> Document:
    """
    Click locator, save the PDF it downloads and extract its pages.

    The file is saved as <download_dir>/<epoch ms>_<suggested filename>.

    Raises:
        PdfExtractionError: if the downloaded file cannot be read as a PDF
    """
    create_dir(download_dir)

    with page.expect_download() as download_info:
        page.wait_for_timeout(settle_ms)
        locator.click()

    download = download_info.value
    file_path = Path(download_dir) / f"{int(time.time() * 1000)}_{download.suggested_filename}"
    download.save_as(file_path)
    logger.info("Saved download to %s", file_path)

    return load_document(file_path)
