"""CLI to inspect the text structure of a downloaded PDF."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from e2ekit.errors import E2EKitError
from e2ekit.tools.pdf_extract import load_document
from e2ekit.tools.reconstruct import (
    extract_all_text,
    extract_links_from_page,
    extract_paragraphs_from_page,
    extract_text_from_page,
    find_pages_with_keyword,
)


console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show cleaned lines, paragraphs and links of a PDF"
    )
    parser.add_argument("pdf", type=Path, help="Path to the PDF file")
    parser.add_argument(
        "--page",
        type=int,
        help="Only show this page (0-based)"
    )
    parser.add_argument(
        "--keyword",
        type=str,
        help="List pages whose lines match this case-insensitive pattern"
    )
    parser.add_argument(
        "--full-text",
        action="store_true",
        help="Print the whole document as one flattened string"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        document = load_document(args.pdf)

        if args.full_text:
            console.print(extract_all_text(document), markup=False, highlight=False)
            return 0

        if args.keyword:
            matches = find_pages_with_keyword(document, args.keyword)
            if matches:
                console.print(f"[green]'{escape(args.keyword)}'[/green] found on pages: {matches}")
            else:
                console.print(f"[yellow]'{escape(args.keyword)}' not found[/yellow]")
            return 0

        page_numbers = [args.page] if args.page is not None else range(len(document.pages))

        table = Table(title=f"{escape(args.pdf.name)} ({len(document.pages)} pages)")
        table.add_column("Page", style="cyan", justify="right")
        table.add_column("Lines", style="magenta", justify="right")
        table.add_column("Paragraphs", style="magenta", justify="right")
        table.add_column("Links")

        for page_number in page_numbers:
            lines = extract_text_from_page(document, page_number)
            paragraphs = extract_paragraphs_from_page(document, page_number)
            links = extract_links_from_page(document, page_number)
            table.add_row(
                str(page_number),
                str(len(lines)),
                str(len([p for p in paragraphs if p])),
                escape("\n".join(sorted(links))) or "-",
            )

        console.print(table)
        return 0

    except E2EKitError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
