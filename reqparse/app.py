import argparse
import logging
import sys
import concurrent.futures
from pathlib import Path
from typing import Iterable, List
from rich.console import Console
from rich.table import Table

import config

from .utils import ResultSink, setup_logging
from .models import BodyOutcome, parse_request
from .examples import EXAMPLES, check_examples
from .metrics import Metrics

def iter_request_files() -> Iterable[Path]:
    folder = Path(config.REQUESTS_DIR)
    folder.mkdir(parents=True, exist_ok=True)
    for path in sorted(folder.glob("*.txt")):
        # Ignore example files unless the user renames them.
        if config.SKIP_EXAMPLE_FILES and path.name.lower().startswith("example"):
            continue
        yield path

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="reqparse",
        description="Parse raw HTTP/1.1 request text files into structured records.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Request files to parse (default: *.txt in config.REQUESTS_DIR).",
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const=True,
        metavar="FILE",
        help="Dump parsed records. Without FILE -> print to console. With FILE -> append to results/FILE (or abs path).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=config.PARSE_WORKERS,
        help="Number of parallel workers for parsing files (default: config.PARSE_WORKERS).",
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Check the built-in example requests and exit.",
    )
    return parser.parse_args(argv)

def process_single_file(path: Path, result_sink: ResultSink, metrics: Metrics) -> None:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        metrics.record_error()
        logging.error("Failed to read %s: %s", path.name, exc)
        return

    parsed = parse_request(raw_text)
    metrics.record_parsed(parsed)
    logging.info(
        "%s: %s %s (%s headers, query=%s)",
        path.name,
        parsed.method or "-",
        parsed.path or "-",
        len(parsed.headers),
        "yes" if parsed.query is not None else "no",
    )
    if parsed.body_outcome is BodyOutcome.FAILED:
        logging.warning("%s: body is present but is not valid JSON", path.name)

    if result_sink.enabled():
        result_sink.write(str(path), parsed)

def print_summary(metrics: Metrics) -> None:
    console = Console()
    stats = metrics.stats

    table = Table(title="Parse Summary", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Total Files", str(stats.total))
    table.add_row("Parsed", f"[green]{stats.parsed}[/green]")
    table.add_row("Unreadable", f"[red]{stats.failed}[/red]")
    table.add_row("JSON Bodies", str(stats.with_body))
    table.add_row("Unparseable Bodies", f"[yellow]{stats.unparseable_body}[/yellow]")
    table.add_row("With Query", str(stats.with_query))

    console.print("\n")
    console.print(table)

    if stats.methods:
        method_table = Table(title="Methods", show_header=True)
        method_table.add_column("Method")
        method_table.add_column("Count", justify="right")

        for method, count in sorted(stats.methods.items(), key=lambda x: x[1], reverse=True):
            method_table.add_row(method, str(count))

        console.print(method_table)

def run_examples() -> int:
    mismatched = check_examples()
    for name, _, _ in EXAMPLES:
        if name in mismatched:
            logging.error("MISMATCH %s", name)
        else:
            logging.info("OK       %s", name)
    logging.info("Examples checked: %s ok / %s total.", len(EXAMPLES) - len(mismatched), len(EXAMPLES))
    return 1 if mismatched else 0

def run(args: argparse.Namespace) -> int:
    metrics = Metrics()
    files: List[Path] = list(args.files) or list(iter_request_files())
    if not files:
        logging.warning("No *.txt request files found in %s, stopping.", config.REQUESTS_DIR)
        return 0

    result_sink = ResultSink(args.output)
    if result_sink.enabled():
        mode = "console" if result_sink.mode == "console" else f"file={result_sink.path}"
        logging.info("Result dump enabled (%s)", mode)
    logging.info("Parsing %s files with %s workers", len(files), args.workers)

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, args.workers)) as executor:
        futures = [
            executor.submit(process_single_file, path, result_sink, metrics)
            for path in files
        ]
        for future in concurrent.futures.as_completed(futures):
            future.result()

    print_summary(metrics)
    return 1 if metrics.stats.failed else 0

def main(argv=None) -> None:
    setup_logging()
    args = parse_args(argv)
    if args.examples:
        sys.exit(run_examples())
    sys.exit(run(args))
