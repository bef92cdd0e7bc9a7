"""
CLI 진입점

명령줄에서 스크래퍼를 실행하고 입찰번호 규칙을 점검합니다.
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from etowah_bids import __version__
from etowah_bids.config import ScraperConfig
from etowah_bids.crawler import BidCrawler, bids_to_json
from etowah_bids.exceptions import EtowahBidsException, ParsingException
from etowah_bids.models.bid_item import BidItem
from etowah_bids.models.task import FollowUpTask
from etowah_bids.utils.parser import ParserUtils

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="etowah-bids")
def cli():
    """
    Etowah County 입찰 목록 스크래퍼

    구매 페이지의 입찰 목록을 추출하고 상세 페이지 수집 작업을 등록합니다.
    """
    pass


@cli.command()
@click.option(
    "--config", "-c", "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML 설정 파일 (없으면 환경 변수/.env 사용)"
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="결과 JSON 저장 경로"
)
@click.option(
    "--headless/--no-headless",
    default=None,
    help="헤드리스 모드 (브라우저 창 숨김)"
)
@click.option(
    "--timeout", "-t",
    type=float,
    default=None,
    help="전체 실행 제한 시간 (초)"
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="표 대신 JSON을 표준 출력으로 출력"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="상세 로그 출력"
)
def run(
    config_file: Optional[Path],
    output: Optional[Path],
    headless: Optional[bool],
    timeout: Optional[float],
    as_json: bool,
    verbose: bool,
):
    """
    입찰 목록 스크래핑 실행
    """
    config = ScraperConfig.from_yaml(config_file) if config_file else ScraperConfig.from_env()
    if headless is not None:
        config.browser.headless = headless
    if output:
        config.output_file = output
    if timeout:
        config.run_timeout = timeout
    if verbose:
        config.logging.level = "DEBUG"

    console.print(f"[bold blue]Etowah bid scraper v{__version__}[/bold blue]")
    console.print(f"URL: {config.site.listing_url}")
    console.print()

    crawler = BidCrawler(config)
    try:
        bids = asyncio.run(crawler.run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return
    except (EtowahBidsException, asyncio.TimeoutError) as e:
        console.print(f"\n[red]Scrape failed: {e}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(bids_to_json(bids), ensure_ascii=False, indent=2))
        return

    _print_bids(bids)
    _print_tasks(crawler.scheduled_tasks)


@cli.command("parse-title")
@click.argument("titles", nargs=-1, required=True)
def parse_title(titles: List[str]):
    """
    제목에서 입찰번호 도출 결과 확인

    브라우저 없이 입찰번호 규칙만 점검합니다.
    """
    table = Table(title="Bid numbers")
    table.add_column("Title", style="white")
    table.add_column("Identifier", style="cyan")

    for title in titles:
        cleaned = ParserUtils.strip_boilerplate(title)
        try:
            table.add_row(cleaned, ParserUtils.require_bid_number(cleaned))
        except ParsingException as e:
            table.add_row(cleaned, f"[yellow]no match[/yellow] (expected {e.expected_format})")

    console.print(table)


def _print_bids(bids: List[BidItem]) -> None:
    """입찰 목록 출력"""
    table = Table(title=f"Bids ({len(bids)})")
    table.add_column("Identifier", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Attachments", style="green")
    table.add_column("Details URL", style="dim")

    for bid in bids:
        table.add_row(
            bid.signal_source_unique_id,
            bid.title,
            ", ".join(att.filename for att in bid.attachments) or "-",
            bid.details_url_for_item or "-",
        )

    console.print(table)


def _print_tasks(tasks: List[FollowUpTask]) -> None:
    """등록된 후속 작업 출력"""
    table = Table(title=f"Scheduled tasks ({len(tasks)})")
    table.add_column("API", style="cyan")
    table.add_column("Identifier", style="white")
    table.add_column("URL", style="dim")

    for task in tasks:
        table.add_row(
            task.api,
            task.parameters.get("signal_source_unique_id", ""),
            task.parameters.get("bidFullUrl", ""),
        )

    console.print(table)


def main():
    """메인 진입점"""
    cli()


if __name__ == "__main__":
    main()
