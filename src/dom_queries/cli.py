import re
import sys
import asyncio
import logging
from pathlib import Path

import click
from bs4 import BeautifulSoup

from . import __version__
from .core import ConfigManager, QueryError, ConfigurationError
from .queries import QUERY_SETS
from .suggestions import get_suggested_query, to_snake_case

FAMILIES = {to_snake_case(query_set.name).replace("_", "-"): query_set for query_set in QUERY_SETS}


def _describe(element) -> str:
    attributes = " ".join(
        f'{name}="{" ".join(value) if isinstance(value, list) else value}"'
        for name, value in element.attrs.items()
    )
    text = " ".join(element.get_text().split())
    opening = f"<{element.name} {attributes}>" if attributes else f"<{element.name}>"
    return f"{opening} {text[:60]}".rstrip()


def _build_matcher(text: str, regex: bool):
    return re.compile(text) if regex else text


def _load_document(path: str) -> BeautifulSoup:
    return BeautifulSoup(Path(path).read_text(encoding="utf-8"), "html.parser")


def _query_config(ctx):
    try:
        return ctx.obj.to_query_config()
    except ConfigurationError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)


def _run_query(container, by, text, find_all, exact, selector, config):
    query_set = FAMILIES[by]
    options = {"exact": exact, "config": config}
    if selector:
        options["selector"] = selector

    query = query_set.get_all if find_all else query_set.get_by
    result = query(container, text, **options)
    return result if find_all else [result]


@click.group()
@click.option('--config', '-c', type=click.Path(), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """dom-queries - find elements the way users find them"""
    # Load configuration
    config_path = Path(config) if config else None
    try:
        ctx.obj = ConfigManager(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    # Setup logging
    log_level = str(ctx.obj.get("general.log_level", "INFO")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise click.ClickException(f"Unknown log level in general.log_level: {log_level}")
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@cli.command()
def version():
    """Show version information"""
    click.echo(f"dom-queries v{__version__}")
    click.echo(f"Query families: {', '.join(FAMILIES)}")


@cli.command()
@click.argument('html_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('text')
@click.option('--by', '-b', type=click.Choice(sorted(FAMILIES)), default='text', show_default=True,
              help='Query family')
@click.option('--all', 'find_all', is_flag=True, help='Return every match instead of exactly one')
@click.option('--fuzzy', is_flag=True, help='Case-insensitive substring match')
@click.option('--regex', is_flag=True, help='Treat TEXT as a regular expression')
@click.option('--selector', '-s', default=None, help='Only match elements matching this CSS selector')
@click.pass_context
def query(ctx, html_file, text, by, find_all, fuzzy, regex, selector):
    """Query an HTML file"""
    document = _load_document(html_file)
    try:
        elements = _run_query(
            document, by, _build_matcher(text, regex), find_all, not fuzzy, selector, _query_config(ctx),
        )
    except (QueryError, ConfigurationError) as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    for element in elements:
        click.echo(f"✅ {_describe(element)}")


@cli.command()
@click.argument('html_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('css_selector')
@click.option('--variant', default='get', show_default=True,
              type=click.Choice(['query', 'query_all', 'get', 'get_all', 'find', 'find_all']),
              help='Variant to phrase the suggestion with')
@click.pass_context
def suggest(ctx, html_file, css_selector, variant):
    """Suggest a query for the first element matching CSS_SELECTOR"""
    document = _load_document(html_file)
    element = document.select_one(css_selector)
    if element is None:
        click.echo(f"❌ No element matches: {css_selector}", err=True)
        sys.exit(1)

    suggestion = get_suggested_query(element, variant, config=_query_config(ctx))
    if suggestion is None:
        click.echo(f"🤷 No query to suggest for {_describe(element)}")
        return
    click.echo(str(suggestion))


@cli.command()
@click.argument('url')
@click.argument('text')
@click.option('--by', '-b', type=click.Choice(sorted(FAMILIES)), default='text', show_default=True,
              help='Query family')
@click.option('--all', 'find_all', is_flag=True, help='Return every match instead of exactly one')
@click.option('--fuzzy', is_flag=True, help='Case-insensitive substring match')
@click.option('--browser', default='chromium', help='Browser to use')
@click.pass_context
def page(ctx, url, text, by, find_all, fuzzy, browser):
    """Wait for an element on a live web page"""
    from playwright.async_api import async_playwright
    from .page import LivePage

    config = _query_config(ctx)
    query_set = FAMILIES[by]
    query = query_set.find_all if find_all else query_set.find_by

    async def run():
        async with async_playwright() as p:
            browser_obj = await getattr(p, browser).launch(headless=True)
            try:
                page_obj = await browser_obj.new_page()
                click.echo(f"🌐 Navigating to: {url}")
                await page_obj.goto(url)
                return await query(LivePage(page_obj), text, exact=not fuzzy, config=config)
            finally:
                await browser_obj.close()

    try:
        result = asyncio.run(run())
    except (QueryError, ConfigurationError) as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    for element in (result if find_all else [result]):
        click.echo(f"✅ {_describe(element)}")


def main():
    cli()


if __name__ == '__main__':
    main()
