"""Command-line interface for shopbind.

This module exposes the custom collection and metafield operations as
shell commands. Results are printed to stdout as JSON; logs go to stderr.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn

import click
import httpx

from shopbind import __version__
from shopbind.core.config import Settings, get_settings
from shopbind.core.exceptions import ShopBindError
from shopbind.core.logging import LoggingContext, configure_logging, get_logger
from shopbind.domain.entities import CustomCollection, Image, Metafield, ShopModel, SortOrder
from shopbind.domain.options import (
    CountOptions,
    GetOptions,
    ListOptions,
    MetafieldListOptions,
    PublishedStatus,
)
from shopbind.infrastructure.http.client import ShopClient


def build_client(settings: Settings) -> ShopClient:
    """Build the API client used by all commands."""
    return ShopClient(settings=settings)


def _dump(result: Any) -> str:
    if isinstance(result, ShopModel):
        result = result.model_dump(mode="json", exclude_none=True)
    elif isinstance(result, list):
        result = [
            item.model_dump(mode="json", exclude_none=True)
            if isinstance(item, ShopModel)
            else item
            for item in result
        ]
    return json.dumps(result, indent=2)


def _run(
    ctx: click.Context,
    operation: Callable[[ShopClient], Awaitable[Any]],
) -> None:
    """Run one operation against a fresh client and print its result."""
    settings: Settings = ctx.obj["settings"]
    logger = get_logger(__name__)

    async def execute() -> Any:
        async with build_client(settings) as client:
            return await operation(client)

    with LoggingContext(command=ctx.command_path):
        try:
            result = asyncio.run(execute())
        except (ShopBindError, httpx.HTTPError, ValueError) as e:
            logger.error("Command failed", error=str(e))
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    if result is not None:
        click.echo(_dump(result))


def _split(values: tuple[str, ...]) -> list[str] | None:
    items = [item.strip() for value in values for item in value.split(",") if item.strip()]
    return items or None


def _parse_ids(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[int] | None:
    """Turn comma-separated --ids values into integers."""
    items = _split(values)
    if items is None:
        return None
    try:
        return [int(item) for item in items]
    except ValueError:
        raise click.BadParameter("expected comma-separated integers") from None


@click.group()
@click.version_option(version=__version__, prog_name="shopbind")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides SHOPBIND_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """shopbind - client for the custom collections Admin API.

    The shop and token are read from SHOPBIND_SHOP_NAME (or
    SHOPBIND_BASE_URL) and SHOPBIND_ACCESS_TOKEN.
    """
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display shopbind configuration."""
    settings: Settings = ctx.obj["settings"]

    click.echo(f"""
shopbind v{__version__}
{'=' * 40}

Shop:
  URL:          {settings.api_base_url or '(not configured)'}
  Token:        {'set' if settings.access_token else 'not set'}

HTTP:
  Timeout:      {settings.timeout_seconds} seconds
  User Agent:   {settings.user_agent}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


@cli.group()
def collections() -> None:
    """Manage custom collections."""


@collections.command("list")
@click.option("--limit", type=int, default=None, help="Maximum number of results")
@click.option("--page", type=int, default=None, help="Page of results to return")
@click.option("--since-id", type=int, default=None, help="Only collections after this id")
@click.option("--ids", multiple=True, callback=_parse_ids, help="Comma-separated collection ids")
@click.option("--title", default=None, help="Filter by title")
@click.option("--handle", default=None, help="Filter by handle")
@click.option(
    "--published-status",
    type=click.Choice([status.value for status in PublishedStatus]),
    default=None,
)
@click.option("--fields", multiple=True, help="Comma-separated fields to return")
@click.pass_context
def list_collections(
    ctx: click.Context,
    limit: int | None,
    page: int | None,
    since_id: int | None,
    ids: list[int] | None,
    title: str | None,
    handle: str | None,
    published_status: str | None,
    fields: tuple[str, ...],
) -> None:
    """List custom collections."""
    options = ListOptions(
        limit=limit,
        page=page,
        since_id=since_id,
        ids=ids,
        title=title,
        handle=handle,
        published_status=published_status,
        fields=_split(fields),
    )
    _run(ctx, lambda client: client.custom_collections.list(options))


@collections.command("count")
@click.option("--since-id", type=int, default=None, help="Only collections after this id")
@click.option("--title", default=None, help="Filter by title")
@click.option(
    "--published-status",
    type=click.Choice([status.value for status in PublishedStatus]),
    default=None,
)
@click.pass_context
def count_collections(
    ctx: click.Context,
    since_id: int | None,
    title: str | None,
    published_status: str | None,
) -> None:
    """Count custom collections."""
    options = CountOptions(since_id=since_id, title=title, published_status=published_status)
    _run(ctx, lambda client: client.custom_collections.count(options))


@collections.command("get")
@click.argument("collection_id", type=int)
@click.option("--fields", multiple=True, help="Comma-separated fields to return")
@click.pass_context
def get_collection(ctx: click.Context, collection_id: int, fields: tuple[str, ...]) -> None:
    """Show one custom collection."""
    options = GetOptions(fields=_split(fields))
    _run(ctx, lambda client: client.custom_collections.get(collection_id, options))


def _collection_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by create and update."""
    for decorator in reversed(
        [
            click.option("--handle", default=None),
            click.option("--body-html", default=None, help="Description as HTML"),
            click.option(
                "--sort-order",
                type=click.Choice([order.value for order in SortOrder]),
                default=None,
            ),
            click.option("--template-suffix", default=None),
            click.option("--image-src", default=None, help="Public URL of the collection image"),
            click.option("--published", type=click.BOOL, default=None, help="true or false"),
        ]
    ):
        func = decorator(func)
    return func


def _collection_fields(**values: Any) -> dict[str, Any]:
    fields = {key: value for key, value in values.items() if value is not None}
    image_src = fields.pop("image_src", None)
    if image_src:
        fields["image"] = Image(src=image_src)
    return fields


@collections.command("create")
@click.option("--title", required=True)
@_collection_options
@click.pass_context
def create_collection(ctx: click.Context, **values: Any) -> None:
    """Create a custom collection."""
    collection = CustomCollection(**_collection_fields(**values))
    _run(ctx, lambda client: client.custom_collections.create(collection))


@collections.command("update")
@click.argument("collection_id", type=int)
@click.option("--title", default=None)
@_collection_options
@click.pass_context
def update_collection(ctx: click.Context, collection_id: int, **values: Any) -> None:
    """Update a custom collection; only the given options are sent."""
    collection = CustomCollection(id=collection_id, **_collection_fields(**values))
    _run(ctx, lambda client: client.custom_collections.update(collection))


@collections.command("delete")
@click.argument("collection_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_collection(ctx: click.Context, collection_id: int, yes: bool) -> None:
    """Delete a custom collection."""
    if not yes:
        click.confirm(f"Delete custom collection {collection_id}?", abort=True, default=False)
    _run(ctx, lambda client: client.custom_collections.delete(collection_id))
    click.echo(f"Deleted custom collection {collection_id}.")


@collections.group()
def metafields() -> None:
    """Manage metafields of a custom collection."""


@metafields.command("list")
@click.argument("collection_id", type=int)
@click.option("--namespace", default=None)
@click.option("--key", default=None)
@click.option("--limit", type=int, default=None)
@click.pass_context
def list_metafields(
    ctx: click.Context,
    collection_id: int,
    namespace: str | None,
    key: str | None,
    limit: int | None,
) -> None:
    """List metafields of a collection."""
    options = MetafieldListOptions(namespace=namespace, key=key, limit=limit)
    _run(ctx, lambda client: client.custom_collections.list_metafields(collection_id, options))


@metafields.command("count")
@click.argument("collection_id", type=int)
@click.pass_context
def count_metafields(ctx: click.Context, collection_id: int) -> None:
    """Count metafields of a collection."""
    _run(ctx, lambda client: client.custom_collections.count_metafields(collection_id))


@metafields.command("get")
@click.argument("collection_id", type=int)
@click.argument("metafield_id", type=int)
@click.pass_context
def get_metafield(ctx: click.Context, collection_id: int, metafield_id: int) -> None:
    """Show one metafield of a collection."""
    _run(
        ctx,
        lambda client: client.custom_collections.get_metafield(collection_id, metafield_id),
    )


@metafields.command("create")
@click.argument("collection_id", type=int)
@click.option("--namespace", required=True)
@click.option("--key", required=True)
@click.option("--value", required=True)
@click.option("--type", "type_", default="single_line_text_field", show_default=True)
@click.pass_context
def create_metafield(
    ctx: click.Context,
    collection_id: int,
    namespace: str,
    key: str,
    value: str,
    type_: str,
) -> None:
    """Attach a metafield to a collection."""
    metafield = Metafield(namespace=namespace, key=key, value=value, type=type_)
    _run(
        ctx,
        lambda client: client.custom_collections.create_metafield(collection_id, metafield),
    )


@metafields.command("update")
@click.argument("collection_id", type=int)
@click.argument("metafield_id", type=int)
@click.option("--namespace", default=None)
@click.option("--key", default=None)
@click.option("--value", default=None)
@click.option("--type", "type_", default=None)
@click.option("--description", default=None)
@click.pass_context
def update_metafield(
    ctx: click.Context,
    collection_id: int,
    metafield_id: int,
    type_: str | None,
    **values: Any,
) -> None:
    """Update a metafield of a collection; only the given options are sent."""
    if type_ is not None:
        values["type"] = type_
    fields = {key: value for key, value in values.items() if value is not None}
    metafield = Metafield(id=metafield_id, **fields)
    _run(
        ctx,
        lambda client: client.custom_collections.update_metafield(collection_id, metafield),
    )


@metafields.command("delete")
@click.argument("collection_id", type=int)
@click.argument("metafield_id", type=int)
@click.pass_context
def delete_metafield(ctx: click.Context, collection_id: int, metafield_id: int) -> None:
    """Delete a metafield from a collection."""
    _run(
        ctx,
        lambda client: client.custom_collections.delete_metafield(collection_id, metafield_id),
    )
    click.echo(f"Deleted metafield {metafield_id}.")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `shopbind` command is run
    or when using `python -m shopbind`.
    """
    cli()


if __name__ == "__main__":
    main()
