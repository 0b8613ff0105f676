"""
cosmoskit Command-Line Interface

Provides commands to inspect and manage databases, containers and items
of a document-database account.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import sys
import json
import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import click

from cosmoskit import __version__
from cosmoskit.client.cosmos_client import CosmosClient
from cosmoskit.core.config_manager import ClientConfig, ConfigManager
from cosmoskit.core.logging_config import configure_logging
from cosmoskit.exceptions import CosmosClientError
from cosmoskit.request.options import FeedOptions, RequestOptions

logger = logging.getLogger("cosmoskit.cli")


def _load_config(ctx: click.Context) -> ClientConfig:
    overrides = {}
    if ctx.obj.get("endpoint"):
        overrides["endpoint"] = ctx.obj["endpoint"]
    if ctx.obj.get("log_level"):
        overrides["logging"] = {"level": ctx.obj["log_level"].upper()}

    config_file = ctx.obj.get("config")
    config = ConfigManager().load(
        config_file=str(config_file) if config_file else None,
        overrides=overrides,
    )
    configure_logging(config.logging)
    return config


def _run(ctx: click.Context, operation: Callable[[CosmosClient], Awaitable[Any]]) -> Any:
    """Run an async operation against a client built from the loaded config."""
    config = _load_config(ctx)

    async def runner():
        async with CosmosClient(config=config) as client:
            return await operation(client)

    try:
        return asyncio.run(runner())
    except CosmosClientError as e:
        click.echo(f"[ERROR] {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="cosmoskit")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--endpoint", "-e", help="Account endpoint URL")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx, config: Optional[Path], endpoint: Optional[str], log_level: Optional[str]):
    """
    cosmoskit - document database client

    Inspect and manage databases, containers and items from the shell.
    """
    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "endpoint": endpoint, "log_level": log_level})


@cli.command()
def version():
    """Show cosmoskit version."""
    click.echo(f"cosmoskit version {__version__}")


@cli.command()
@click.pass_context
def config(ctx):
    """
    Show current configuration.

    Displays the configuration resolved from file, environment and options.
    """
    resolved = _load_config(ctx).model_dump(mode="json")
    if resolved.get("auth_token"):
        resolved["auth_token"] = "***REDACTED***"
    click.echo(json.dumps(resolved, indent=2))


# ========== Database Commands ==========

@cli.group()
def databases():
    """Manage databases."""
    pass


@databases.command("list")
@click.pass_context
def list_databases(ctx):
    """
    List all databases.

    Example:
        cosmoskit databases list
    """
    async def operation(client: CosmosClient):
        return (await client.databases.read_all().fetch_all()).resources

    found = _run(ctx, operation)
    if not found:
        click.echo("No databases found.")
        return
    click.echo(f"Found {len(found)} database(s):\n")
    for database in found:
        click.echo(f"  • {database['id']}")


@databases.command("create")
@click.argument("database_id")
@click.option("--throughput", type=int, help="Provisioned throughput in RU/s")
@click.pass_context
def create_database(ctx, database_id: str, throughput: Optional[int]):
    """
    Create a database.

    Examples:
        cosmoskit databases create mydb
        cosmoskit databases create mydb --throughput 400
    """
    options = RequestOptions(offer_throughput=throughput)

    async def operation(client: CosmosClient):
        return await client.databases.create({"id": database_id}, options)

    response = _run(ctx, operation)
    click.echo(f"[OK] Database '{response.body.id}' created")


@databases.command("delete")
@click.argument("database_id")
@click.confirmation_option(prompt="Delete the database and everything in it?")
@click.pass_context
def delete_database(ctx, database_id: str):
    """Delete a database."""
    async def operation(client: CosmosClient):
        return await client.database(database_id).delete()

    _run(ctx, operation)
    click.echo(f"[OK] Database '{database_id}' deleted")


# ========== Container Commands ==========

@cli.group()
def containers():
    """Manage containers."""
    pass


@containers.command("list")
@click.argument("database_id")
@click.pass_context
def list_containers(ctx, database_id: str):
    """
    List all containers of a database.

    Example:
        cosmoskit containers list mydb
    """
    async def operation(client: CosmosClient):
        return (await client.database(database_id).containers.read_all().fetch_all()).resources

    found = _run(ctx, operation)
    if not found:
        click.echo("No containers found.")
        return
    click.echo(f"Found {len(found)} container(s):\n")
    for container in found:
        paths = ", ".join(container.get("partitionKey", {}).get("paths", []))
        click.echo(f"  • {container['id']} (partition key: {paths or '-'})")


@containers.command("create")
@click.argument("database_id")
@click.argument("container_id")
@click.option(
    "--partition-key",
    "-p",
    default="/id",
    show_default=True,
    help="Partition key path",
)
@click.option("--throughput", type=int, help="Provisioned throughput in RU/s")
@click.pass_context
def create_container(ctx, database_id: str, container_id: str, partition_key: str, throughput: Optional[int]):
    """
    Create a container.

    Example:
        cosmoskit containers create mydb orders --partition-key /customerId
    """
    body = {"id": container_id, "partitionKey": {"paths": [partition_key], "kind": "Hash"}}
    options = RequestOptions(offer_throughput=throughput)

    async def operation(client: CosmosClient):
        return await client.database(database_id).containers.create(body, options)

    response = _run(ctx, operation)
    click.echo(f"[OK] Container '{response.body.id}' created in database '{database_id}'")


# ========== Query Command ==========

@cli.command()
@click.argument("database_id")
@click.argument("container_id")
@click.argument("sql")
@click.option("--partition-key", help="Restrict the query to one partition key value")
@click.option("--max-items", type=int, help="Page size")
@click.pass_context
def query(ctx, database_id: str, container_id: str, sql: str, partition_key: Optional[str], max_items: Optional[int]):
    """
    Query items of a container and print them as JSON.

    Example:
        cosmoskit query mydb orders "SELECT * FROM c WHERE c.total > 100"
    """
    options = FeedOptions(
        partition_key=partition_key,
        enable_cross_partition_query=partition_key is None,
        max_item_count=max_items,
    )

    async def operation(client: CosmosClient):
        container = client.database(database_id).container(container_id)
        return (await container.items.query(sql, options).fetch_all()).resources

    results = _run(ctx, operation)
    click.echo(json.dumps(results, indent=2))


def main():
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
