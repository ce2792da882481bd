# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-locals,too-many-positional-arguments
import logging

import typer

from passbatch._logging import LogLevel, configure_logging, get_log_level
from passbatch._version import __version__
from passbatch.batch import BatchDispatcher
from passbatch.config import Settings
from passbatch.errors import ParamError, PassbatchError

APP_NAME = "passbatch"
APP_HELP = "Generate random passwords and their Argon2id hashes"
HASH_OUTPUT_PREFIX = "Hash output: "
COMPLETION_MESSAGE = "[LOG] All passwords have been hashed successfully"

DEFAULT_SETTINGS = Settings.load()

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
    add_help_option=True,
    pretty_exceptions_short=True,
)


@app.command()
def run(
    batch_size: int = typer.Option(
        default=DEFAULT_SETTINGS.batch_size,
        min=1,
        max=100_000,
        help="The number of passwords to generate",
    ),
    length: int = typer.Option(
        default=DEFAULT_SETTINGS.password_length,
        min=1,
        max=4096,
        help="The length of each password",
    ),
    numbers: bool = typer.Option(
        DEFAULT_SETTINGS.numbers,
        "--numbers/--no-numbers",
        help="Include digits",
    ),
    lowercase: bool = typer.Option(
        DEFAULT_SETTINGS.lowercase,
        "--lowercase/--no-lowercase",
        help="Include lowercase letters",
    ),
    uppercase: bool = typer.Option(
        DEFAULT_SETTINGS.uppercase,
        "--uppercase/--no-uppercase",
        help="Include uppercase letters",
    ),
    symbols: bool = typer.Option(
        DEFAULT_SETTINGS.symbols,
        "--symbols/--no-symbols",
        help="Include symbols",
    ),
    spaces: bool = typer.Option(
        DEFAULT_SETTINGS.spaces,
        "--spaces/--no-spaces",
        help="Include spaces",
    ),
    exclude_similar: bool = typer.Option(
        DEFAULT_SETTINGS.exclude_similar,
        "--exclude-similar/--no-exclude-similar",
        help="Exclude visually similar characters",
    ),
    strict: bool = typer.Option(
        DEFAULT_SETTINGS.strict,
        "--strict/--no-strict",
        help="Require every enabled character class in each password",
    ),
    memory_cost: int = typer.Option(
        default=DEFAULT_SETTINGS.memory_cost,
        help="Argon2 memory cost in KiB",
    ),
    time_cost: int = typer.Option(
        default=DEFAULT_SETTINGS.time_cost,
        help="Argon2 time cost (passes)",
    ),
    parallelism: int = typer.Option(
        default=DEFAULT_SETTINGS.parallelism,
        help="Argon2 parallelism (lanes)",
    ),
    output_len: int = typer.Option(
        default=DEFAULT_SETTINGS.output_len,
        help="Argon2 digest length in bytes",
    ),
    salt_len: int = typer.Option(
        default=DEFAULT_SETTINGS.salt_len,
        help="Salt length in bytes",
    ),
    workers: int = typer.Option(
        default=DEFAULT_SETTINGS.workers,
        min=0,
        max=1024,
        help="Worker threads, 0 for one per CPU",
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Generate a batch of passwords and print their hashes."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    configure_logging(log_level.value)
    logger = logging.getLogger(__name__)
    settings = Settings(
        batch_size=batch_size,
        password_length=length,
        numbers=numbers,
        lowercase=lowercase,
        uppercase=uppercase,
        symbols=symbols,
        spaces=spaces,
        exclude_similar=exclude_similar,
        strict=strict,
        workers=workers,
        memory_cost=memory_cost,
        time_cost=time_cost,
        parallelism=parallelism,
        output_len=output_len,
        salt_len=salt_len,
    )
    logger.debug("Effective settings: %s", settings.model_dump_json(indent=2))
    try:
        hasher = settings.get_hasher()
    except ParamError as error:
        typer.secho(
            f"Invalid hashing parameters: {error}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=2) from error
    dispatcher = BatchDispatcher(hasher, max_workers=settings.get_max_workers())
    try:
        records = dispatcher.run(settings.batch_size, settings.get_policy())
    except PassbatchError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    for record in records:
        typer.echo(f"{HASH_OUTPUT_PREFIX}{record}")
    typer.secho(COMPLETION_MESSAGE, fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
