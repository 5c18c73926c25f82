from pathlib import Path

import click

from clictx import __version__
from clictx.errors import ContextExistsError, ContextNotFoundError
from clictx.logger import configure_logging, logger
from clictx.models import Config
from clictx.storage.context_storage import ContextStorage
from clictx.utils.utils import validate_context_name

DEFAULT_DIR = Path.home() / ".clictx" / "contexts"


def _validate_name(ctx, param, value):
    """Click callback rejecting names the store cannot hold safely"""
    try:
        return validate_context_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _storage(ctx) -> ContextStorage:
    return ctx.find_object(ContextStorage)


def _fail(error):
    if isinstance(error, ContextNotFoundError):
        raise click.ClickException(f"Context '{error.name}' not found")
    if isinstance(error, ContextExistsError):
        raise click.ClickException(f"Context '{error.name}' already exists")
    raise click.ClickException(str(error))


@click.group()
@click.version_option(version=__version__)
@click.option("--dir", "storage_dir", type=click.Path(file_okay=False, path_type=Path),
              default=DEFAULT_DIR, envvar="CLICTX_DIR", show_default=True,
              help="Directory holding the context files")
@click.option("--no-symlink", is_flag=True, envvar="CLICTX_NO_SYMLINK",
              help="Record the default context in a plain file instead of a symlink")
@click.option("-v", "--verbose", is_flag=True, envvar="CLICTX_VERBOSE", help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), envvar="CLICTX_LOG_FILE",
              help="Also write debug logs to this file")
@click.pass_context
def cli(ctx, storage_dir, no_symlink, verbose, log_file):
    """CLICTX - manage named CLI contexts"""
    configure_logging("DEBUG" if verbose else "WARNING", log_file=log_file)
    ctx.obj = ContextStorage(storage_dir, disable_symlinks=no_symlink)
    logger.debug("Using context directory {}", storage_dir)


@cli.command("ls")
@click.pass_context
def list_cmd(ctx):
    """List contexts, marking the default with *"""
    storage = _storage(ctx)
    try:
        names = sorted(storage.list_contexts())
        default = storage.get_default()
    except OSError as e:
        _fail(e)

    if not names:
        click.echo("No contexts found")
        return
    for name in names:
        marker = "*" if name == default else " "
        click.echo(f"{marker} {name}")


@cli.command()
@click.argument("name")
@click.pass_context
def show(ctx, name):
    """Print the document of a context"""
    try:
        config = _storage(ctx).load_context(name)
    except (ContextNotFoundError, OSError) as e:
        _fail(e)
    click.echo(config.body, nl=False)


@cli.command("set")
@click.argument("name", callback=_validate_name)
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_context
def set_cmd(ctx, name, source):
    """Save a context from SOURCE (stdin by default)"""
    config = Config(body=source.read())
    try:
        _storage(ctx).set_context(name, config)
    except OSError as e:
        _fail(e)
    click.echo(f"Saved context '{name}'")


@cli.command()
@click.argument("old")
@click.argument("new", callback=_validate_name)
@click.option("--no-overwrite", is_flag=True, help="Fail if NEW already exists")
@click.pass_context
def rename(ctx, old, new, no_overwrite):
    """Rename context OLD to NEW"""
    try:
        _storage(ctx).rename_context(old, new, overwrite=not no_overwrite)
    except (ContextNotFoundError, ContextExistsError, OSError) as e:
        _fail(e)
    click.echo(f"Renamed context '{old}' to '{new}'")


@cli.command("rm")
@click.argument("name")
@click.pass_context
def remove(ctx, name):
    """Delete a context"""
    try:
        _storage(ctx).delete_context(name)
    except OSError as e:
        _fail(e)
    click.echo(f"Deleted context '{name}'")


@cli.command()
@click.pass_context
def default(ctx):
    """Print the default context"""
    try:
        name = _storage(ctx).get_default()
    except OSError as e:
        _fail(e)
    if name:
        click.echo(name)


@cli.command()
@click.argument("name")
@click.pass_context
def use(ctx, name):
    """Make NAME the default context"""
    try:
        _storage(ctx).set_default(name)
    except (ContextNotFoundError, OSError) as e:
        _fail(e)
    click.echo(f"Default context is now '{name}'")


@cli.command()
@click.pass_context
def unset(ctx):
    """Clear the default context"""
    try:
        _storage(ctx).unset_default()
    except OSError as e:
        _fail(e)
    click.echo("Default context cleared")


def main():
    cli(prog_name="clictx")


if __name__ == "__main__":
    main()
