"""articlegroups shell — line-oriented commands over one in-memory registry.

Reads commands from stdin, one per line, and runs each against a single
`ArticleGroupManager` that lives for the length of the session. Lines are
split with shell quoting rules, so names with spaces must be quoted:

    create "Java Basics" "Introductory Java articles"
    add 1 101
    search java
    stats

Behavior
- Results go to **stdout**; notices and errors go to **stderr**.
- Blank lines are skipped. An unquoted word starting with ``#`` comments
  out the rest of the line; ``C#`` or a quoted ``"#1"`` is an ordinary word.
- ``exit`` or ``quit`` ends the session, as does end of input.
- A failing line never ends the session: unknown ids, bad usage and invalid
  names or descriptions are reported and the next line is read.
- ``clear`` asks for confirmation unless ``--force`` is given.
"""

from __future__ import annotations

import logging
import shlex
import sys
from dataclasses import asdict

import click

from articlegroups.domain.article_group import ArticleGroup
from articlegroups.domain.errors import DomainError
from articlegroups.service_layer import ArticleGroupManager

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

PROMPT = "articlegroups> "
EXIT_WORDS = frozenset({"exit", "quit"})

CLEAR_ALL_WARNING = (
    "This will delete every article group and restart ids at 1.\n"
    "This cannot be undone."
)


def _group_line(group: ArticleGroup) -> str:
    return f"{group.group_id}\t{group.name}\t{group.article_count()} article(s)"


def _echo_groups(groups: list[ArticleGroup], empty_message: str) -> None:
    if not groups:
        warn(empty_message)
    for group in groups:
        click.echo(_group_line(group))


def _not_found(group_id: int) -> click.ClickException:
    return click.ClickException(f"Group {group_id} not found.")


def split_line(line: str) -> list[str]:
    """Split a shell line into words using shell quoting rules.

    An unquoted word starting with ``#`` begins a comment that runs to the
    end of the line. A ``#`` inside a word (``C#``) or inside quotes
    (``"#1 tips"``) is kept.

    Raises:
        ValueError: If a quotation is not closed.
    """
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    words: list[str] = []
    # the lexer stops right after the whitespace that ends a word
    while not line[lexer.instream.tell() :].lstrip().startswith("#"):
        if (word := lexer.get_token()) is None:
            break
        words.append(word)
    return words


@click.group()
def commands() -> None:
    """Commands available inside the articlegroups shell."""


@commands.command()
@click.argument("name")
@click.argument("description")
@click.pass_obj
def create(manager: ArticleGroupManager, name: str, description: str) -> None:
    """Create a group and print its id."""
    group = manager.create_group(name, description)
    click.echo(group.group_id)
    success(f"Created group {group.group_id} ({group.name}).")


@commands.command()
@click.argument("group_id", type=int)
@click.pass_obj
def show(manager: ArticleGroupManager, group_id: int) -> None:
    """Show one group and its articles."""
    if (group := manager.get_group(group_id)) is None:
        raise _not_found(group_id)
    click.echo(f"id         : {group.group_id}")
    click.echo(f"name       : {group.name}")
    click.echo(f"description: {group.description}")
    click.echo(f"articles   : {', '.join(map(str, group.article_ids)) or '-'}")


@commands.command(name="list")
@click.pass_obj
def list_groups(manager: ArticleGroupManager) -> None:
    """List every group in creation order."""
    _echo_groups(manager.get_all_groups(), "No groups yet.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("name")
@click.pass_obj
def rename(manager: ArticleGroupManager, group_id: int, name: str) -> None:
    """Change the name of a group."""
    if not manager.update_group_name(group_id, name):
        raise _not_found(group_id)
    success(f"Renamed group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("description")
@click.pass_obj
def describe(manager: ArticleGroupManager, group_id: int, description: str) -> None:
    """Change the description of a group."""
    if not manager.update_group_description(group_id, description):
        raise _not_found(group_id)
    success(f"Updated description of group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("name")
@click.argument("description")
@click.pass_obj
def update(
    manager: ArticleGroupManager, group_id: int, name: str, description: str
) -> None:
    """Change both name and description of a group."""
    if not manager.update_group(group_id, name, description):
        raise _not_found(group_id)
    success(f"Updated group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.pass_obj
def delete(manager: ArticleGroupManager, group_id: int) -> None:
    """Delete a group."""
    if not manager.delete_group(group_id):
        raise _not_found(group_id)
    success(f"Deleted group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("article_id", type=int)
@click.pass_obj
def add(manager: ArticleGroupManager, group_id: int, article_id: int) -> None:
    """Add an article to a group."""
    if not manager.group_exists(group_id):
        raise _not_found(group_id)
    if manager.add_article_to_group(group_id, article_id):
        success(f"Added article {article_id} to group {group_id}.")
    else:
        warn(f"Article {article_id} is already in group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("article_id", type=int)
@click.pass_obj
def remove(manager: ArticleGroupManager, group_id: int, article_id: int) -> None:
    """Remove an article from a group."""
    if not manager.group_exists(group_id):
        raise _not_found(group_id)
    if manager.remove_article_from_group(group_id, article_id):
        success(f"Removed article {article_id} from group {group_id}.")
    else:
        warn(f"Article {article_id} is not in group {group_id}.")


@commands.command()
@click.argument("group_id", type=int)
@click.argument("article_id", type=int)
@click.pass_obj
def contains(manager: ArticleGroupManager, group_id: int, article_id: int) -> None:
    """Print yes or no depending on whether a group holds an article."""
    if not manager.group_exists(group_id):
        raise _not_found(group_id)
    held = manager.group_contains_article(group_id, article_id)
    click.echo("yes" if held else "no")


@commands.command(name="clear-articles")
@click.argument("group_id", type=int)
@click.pass_obj
def clear_articles(manager: ArticleGroupManager, group_id: int) -> None:
    """Remove every article from a group, keeping the group."""
    if not manager.clear_group_articles(group_id):
        raise _not_found(group_id)
    success(f"Cleared articles of group {group_id}.")


@commands.command()
@click.argument("article_id", type=int)
@click.pass_obj
def containing(manager: ArticleGroupManager, article_id: int) -> None:
    """List the groups that hold an article."""
    _echo_groups(
        manager.get_groups_containing_article(article_id),
        f"No group holds article {article_id}.",
    )


@commands.command()
@click.argument("term")
@click.pass_obj
def search(manager: ArticleGroupManager, term: str) -> None:
    """List groups whose name contains TERM (case-insensitive)."""
    _echo_groups(manager.search_groups_by_name(term), f"No group matches {term!r}.")


@commands.command()
@click.pass_obj
def stats(manager: ArticleGroupManager) -> None:
    """Print group and article totals."""
    for key, value in asdict(manager.get_statistics()).items():
        click.echo(f"{key}: {value}")


@commands.command()
@click.option("--force", is_flag=True, help="Clear without confirmation.")
@click.pass_obj
def clear(manager: ArticleGroupManager, force: bool) -> None:
    """Delete every group and restart ids at 1."""
    if not force:
        warn(CLEAR_ALL_WARNING)
        click.confirm("Are you sure you want to proceed?", abort=True)
    manager.clear_all_groups()
    success("All groups cleared.")


def run_line(manager: ArticleGroupManager, line: str) -> bool:
    """Run one shell line against *manager*.

    Args:
        manager: The registry the session works on.
        line: Raw input line.

    Returns:
        bool: False when the line ends the session, True otherwise.
    """
    try:
        argv = split_line(line)
    except ValueError as e:
        error(f"Cannot parse line: {e}")
        return True
    if not argv:
        return True
    if argv[0] in EXIT_WORDS:
        return False
    if argv == ["help"]:
        argv = ["--help"]

    logger.debug("shell: %s", argv)
    try:
        commands.main(args=argv, prog_name="", standalone_mode=False, obj=manager)
    except click.UsageError as e:
        e.show()
    except click.ClickException as e:
        error(e.format_message())
    except click.Abort:
        warn("Aborted.")
    except DomainError as e:
        error(str(e))
    return True


@click.command()
def shell() -> None:
    """Run article group commands read from stdin.

    One command per line; type "help" for the list of commands and "exit"
    to leave. Groups are kept in memory until the session ends.
    """
    manager = ArticleGroupManager()
    stdin = sys.stdin
    interactive = stdin.isatty()
    while True:
        if interactive:
            click.echo(PROMPT, nl=False)
        if not (line := stdin.readline()):
            break
        if not run_line(manager, line):
            break
    logger.debug("Shell session ended with %d group(s)", manager.group_count())
