"""Terminal list views for posts, todos and users."""

from rich.table import Table
from rich.text import Text

from client.models import Post, Todo, User

# Lists only show the first page of items
MAX_ITEMS = 9


def posts_table(posts: list[Post]) -> Table:
    table = Table(title=f"Posts ({len(posts)})", expand=True)
    table.add_column("ID", style="dim", width=5)
    table.add_column("Title", style="bold")
    table.add_column("Body", ratio=2)
    table.add_column("User", width=6)

    for post in posts[:MAX_ITEMS]:
        body = post.body[:80] + "..." if len(post.body) > 80 else post.body
        table.add_row(str(post.id), Text(post.title), Text(body), str(post.userId))
    return table


def todos_table(todos: list[Todo]) -> Table:
    table = Table(title=f"Todos ({len(todos)})", expand=True)
    table.add_column("ID", style="dim", width=5)
    table.add_column("Done", width=4)
    table.add_column("Todo")
    table.add_column("User", width=6)

    for item in todos[:MAX_ITEMS]:
        if item.completed:
            text = Text(item.todo, style="strike dim")
            mark = "[green]x[/green]"
        else:
            text = Text(item.todo)
            mark = " "
        table.add_row(str(item.id), mark, text, str(item.userId))
    return table


def users_table(users: list[User]) -> Table:
    table = Table(title=f"Users ({len(users)})", expand=True)
    table.add_column("ID", style="dim", width=5)
    table.add_column("Name", style="bold")
    table.add_column("Username")
    table.add_column("Email")
    table.add_column("Phone")

    # Upstream strings go in as Text so brackets are not read as markup
    for user in users[:MAX_ITEMS]:
        table.add_row(
            str(user.id),
            Text(f"{user.firstName} {user.lastName}"),
            Text(f"@{user.username}"),
            Text(user.email),
            Text(user.phone or "—"),
        )
    return table
