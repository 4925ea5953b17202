"""CLI commands for the school roster.

Commands:
- init-db: create the database schema
- serve: run the Web API with uvicorn
- teachers / students / books: list records
- delete-teacher / delete-student: cascading deletes
- audit: report dangling references
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from schoolroster.config.app_config import load_app_config
from schoolroster.core import book_service, student_service, teacher_service
from schoolroster.core.errors import RosterError
from schoolroster.core.integrity import find_dangling_references
from schoolroster.db.database import init_db

app = typer.Typer(
    name="roster",
    help="Manage teachers, students and books with referential integrity.",
    no_args_is_help=True,
)

console = Console()


def _open_db(db: Path | None) -> None:
    """Point the store at the requested (or configured) database."""
    init_db(db or load_app_config().database.path)


@app.command(name="init-db")
def init_database(
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """Create the database schema if it does not exist."""
    _open_db(db)
    console.print("[green]✓ Database ready[/green]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the Web API."""
    import uvicorn

    uvicorn.run(
        "schoolroster.web.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def teachers(
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """List all teachers."""
    _open_db(db)
    records = teacher_service.list_teachers()

    if not records:
        console.print("[yellow]No teachers yet[/yellow]")
        return

    table = Table(title=f"Teachers ({len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Subject")
    table.add_column("Years", justify="right")
    table.add_column("Email")
    for t in records:
        table.add_row(
            t.teacher_id, t.name, t.subject, str(t.experience_years), t.email or "-"
        )
    console.print(table)


@app.command()
def students(
    teacher: str | None = typer.Option(None, "--teacher", help="Filter by teacher ID"),
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """List students, optionally only those of one teacher."""
    _open_db(db)
    try:
        records = student_service.list_students(teacher_id=teacher)
    except RosterError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    if not records:
        console.print("[yellow]No students found[/yellow]")
        return

    table = Table(title=f"Students ({len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Grade")
    table.add_column("Roll no.")
    table.add_column("Teacher", style="dim")
    for s in records:
        table.add_row(s.student_id, s.name, s.grade, s.roll_number, s.teacher_id or "-")
    console.print(table)


@app.command()
def books(
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """List all books with their assignment counts."""
    _open_db(db)
    records = book_service.list_books()

    if not records:
        console.print("[yellow]No books yet[/yellow]")
        return

    table = Table(title=f"Books ({len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN")
    table.add_column("Assigned", justify="right")
    for b in records:
        table.add_row(b.book_id, b.title, b.author, b.isbn, str(len(b.assigned_students)))
    console.print(table)


@app.command(name="delete-teacher")
def delete_teacher(
    teacher_id: str = typer.Argument(..., help="Teacher ID"),
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """Delete a teacher and unassign their students."""
    _open_db(db)
    try:
        report = teacher_service.delete_teacher(teacher_id)
    except RosterError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Teacher {report.deleted_id} deleted[/green]")
    console.print(f"  [dim]students unassigned:[/dim] {report.repaired}")


@app.command(name="delete-student")
def delete_student(
    student_id: str = typer.Argument(..., help="Student ID"),
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """Delete a student and remove them from all books."""
    _open_db(db)
    try:
        report = student_service.delete_student(student_id)
    except RosterError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Student {report.deleted_id} deleted[/green]")
    console.print(f"  [dim]books updated:[/dim] {report.repaired}")


@app.command()
def audit(
    db: Path | None = typer.Option(None, "--db", help="Path to the SQLite database"),
) -> None:
    """Report references to records that no longer exist."""
    _open_db(db)
    report = find_dangling_references()

    if report.clean:
        console.print("[green]✓ No dangling references[/green]")
        return

    for student_id, teacher_id in report.orphaned_students:
        console.print(
            f"[red]✗ student {student_id} references missing teacher {teacher_id}[/red]"
        )
    for book_id, student_id in report.orphaned_assignments:
        console.print(
            f"[red]✗ book {book_id} references missing student {student_id}[/red]"
        )
    raise typer.Exit(code=1)
