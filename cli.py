import typer
from rich.console import Console
from rich.table import Table
from typing import Optional
from datetime import datetime, date

from vocab_srs.database import SessionLocal, init_db
from vocab_srs.crud import (
    create_learner, get_learner,
    add_vocabulary_item, search_vocabulary,
    start_tracking, get_due_items, get_progress_list, get_review_stats,
    submit_review, submit_boolean_review, get_review_logs
)
from vocab_srs.clock import today as current_date
from vocab_srs.errors import SchedulerError, StorageError
from vocab_srs.logging_config import setup_logging
from vocab_srs.schemas import LearnerCreate, VocabularyCreate
from vocab_srs.sm2 import SM2Algorithm

app = typer.Typer(help="Vocabulary review CLI - SM-2 spaced repetition scheduling")
console = Console()

def _as_date(value: Optional[datetime]) -> date:
    if value:
        return value.date()
    return current_date()

def _fail(message: str):
    console.print(f"[red]✗[/red] {message}")
    raise typer.Exit(code=1)

@app.callback()
def main(log_level: Optional[str] = typer.Option(None, help="Logging level (default from settings)")):
    setup_logging(log_level)

@app.command()
def init():
    """Initialize database tables"""
    init_db()
    console.print("[green]✓[/green] Database initialized successfully!")

@app.command()
def add_learner(name: str = typer.Option(..., prompt="Learner name")):
    """Create a learner"""
    db = SessionLocal()
    try:
        learner = create_learner(db, LearnerCreate(name=name))
        console.print(f"[green]✓[/green] Learner created! ID: {learner.id}")
    finally:
        db.close()

@app.command()
def add_word(
    word: str = typer.Option(..., prompt="Word"),
    reading: str = typer.Option(..., prompt="Reading"),
    meaning: str = typer.Option(..., prompt="Meaning"),
    part_of_speech: Optional[str] = typer.Option(None, help="Part of speech (e.g., noun, verb)")
):
    """Add a vocabulary item"""
    db = SessionLocal()
    try:
        item = add_vocabulary_item(db, VocabularyCreate(
            word=word,
            reading=reading,
            meaning=meaning,
            part_of_speech=part_of_speech
        ))
        console.print(f"[green]✓[/green] Added {item.word} ({item.reading}) - ID: {item.id}")
    finally:
        db.close()

@app.command()
def track(
    learner_id: int = typer.Option(..., prompt="Learner ID"),
    item_id: int = typer.Option(..., prompt="Vocabulary item ID")
):
    """Add a vocabulary item to a learner's study set"""
    db = SessionLocal()
    try:
        progress = start_tracking(db, learner_id, item_id)
        console.print(f"[green]✓[/green] Tracking item {item_id} for learner {learner_id}")
        console.print(f"  First review: {progress.next_review}")
    except StorageError as e:
        _fail(str(e))
    finally:
        db.close()

@app.command()
def due(
    learner_id: int,
    limit: Optional[int] = typer.Option(None, help="Maximum items to list"),
    on: Optional[datetime] = typer.Option(None, formats=["%Y-%m-%d"], help="Date to check (YYYY-MM-DD), default: today")
):
    """List vocabulary due for review"""
    db = SessionLocal()
    try:
        check_date = _as_date(on)
        items = get_due_items(db, learner_id, today=check_date, limit=limit)
        if not items:
            console.print(f"[green]Nothing due for learner {learner_id} on {check_date}[/green]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="dim", justify="right")
        table.add_column("Word", style="cyan")
        table.add_column("Meaning", style="green")
        table.add_column("Due Date", style="yellow")
        table.add_column("Days Overdue", style="red", justify="right")

        for progress in items:
            days_overdue = SM2Algorithm.get_days_overdue(progress.next_review, reference_date=check_date)
            table.add_row(
                str(progress.item_id),
                progress.item.word,
                progress.item.meaning[:50],
                str(progress.next_review),
                str(days_overdue) if days_overdue > 0 else "Today"
            )

        console.print(table)
    finally:
        db.close()

@app.command()
def review(
    learner_id: int = typer.Option(..., prompt="Learner ID"),
    word: str = typer.Option(..., prompt="Word (search term)"),
    quality: Optional[int] = typer.Option(None, help="Quality rating 0-5"),
    correct: Optional[bool] = typer.Option(None, "--correct/--incorrect", help="Plain right/wrong answer"),
    review_date: Optional[datetime] = typer.Option(None, formats=["%Y-%m-%d"], help="Review date (YYYY-MM-DD), default: today")
):
    """Record a review and reschedule the word"""
    if quality is None and correct is None:
        _fail("Give either --quality 0-5 or --correct/--incorrect")

    db = SessionLocal()
    try:
        rev_date = _as_date(review_date)

        matches = search_vocabulary(db, word)
        if not matches:
            _fail(f"No vocabulary found matching '{word}'")

        if len(matches) > 1:
            console.print("[yellow]Multiple words found:[/yellow]")
            for i, item in enumerate(matches, 1):
                console.print(f"  {i}. {item.word} ({item.reading}) - {item.meaning}")

            choice = typer.prompt("Select word number", type=int)
            if choice < 1 or choice > len(matches):
                _fail("Invalid selection")
            selected = matches[choice - 1]
        else:
            selected = matches[0]

        if quality is not None:
            outcome = submit_review(db, learner_id, selected.id, quality, today=rev_date)
        else:
            outcome = submit_boolean_review(db, learner_id, selected.id, correct, today=rev_date)

        console.print("[green]✓[/green] Review recorded!")
        console.print(f"  Word: {selected.word} ({selected.reading})")
        console.print(f"  Quality: {outcome.quality}/5 - {SM2Algorithm.describe_quality(outcome.quality)}")
        console.print(f"  Next review: {outcome.state.next_review_date} (in {outcome.state.interval} days)")
        console.print(f"  Easiness: {outcome.state.ease_factor:.2f}")
    except (SchedulerError, StorageError) as e:
        _fail(str(e))
    finally:
        db.close()

@app.command()
def progress(learner_id: int):
    """View review progress for every tracked word"""
    db = SessionLocal()
    try:
        learner = get_learner(db, learner_id)
        if not learner:
            _fail(f"Learner ID {learner_id} not found")

        today = current_date()
        tracked = get_progress_list(db, learner_id)
        console.print(f"\n[bold]Review Progress - {learner.name}[/bold]\n")

        if not tracked:
            console.print("[yellow]No words tracked yet[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Word", style="cyan")
        table.add_column("Reps", justify="right")
        table.add_column("Interval", justify="right")
        table.add_column("Easiness", justify="right")
        table.add_column("Success", justify="right")
        table.add_column("Next Review", style="yellow")

        for item_progress in tracked:
            stats = get_review_stats(item_progress, today=today)
            next_review = str(item_progress.next_review)
            if stats.is_due:
                next_review = f"[red]{next_review} (due)[/red]"
            table.add_row(
                item_progress.item.word,
                str(stats.repetitions),
                f"{stats.current_interval_days}d",
                f"{stats.ease_factor:.2f}",
                f"{stats.success_rate:.0f}% ({stats.correct_reviews}/{stats.total_reviews})",
                next_review
            )

        console.print(table)

        recent = get_review_logs(db, learner_id, limit=5)
        if recent:
            console.print("\n[cyan]Recent Reviews:[/cyan]")
            for log in recent:
                console.print(f"  {log.reviewed_on} - {log.progress.item.word} - quality {log.quality}/5")
    finally:
        db.close()

@app.command()
def qualities():
    """Show the quality scale and review buttons"""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Quality", justify="right")
    table.add_column("Meaning")
    table.add_column("Button", style="cyan")

    buttons = {label.quality: label.label for label in SM2Algorithm.quality_labels()}
    for quality in range(6):
        table.add_row(str(quality), SM2Algorithm.describe_quality(quality), buttons.get(quality, ""))

    console.print(table)

if __name__ == "__main__":
    app()
