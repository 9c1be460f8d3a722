"""CLI command groups for Pulseboard.

Command groups:
- project: Project management (create, list, show, update, delete, members)
- task: Task management (add, status, remove)
- dashboard: Statistics and timeline

Each command group is a Typer app registered with the main app
using app.add_typer().
"""

from pulseboard.interfaces.cli.commands import dashboard, project, task

__all__ = ["project", "task", "dashboard"]
