"""
Logging utilities for tracking visitor activity across the site.
"""

import logging

from flask import request
from sqlalchemy.exc import SQLAlchemyError

from app.models import LogEntry
from app import db

logger = logging.getLogger(__name__)


def _visitor_desc():
    return f"Visitor {request.remote_addr}" if request.remote_addr else "Anonymous visitor"


def _add_log_entry(project, category, description):
    """Persist a LogEntry. Failures are logged and rolled back, never raised."""
    log_entry = LogEntry(
        project=project,
        category=category,
        description=description
    )
    try:
        db.session.add(log_entry)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to write {category} log entry for {project}: {e}")


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    _add_log_entry(project_name, 'Visit', f"{_visitor_desc()} visited {display_name}")


def log_game_result(status, move_count):
    """
    Log a finished Tic-Tac-Toe game.

    Args:
        status (str): Final status text, e.g. "Winner: X" or "Tie"
        move_count (int): Number of moves played
    """
    _add_log_entry(
        'tic_tac_toe',
        'Game',
        f"{_visitor_desc()} finished a game after {move_count} moves ({status})"
    )
