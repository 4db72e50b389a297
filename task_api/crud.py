from datetime import date, datetime, timedelta
from sqlalchemy import Text, func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from task_api import models, schemas
from task_api.logger import logger
from typing import Optional


class InvalidTaskDateError(ValueError):
    """Raised when a create or update carries the empty sentinel date"""

    def __init__(self, message: str = "Date cannot be empty."):
        super().__init__(message)
        self.message = message


def _check_date(task: schemas.TaskBase) -> None:
    if schemas.is_empty_date(task.date):
        raise InvalidTaskDateError()


def get_tasks(db: Session) -> list[models.Task]:
    """Get all tasks"""
    try:
        return db.query(models.Task).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tasks: {str(e)}")
        raise


def get_task(db: Session, task_id: int) -> Optional[models.Task]:
    """Get a single task by ID"""
    try:
        return db.get(models.Task, task_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching task {task_id}: {str(e)}")
        raise


def _search_text(db: Session, column, fragment: str) -> list[models.Task]:
    # NULL columns never match
    return (
        db.query(models.Task)
        .filter(func.lower(column, type_=Text).contains(fragment.lower(), autoescape=True))
        .all()
    )


def get_tasks_by_title(db: Session, fragment: str) -> list[models.Task]:
    """Case-insensitive substring search on title"""
    try:
        return _search_text(db, models.Task.title, fragment)
    except SQLAlchemyError as e:
        logger.error(f"Error searching tasks by title {fragment!r}: {str(e)}")
        raise


def get_tasks_by_description(db: Session, fragment: str) -> list[models.Task]:
    """Case-insensitive substring search on description"""
    try:
        return _search_text(db, models.Task.description, fragment)
    except SQLAlchemyError as e:
        logger.error(f"Error searching tasks by description {fragment!r}: {str(e)}")
        raise


def get_tasks_by_date(db: Session, day: datetime) -> list[models.Task]:
    """Get tasks dated on the same calendar day as ``day``; time of day is ignored"""
    start = datetime(day.year, day.month, day.day)
    filters = [models.Task.date >= start]
    # The last representable day has no next midnight
    if start.date() < date.max:
        filters.append(models.Task.date < start + timedelta(days=1))
    try:
        return db.query(models.Task).filter(*filters).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tasks for {start.date()}: {str(e)}")
        raise


def get_tasks_by_status(db: Session, status: models.TaskStatus) -> list[models.Task]:
    """Get tasks with exactly the given status"""
    try:
        return db.query(models.Task).filter(models.Task.status == status).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tasks with status {status.value}: {str(e)}")
        raise


def create_task(db: Session, task: schemas.TaskCreate) -> models.Task:
    """Create a new task"""
    _check_date(task)
    try:
        db_task = models.Task(**task.model_dump())
        db.add(db_task)
        db.commit()
        db.refresh(db_task)
        logger.info(f"Created task with ID: {db_task.id}")
        return db_task
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating task: {str(e)}")
        raise


def update_task(
    db: Session,
    task_id: int,
    task: schemas.TaskUpdate
) -> Optional[models.Task]:
    """Update an existing task.

    Returns None when the task does not exist. Title and description are only
    replaced by non-empty values; date and status are always overwritten.
    """
    db_task = get_task(db, task_id)
    if db_task is None:
        return None
    _check_date(task)
    try:
        if task.title:
            db_task.title = task.title
        if task.description:
            db_task.description = task.description
        db_task.date = task.date
        db_task.status = task.status
        db.commit()
        db.refresh(db_task)
        logger.info(f"Updated task with ID: {task_id}")
        return db_task
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating task {task_id}: {str(e)}")
        raise


def delete_task(db: Session, task_id: int) -> Optional[models.Task]:
    """Delete a task"""
    try:
        db_task = get_task(db, task_id)
        if db_task:
            db.delete(db_task)
            db.commit()
            logger.info(f"Deleted task with ID: {task_id}")
        return db_task
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting task {task_id}: {str(e)}")
        raise
