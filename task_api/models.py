from enum import Enum

from sqlalchemy import Column, DateTime, Enum as SQLEnum, Integer, Text
from task_api.database import Base


class TaskStatus(str, Enum):
    """Closed set of task states; the service enforces no transitions"""
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"
    # Ids are never reused, SQLite included
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    status = Column(SQLEnum(TaskStatus, name="task_status"), nullable=False, default=TaskStatus.PENDING)

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status={self.status})>"
