from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from task_api import crud, schemas
from task_api.database import get_db
from task_api.models import TaskStatus

router = APIRouter(prefix="/Task", tags=["Task"])


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: crud.InvalidTaskDateError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.get("", response_model=List[schemas.Task])
def get_tasks(db: Session = Depends(get_db)):
    """Get all tasks"""
    return crud.get_tasks(db)


@router.get(
    "/{task_id}",
    response_model=schemas.Task,
    responses={404: {"description": "Task not found"}},
)
def get_task_by_id(task_id: int, db: Session = Depends(get_db)):
    """Get a specific task by ID"""
    db_task = crud.get_task(db, task_id=task_id)
    if db_task is None:
        return _not_found()
    return db_task


@router.get("/bytitle/{title}", response_model=List[schemas.Task])
def get_tasks_by_title(title: str, db: Session = Depends(get_db)):
    """Find tasks whose title contains the fragment, ignoring case"""
    return crud.get_tasks_by_title(db, title)


@router.get("/bydescription/{description}", response_model=List[schemas.Task])
def get_tasks_by_description(description: str, db: Session = Depends(get_db)):
    """Find tasks whose description contains the fragment, ignoring case"""
    return crud.get_tasks_by_description(db, description)


@router.get(
    "/bydate/{date}",
    response_model=List[schemas.Task],
    responses={404: {"description": "No task on that day"}},
)
def get_tasks_by_date(date: str, db: Session = Depends(get_db)):
    """Find tasks on the given calendar day; the time of day is ignored"""
    try:
        day = schemas.parse_task_date(date)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date.")

    tasks = crud.get_tasks_by_date(db, day)
    if not tasks:
        return _not_found()
    return tasks


@router.get("/bystatus/{status}", response_model=List[schemas.Task])
def get_tasks_by_status(status: TaskStatus, db: Session = Depends(get_db)):
    """Find tasks with the given status"""
    return crud.get_tasks_by_status(db, status)


@router.post(
    "",
    response_model=schemas.Task,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Date cannot be empty"}},
)
def create_task(
    request: Request,
    response: Response,
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
):
    """Create a new task"""
    try:
        db_task = crud.create_task(db=db, task=task)
    except crud.InvalidTaskDateError as e:
        raise _bad_request(e)

    response.headers["Location"] = str(request.url_for("get_task_by_id", task_id=db_task.id))
    return db_task


@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"description": "Date cannot be empty"}, 404: {"description": "Task not found"}},
)
def update_task(task_id: int, task: schemas.TaskUpdate, db: Session = Depends(get_db)):
    """Update a task"""
    try:
        db_task = crud.update_task(db, task_id=task_id, task=task)
    except crud.InvalidTaskDateError as e:
        raise _bad_request(e)

    if db_task is None:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Task not found"}},
)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """Delete a task"""
    if crud.delete_task(db, task_id=task_id) is None:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
