"""API routes for todo management and jokes."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from todoapp.api.dependencies import get_joke_client, get_todo_service
from todoapp.api.models import FilterState, TodoStats
from todoapp.clients.joke_client import JokeApiError, JokeClient
from todoapp.models.joke import Joke
from todoapp.models.todo import Todo, TodoCreate, TodoListFilter, TodoUpdate
from todoapp.services.todo_service import TodoService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/todos", response_model=List[Todo])
def get_todos(
    todo_filter: Optional[TodoListFilter] = Query(
        None, alias="filter", description="all, active or completed; defaults to the current filter"
    ),
    service: TodoService = Depends(get_todo_service),
) -> List[Todo]:
    """Get todos, filtered."""
    return list(service.filtered_todos(todo_filter))


@router.get("/todos/stats", response_model=TodoStats)
def get_todo_stats(service: TodoService = Depends(get_todo_service)) -> TodoStats:
    """Number of uncompleted todos and the overall total."""
    return TodoStats(incomplete=service.incomplete_count(), total=len(service.list_todos()))


@router.get("/todos/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    todo = service.get_todo(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.post("/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a new todo item."""
    return service.add_todo(todo_data.description)


@router.post("/todos/{todo_id}/toggle", response_model=Todo)
def toggle_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Flip the completed flag of a todo."""
    todo = service.toggle_todo(todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.patch("/todos/{todo_id}", response_model=Todo)
def edit_todo(
    todo_id: str,
    todo_data: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Replace the description of a todo."""
    todo = service.edit_todo(todo_id, todo_data.description)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo item. Deleting an unknown id is not an error."""
    service.remove_todo_by_id(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/filter", response_model=FilterState)
def get_filter(service: TodoService = Depends(get_todo_service)) -> FilterState:
    return FilterState(filter=service.get_filter())


@router.put("/filter", response_model=FilterState)
def set_filter(
    state: FilterState,
    service: TodoService = Depends(get_todo_service),
) -> FilterState:
    """Select the filter used when listing todos without one."""
    return FilterState(filter=service.set_filter(state.filter))


@router.get("/jokes/random", response_model=Joke)
async def get_random_joke(client: JokeClient = Depends(get_joke_client)) -> Joke:
    """Fetch a random joke from the upstream API."""
    try:
        return await client.get_joke()
    except JokeApiError as exc:
        logger.warning("Joke fetch failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
