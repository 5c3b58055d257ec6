from .joke import Joke
from .todo import Todo, TodoCreate, TodoListFilter, TodoUpdate

__all__ = ["Joke", "Todo", "TodoCreate", "TodoListFilter", "TodoUpdate"]
