"""Todo resource: domain models and the endpoints of the upstream todo API."""

from pydantic import Field, StrictBool, StrictStr

from typed_api_client.schema import EndpointParameters, NonNegativeNumber, Number, Schema

from .base import EndpointDefinition, HttpMethod


class Todo(Schema):
    user_id: Number = Field(alias="userId")
    id: NonNegativeNumber
    title: StrictStr = Field(min_length=1)
    completed: StrictBool


class NewFeedback(Schema):
    """Feedback left on a todo. Declared for consumers; no endpoint uses it yet."""

    commenter: StrictStr
    stars: Number | None = None
    comment: StrictStr


# -- parameter parts ----------------------------------------------------------


class TodoPath(Schema):
    todo_id: Number = Field(alias="todoId")


class ListTodosQuery(Schema):
    page: NonNegativeNumber = Field(alias="_page")


class CreateTodoBody(Schema):
    title: StrictStr = Field(min_length=1)
    user_id: Number = Field(alias="userId")


class PatchTodoBody(Schema):
    title: StrictStr | None = None
    completed: StrictBool | None = None


class UpdateTodoBody(Schema):
    title: StrictStr
    user_id: Number = Field(alias="userId")
    completed: StrictBool


# -- parameter schemas --------------------------------------------------------


class ListTodosParams(EndpointParameters):
    query: ListTodosQuery


class GetTodoParams(EndpointParameters):
    path: TodoPath


class CreateTodoParams(EndpointParameters):
    body: CreateTodoBody


class PatchTodoParams(EndpointParameters):
    path: TodoPath
    body: PatchTodoBody


class UpdateTodoParams(EndpointParameters):
    path: TodoPath
    body: UpdateTodoBody


class DeleteTodoParams(EndpointParameters):
    path: TodoPath


# -- responses ----------------------------------------------------------------


class CreateTodoResponse(Schema):
    new_todo: Todo = Field(alias="newTodo")


class DeleteTodoResponse(Schema):
    """The API answers a delete with an empty object."""


# -- endpoints ----------------------------------------------------------------

get_todos = EndpointDefinition(
    method=HttpMethod.GET,
    path="/todos",
    parameters=ListTodosParams,
    response=list[Todo],
    summary="List todos, one page at a time",
)

get_todo = EndpointDefinition(
    method=HttpMethod.GET,
    path="/todos/{todoId}",
    parameters=GetTodoParams,
    response=Todo,
    summary="Fetch a single todo",
)

create_todo = EndpointDefinition(
    method=HttpMethod.POST,
    path="/todos",
    parameters=CreateTodoParams,
    response=CreateTodoResponse,
    summary="Create a todo",
)

partially_update_todo = EndpointDefinition(
    method=HttpMethod.PATCH,
    path="/todos/{todoId}",
    parameters=PatchTodoParams,
    response=Todo,
    summary="Update some fields of a todo",
)

update_todo = EndpointDefinition(
    method=HttpMethod.PUT,
    path="/todos/{todoId}",
    parameters=UpdateTodoParams,
    response=Todo,
    summary="Replace a todo",
)

delete_todo = EndpointDefinition(
    method=HttpMethod.DELETE,
    path="/todos/{todoId}",
    parameters=DeleteTodoParams,
    response=DeleteTodoResponse,
    summary="Delete a todo",
)

TODO_ENDPOINTS = (
    get_todos,
    get_todo,
    create_todo,
    partially_update_todo,
    update_todo,
    delete_todo,
)
