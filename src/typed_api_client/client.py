"""Client facade: one coroutine per HTTP method over an endpoint registry."""

from typing import Any, Literal, Mapping, overload

from typed_api_client.config import ClientOptions, DefaultHeaders
from typed_api_client.dispatcher import dispatch
from typed_api_client.endpoints import HttpMethod, Todo
from typed_api_client.endpoints.todos import CreateTodoResponse, DeleteTodoResponse
from typed_api_client.registry import TODO_REGISTRY, EndpointRegistry
from typed_api_client.schema import EndpointParameters
from typed_api_client.transport import HttpxTransport, Transport

GetPath = Literal["/todos", "/todos/{todoId}"]
PostPath = Literal["/todos"]
PutPath = Literal["/todos/{todoId}"]
PatchPath = Literal["/todos/{todoId}"]
DeletePath = Literal["/todos/{todoId}"]

Params = Mapping[str, Any] | EndpointParameters | None


class ApiClient:
    """Typed client for the endpoints of a registry.

    Example::

        client = ApiClient(ClientOptions(base_url="https://jsonplaceholder.typicode.com"))
        todos = await client.get("/todos", {"query": {"_page": 1}})
    """

    def __init__(
        self,
        options: ClientOptions | Mapping[str, Any],
        registry: EndpointRegistry = TODO_REGISTRY,
        transport: Transport | None = None,
    ):
        self.options = options if isinstance(options, ClientOptions) else ClientOptions.model_validate(options)
        self.registry = registry
        self.transport = transport or HttpxTransport()

    async def request(
        self,
        method: HttpMethod | str,
        path: str,
        params: Params = None,
        *,
        headers: DefaultHeaders | Mapping[str, str] | None = None,
    ) -> Any:
        endpoint = self.registry.lookup(method, path)
        return await dispatch(endpoint, params, self.options, self.transport, headers)

    @overload
    async def get(
        self, path: Literal["/todos"], params: Params = None, *, headers: DefaultHeaders | None = None
    ) -> list[Todo]: ...

    @overload
    async def get(
        self, path: Literal["/todos/{todoId}"], params: Params = None, *, headers: DefaultHeaders | None = None
    ) -> Todo: ...

    async def get(self, path: GetPath, params: Params = None, *, headers: DefaultHeaders | None = None) -> list[Todo] | Todo:
        return await self.request(HttpMethod.GET, path, params, headers=headers)

    async def post(self, path: PostPath, params: Params = None, *, headers: DefaultHeaders | None = None) -> CreateTodoResponse:
        return await self.request(HttpMethod.POST, path, params, headers=headers)

    async def put(self, path: PutPath, params: Params = None, *, headers: DefaultHeaders | None = None) -> Todo:
        return await self.request(HttpMethod.PUT, path, params, headers=headers)

    async def patch(self, path: PatchPath, params: Params = None, *, headers: DefaultHeaders | None = None) -> Todo:
        return await self.request(HttpMethod.PATCH, path, params, headers=headers)

    async def delete(self, path: DeletePath, params: Params = None, *, headers: DefaultHeaders | None = None) -> DeleteTodoResponse:
        return await self.request(HttpMethod.DELETE, path, params, headers=headers)
