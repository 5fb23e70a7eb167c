# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
An htmx to-do list served by Starlette, backed by an in-memory store.
'''

from dataclasses import dataclass, replace
from http import HTTPStatus

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from ..attrs import attr, class_names, id_, is_checked, lang, name, placeholder, QUOTED, src, type_
from ..htmx import hx_on, hx_post, hx_swap, hx_target
from ..nodes import Content, escaped_text, raw_text
from ..tags import Body, Button, Div, Form, Head, Html, Input, Script, Table, Th, Title, Tr
from .starlette import get_path_str, HtmlResponse, HtmxResponse, req_form_str, req_path_int


htmx_cdn = 'https://unpkg.com/htmx.org@1.9.9'
tailwind_cdn = 'https://cdn.tailwindcss.com'

list_container_id = 'todo-list-tb-container'


@dataclass(frozen=True)
class Todo:
  id:int
  title:str
  is_checked:bool = False


class TodoStore:
  'In-memory to-do records, keyed by insertion index.'

  def __init__(self) -> None:
    self.todos:list[Todo] = []

  def add(self, title:str) -> Todo:
    todo = Todo(id=len(self.todos), title=title)
    self.todos.append(todo)
    return todo

  def update(self, todo_id:int, is_checked:bool) -> Todo:
    todo = replace(self.get(todo_id), is_checked=is_checked)
    self.todos[todo_id] = todo
    return todo

  def get(self, todo_id:int) -> Todo:
    if not 0 <= todo_id < len(self.todos): raise KeyError(todo_id)
    return self.todos[todo_id]

  def get_all(self) -> list[Todo]:
    return list(self.todos)


# Views.

def page_index(*partials:Content) -> Content:
  return Html(lang('en'))(
    Head()(
      Title()(raw_text('Todo List')),
      Script(src(htmx_cdn), attr('crossorigin', QUOTED, 'anonymous'))(),
      Script(src(tailwind_cdn))(),
    ),
    Body(class_names('h-100 w-full flex items-center justify-center bg-teal-lightest font-sans'))(
      Div()(*partials)))


def todo_list(todos:list[Todo]) -> Content:
  container = Div(id_(list_container_id))
  if not todos: return container()
  return container(
    Table(class_names('w-full whitespace-nowrap'))(*(todo_row(t) for t in todos)))


def todo_row(todo:Todo) -> Content:
  toggle = "fetch(`/todo/${this.checked ? 'enable' : 'disable'}/${this.id}`, {method: 'PUT'})"
  return Tr()(
    Th(class_names('h-10 border border-gray-100 rounded'))(
      Input(type_('checkbox'), id_(str(todo.id)), is_checked(todo.is_checked), hx_on('click', toggle))),
    Th()(escaped_text(todo.title)))


def add_todo_form() -> Content:
  return Form(hx_post('/todo'), hx_target('#' + list_container_id), hx_swap('outerHTML'))(
    Div(class_names('flex-column'))(
      Input(
        name('task'),
        placeholder('Your task name'),
        class_names('shadow appearance-none border rounded w-full py-2 px-3 mr-4 text-grey-darker')),
      Div(class_names('flex w-full items-center justify-center p-1'))(
        Button(
          class_names('p-2 border-2 rounded text-teal border-teal hover:text-white hover:bg-teal'),
          type_('submit'))(raw_text('Submit')))))


# Endpoints.

def create_app(store:TodoStore|None=None) -> Starlette:
  if store is None: store = TodoStore()

  async def index(request:Request) -> Response:
    return HtmlResponse(page_index(add_todo_form(), todo_list(store.get_all())))

  async def add(request:Request) -> Response:
    form = await request.form()
    store.add(req_form_str(form, 'task'))
    return HtmxResponse(todo_list(store.get_all()))

  async def update(request:Request) -> Response:
    state = get_path_str(request, 'state')
    if state not in ('enable', 'disable'): raise HTTPException(HTTPStatus.BAD_REQUEST, f'Invalid state: {state!r}')
    todo_id = req_path_int(request, 'todo_id')
    try: store.update(todo_id, state == 'enable')
    except KeyError as e: raise HTTPException(HTTPStatus.BAD_REQUEST, f'Todo not found: {todo_id}') from e
    return Response(status_code=HTTPStatus.OK)

  app = Starlette(routes=[
    Route('/', index, methods=['GET']),
    Route('/todo', add, methods=['POST']),
    Route('/todo/{state}/{todo_id}', update, methods=['PUT']),
  ])
  app.state.store = store
  return app


def main() -> None:
  import uvicorn
  uvicorn.run(create_app(), host='localhost', port=8080)


if __name__ == '__main__': main()
