# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from pytest import raises
from starlette.testclient import TestClient

from tagtree.render import render_str
from tagtree.web.helloapp import app as hello_app
from tagtree.web.todoapp import create_app, Todo, todo_list, TodoStore


def test_store() -> None:
  store = TodoStore()
  assert store.add('a') == Todo(0, 'a')
  assert store.add('b') == Todo(1, 'b')
  assert store.update(1, True) == Todo(1, 'b', True)
  assert store.get(1).is_checked
  assert store.get_all() == [Todo(0, 'a'), Todo(1, 'b', True)]
  with raises(KeyError): store.get(2)
  with raises(KeyError): store.update(-1, True)


def test_todo_list_view() -> None:
  assert render_str(todo_list([])) == '<div id="todo-list-tb-container"></div>'
  html = render_str(todo_list([Todo(0, 'milk & eggs', True)]))
  assert html.startswith('<div id="todo-list-tb-container"><table class="w-full whitespace-nowrap"><tr>')
  assert '<input type="checkbox" id="0" checked hx-on:click="' in html
  assert '<th>milk &amp; eggs</th>' in html


def test_unchecked_row_has_no_checked_attr() -> None:
  html = render_str(todo_list([Todo(3, 't')]))
  assert '<input type="checkbox" id="3" hx-on:click="' in html
  assert 'checked ' not in html.replace('this.checked', '')


def test_app_flow() -> None:
  store = TodoStore()
  client = TestClient(create_app(store))

  res = client.get('/')
  assert res.status_code == 200
  assert res.headers['content-type'].startswith('text/html')
  assert res.text.startswith('<!DOCTYPE html><html lang="en"><head><title>Todo List</title>')
  assert 'hx-post="/todo"' in res.text

  res = client.post('/todo', data={'task': 'write tests'})
  assert res.status_code == 200
  assert res.headers['cache-control'] == 'no-store'
  assert res.text.startswith('<div id="todo-list-tb-container"><table')
  assert '<th>write tests</th>' in res.text
  assert store.get_all() == [Todo(0, 'write tests')]

  assert client.put('/todo/enable/0').status_code == 200
  assert store.get(0).is_checked
  assert client.put('/todo/disable/0').status_code == 200
  assert not store.get(0).is_checked

  assert client.put('/todo/enable/7').status_code == 400
  assert client.put('/todo/toggle/0').status_code == 400
  assert client.put('/todo/enable/x').status_code == 400
  assert client.post('/todo', data={}).status_code == 400


def test_hello_app() -> None:
  res = TestClient(hello_app).get('/')
  assert res.status_code == 200
  assert res.text == '<!DOCTYPE html><html lang="en"><div class="container">Hello World!</div></html>'
