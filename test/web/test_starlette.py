# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any

from pytest import raises
from starlette.exceptions import HTTPException
from starlette.requests import HTTPConnection

from tagtree.web.starlette import get_path_str, req_path_int


def conn_with(**path_params:Any) -> HTTPConnection:
  return HTTPConnection({'type': 'http', 'path_params': path_params})


def test_get_path_str() -> None:
  assert get_path_str(conn_with(state='enable'), 'state') == 'enable'
  assert get_path_str(conn_with(), 'state') == ''
  with raises(TypeError): get_path_str(conn_with(state=1), 'state')


def test_req_path_int() -> None:
  assert req_path_int(conn_with(todo_id='7'), 'todo_id') == 7
  with raises(HTTPException) as missing: req_path_int(conn_with(), 'todo_id')
  assert missing.value.status_code == 400
  with raises(HTTPException) as invalid: req_path_int(conn_with(todo_id='x'), 'todo_id')
  assert invalid.value.status_code == 400
