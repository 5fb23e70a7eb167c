# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, Mapping

from starlette.background import BackgroundTask
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException
from starlette.requests import HTTPConnection
from starlette.responses import HTMLResponse, StreamingResponse

from ..config import indent_level
from ..logfmt import Diagnostics
from ..nodes import Content
from ..render import render_chunks, render_str


class HtmlResponse(HTMLResponse):

  def __init__(self,
    content:Content,
    *,
    status_code:int=200,
    headers:Mapping[str,str]|None=None,
    background:BackgroundTask|None=None,
    indent:bool|int=False,
    diagnostics:Diagnostics|None=None,
    **kwargs:Any) -> None:

    '''
    An HTML response, rendered eagerly so that render errors are raised before any response is sent.
    '''

    super().__init__(
      status_code=status_code,
      content=render_str(content, indent=indent, diagnostics=diagnostics),
      headers=headers,
      background=background,
      **kwargs)


class StreamingHtmlResponse(StreamingResponse):

  def __init__(self,
    content:Content,
    *,
    status_code:int=200,
    headers:Mapping[str,str]|None=None,
    background:BackgroundTask|None=None,
    indent:bool|int=False) -> None:

    '''
    An HTML response that streams the rendered chunks in order.
    A render error raised mid-stream aborts the response after the preceding chunks have been sent.
    '''

    super().__init__(
      content=render_chunks(content, indent=indent_level(indent)),
      status_code=status_code,
      headers=headers,
      media_type='text/html',
      background=background)


class HtmxResponse(HTMLResponse):

  def __init__(self,
    *content:Content,
    status_code:int=200,
    headers:Mapping[str,str]|None=None,
    background:BackgroundTask|None=None,
    cache:bool=False,
    hx_push:str='',
    hx_refresh:bool=False,
    hx_redirect:str='',
    hx_trigger:str='',
    **kwargs:Any) -> None:

    '''
    A response for one or more htmx fragments.
    If `cache` is false the response will contain a `Cache-Control: no-store` header.
    '''

    headers = {**headers} if headers else {}
    if not cache: headers['Cache-Control'] = 'no-store'
    if hx_refresh: headers['HX-Refresh'] = 'true'
    if hx_push: headers['HX-Push'] = hx_push
    if hx_redirect: headers['HX-Redirect'] = hx_redirect
    if hx_trigger: headers['HX-Trigger'] = hx_trigger

    super().__init__(
      status_code=status_code,
      content='\n\n'.join(render_str(c) for c in content),
      headers=headers,
      background=background,
      **kwargs)


# Path parameter access.

def get_path_str(conn:HTTPConnection, key:str) -> str:
  '''
  Get a str value from a path parameter, or return the empty string.
  If the returned value is not a string then raise a TypeError.
  '''
  try: s = conn.path_params[key]
  except KeyError: return ''
  if not isinstance(s, str): raise TypeError(s)
  return s


def req_path_int(conn:HTTPConnection, key:str) -> int:
  '''
  Get an int value from a path parameter.
  If the key is not present or the value is not an int, raise a 400 exception.
  '''
  try: return int(conn.path_params[key])
  except KeyError as e: raise HTTPException(400, f'Missing path parameter: {key}') from e
  except ValueError as e: raise HTTPException(400, f'Path parameter must be an integer: {key}') from e


# Form parameter access.

def req_form_str(form_data:FormData, key:str) -> str:
  '''
  Get a required string value from a FormData (e.g. request.form).
  If the key is not present or the value is not a str (i.e. UploadFile), raise a 400 exception.
  '''
  try: v = form_data[key]
  except KeyError as e: raise HTTPException(400, f'Missing form field: {key!r}') from e
  if not isinstance(v, str): raise HTTPException(400, f'Invalid form field type: {key}={v!r}')
  return v
