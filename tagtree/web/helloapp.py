# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from ..attrs import class_names, lang
from ..nodes import Content, raw_text
from ..tags import Div, Html
from .starlette import StreamingHtmlResponse


def hello_world_view() -> Content:
  return Html(lang('en'))(
    Div(class_names('container'))(
      raw_text('Hello World!')))


async def hello(request:Request) -> Response:
  return StreamingHtmlResponse(hello_world_view())


app = Starlette(routes=[Route('/', hello, methods=['GET'])])


def main() -> None:
  import uvicorn
  uvicorn.run(app, host='localhost', port=8080)


if __name__ == '__main__': main()
