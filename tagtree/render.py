# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Serialization of content trees to HTML text.

`render_chunks` is the depth-first generator that defines the output;
`render` drives it into a sink and reports the result as data, including partial progress on failure.
'''

from io import BytesIO, StringIO
from typing import Any, Iterator, NamedTuple, TextIO

from .attrs import fmt_attrs
from .config import BuildConfig
from .exceptions import RenderError, SinkMissing, UnrecognizedContentKind, WriteFailure
from .logfmt import Diagnostics
from .nodes import Content, Element, Text, VOID
from .semantics import doctype_prefix, document_tag


class RenderResult(NamedTuple):
  'The count of characters (text sinks) or bytes (binary sinks) written, and the error that stopped rendering, if any.'
  written:int
  error:RenderError|None = None

  @property
  def ok(self) -> bool: return self.error is None

  def raise_for_error(self) -> int:
    if self.error is not None: raise self.error
    return self.written


def render_chunks(node:Content, indent:int|None=None) -> Iterator[str]:
  '''
  Yield the rendered text of `node` in output order.
  A root element tagged `html` is preceded by the doctype; nested `html` elements are not.
  If `indent` is not None, a newline and indentation are inserted after the opening tag and before the closing tag
  of each non-void element that has children; siblings are not separated.
  '''
  if isinstance(node, Element) and node.tag == document_tag:
    yield doctype_prefix
  yield from _render(node, indent, depth=1)


def _render(node:Content, indent:int|None, depth:int) -> Iterator[str]:
  'Recursive helper to `render_chunks`. `depth` is the depth of the children of `node`.'

  if isinstance(node, Text):
    yield node.value
    return
  if not isinstance(node, Element): raise UnrecognizedContentKind(node)

  attrs_str = fmt_attrs(node.attrs)
  if node.voidness is VOID: # Children of void elements are never inspected.
    yield f'<{node.tag}{attrs_str}/>'
    return

  yield f'<{node.tag}{attrs_str}>'
  if node.children:
    if indent is not None: yield '\n' + ' ' * (depth * indent)
    for child in node.children:
      yield from _render(child, indent, depth + 1)
    if indent is not None: yield '\n' + ' ' * ((depth - 1) * indent)
  yield f'</{node.tag}>'


def render(node:Content, sink:Any=None, *, indent:bool|int|None=False, diagnostics:TextIO|Diagnostics|None=None) \
 -> RenderResult:
  '''
  Render `node` into `sink`.
  Failures are returned in the result rather than raised:
  * `SinkMissing` if `sink` is None; nothing is written.
  * `WriteFailure` if the sink raises; the original exception is chained as the cause.
  * `UnrecognizedContentKind` if the tree contains an object that is neither `Text` nor `Element`.
  The result count always reflects what the sink accepted before any failure.
  '''
  return render_config(node, BuildConfig.from_opts(sink=sink, indent=indent, diagnostics=diagnostics))


def render_config(node:Content, config:BuildConfig) -> RenderResult:
  result = _write_chunks(node, config)
  tag = node.tag if isinstance(node, Element) else ''
  if result.error is None:
    config.diagnostics.info('element written', tag=tag, bytes=result.written)
  else:
    config.diagnostics.error('render failed', tag=tag, bytes=result.written, error=result.error)
  return result


def _write_chunks(node:Content, config:BuildConfig) -> RenderResult:
  sink = config.sink
  if sink is None: return RenderResult(0, SinkMissing())
  is_binary = config.is_binary
  written = 0
  try:
    for chunk in render_chunks(node, config.indent):
      if not chunk: continue
      data = chunk.encode('utf-8') if is_binary else chunk
      try: n = sink.write(data)
      except Exception as e:
        failure = WriteFailure(written, chunk)
        failure.__cause__ = e
        return RenderResult(written, failure)
      written += len(data) if n is None else n
  except UnrecognizedContentKind as e:
    e.written = written
    return RenderResult(written, e)
  return RenderResult(written)


def render_str(node:Content, *, indent:bool|int|None=False, diagnostics:TextIO|Diagnostics|None=None) -> str:
  'Render the tree into a single string, raising any `RenderError`.'
  buffer = StringIO()
  render(node, buffer, indent=indent, diagnostics=diagnostics).raise_for_error()
  return buffer.getvalue()


def render_bytes(node:Content, *, indent:bool|int|None=False, diagnostics:TextIO|Diagnostics|None=None) -> bytes:
  'Render the tree into UTF-8 bytes, raising any `RenderError`.'
  buffer = BytesIO()
  render(node, buffer, indent=indent, diagnostics=diagnostics).raise_for_error()
  return buffer.getvalue()
