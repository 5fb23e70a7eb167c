# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for tree construction and rendering.
'''

from typing import Any


class InvalidAttr(ValueError):
  'Raised when an attribute is constructed with a name, kind, and values that cannot render correctly.'


class VoidContentError(TypeError):
  'Raised when children are supplied to a void element builder.'

  def __init__(self, tag:str, children:tuple) -> None:
    self.tag = tag
    self.children = children
    super().__init__(f'void element cannot have child content: <{tag}>; received {len(children)} children')


class RenderError(Exception):
  '''
  Base class for failures that end a render call.
  `written` is the count of characters or bytes that reached the sink before the failure.
  '''
  written = 0


class SinkMissing(RenderError):
  'No output sink was configured; nothing was written.'

  def __init__(self) -> None:
    super().__init__('render requires an output sink')


class WriteFailure(RenderError):
  '''
  The sink rejected a write. The original exception is chained as `__cause__`.
  Output already accepted by the sink is not retracted.
  '''

  def __init__(self, written:int, chunk:str) -> None:
    self.written = written
    self.chunk = chunk
    super().__init__(f'sink write failed after {written} written')


class UnrecognizedContentKind(RenderError, TypeError):
  'A child is neither `Text` nor `Element`.'

  def __init__(self, content:Any, written:int=0) -> None:
    self.content = content
    self.written = written
    super().__init__(f'not a recognized content kind: {type(content).__name__}; value: {content!r:.64}')
