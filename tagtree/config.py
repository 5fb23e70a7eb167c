# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render-time options. The tree is never modified by configuration; the same tree can be rendered under any number of configs.
'''

from dataclasses import dataclass, field
from io import BufferedIOBase, RawIOBase
from typing import Any, TextIO

from .logfmt import Diagnostics


DEFAULT_INDENT = 4
MAX_INDENT = 255


@dataclass(frozen=True)
class BuildConfig:
  sink:Any = None # Any object with a `write` method; text streams receive `str`, binary streams receive UTF-8 bytes.
  indent:int|None = None # Spaces per depth level; None disables indentation, 0 inserts bare newlines.
  diagnostics:Diagnostics = field(default_factory=Diagnostics)

  @classmethod
  def from_opts(cls, sink:Any=None, indent:bool|int|None=False, diagnostics:TextIO|Diagnostics|None=None) -> 'BuildConfig':
    '''
    `indent` may be False or None (disabled), True (`DEFAULT_INDENT` spaces), or an int between 0 and 255 (enabled at that level).
    `diagnostics` may be a text stream or a `Diagnostics`; by default records are discarded.
    '''
    if not isinstance(diagnostics, Diagnostics): diagnostics = Diagnostics(diagnostics)
    return cls(sink=sink, indent=indent_level(indent), diagnostics=diagnostics)

  @property
  def is_binary(self) -> bool:
    return is_binary_sink(self.sink)


def indent_level(indent:bool|int|None) -> int|None:
  if indent is None or indent is False: return None
  if indent is True: return DEFAULT_INDENT
  if not isinstance(indent, int): raise TypeError(f'indent must be a bool or int; received: {indent!r}')
  if not 0 <= indent <= MAX_INDENT: raise ValueError(f'indent must be between 0 and {MAX_INDENT}; received: {indent}')
  return indent


def is_binary_sink(sink:Any) -> bool:
  'Binary sinks are standard binary streams, or any object that sets a true `is_binary_sink` attribute.'
  return isinstance(sink, (RawIOBase, BufferedIOBase)) or bool(getattr(sink, 'is_binary_sink', False))
